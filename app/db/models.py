# app/db/models.py
from typing import Optional
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Artist(SQLModel, table=True):
    __tablename__ = "artists"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    timezone: Optional[str] = None


class Session(SQLModel, table=True):
    """브라우징 세션 1건"""
    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)


class Visit(SQLModel, table=True):
    """아티스트 페이지 방문. start_time/end_time = epoch seconds"""
    __tablename__ = "visits"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="sessions.id", index=True)
    artist_id: int = Field(foreign_key="artists.id", index=True)
    start_time: int
    end_time: int


class UserEvent(SQLModel, table=True):
    __tablename__ = "user_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    artist_id: int = Field(foreign_key="artists.id", index=True)
    event_type: str = Field(index=True)
    # tz-aware UTC (naive datetime 저장 거부됨)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
