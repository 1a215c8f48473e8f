"""
Pytest configuration and fixtures.

An in-memory SQLite database (aiosqlite, StaticPool) stands in for the real
database. Foreign keys are not enforced by SQLite by default, which lets the
fixtures seed dangling references on purpose.
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SKIP_DB_INIT", "1")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.db.handle import Database  # noqa: E402
from app.db.models import Artist, Session, User, UserEvent, Visit  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def db(session) -> Database:
    return Database(session)


def _ts(hour: int) -> datetime:
    return datetime(2024, 1, 1, hour, 0, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def seeded(session):
    """
    Artists:
      1 "A": two sessions of alice, 60s + 40s = 100s
      2 "B": one session of bob, 50s
      3 "C": no visits
      4 "D": one visit whose session does not exist
    Events include one for a missing user and one for a missing artist.
    """
    session.add_all([
        Artist(id=1, name="A"),
        Artist(id=2, name="B"),
        Artist(id=3, name="C"),
        Artist(id=4, name="D"),
        User(id=1, username="alice", timezone="UTC"),
        User(id=2, username="bob", timezone="Europe/London"),
        Session(id=1, user_id=1),
        Session(id=2, user_id=1),
        Session(id=3, user_id=2),
    ])
    await session.flush()
    session.add_all([
        Visit(session_id=1, artist_id=1, start_time=0, end_time=60),
        Visit(session_id=2, artist_id=1, start_time=100, end_time=140),
        Visit(session_id=3, artist_id=2, start_time=200, end_time=250),
        Visit(session_id=999, artist_id=4, start_time=0, end_time=500),
        UserEvent(user_id=1, artist_id=1, event_type="play_track", created_at=_ts(10)),
        UserEvent(user_id=1, artist_id=1, event_type="follow_artist", created_at=_ts(11)),
        UserEvent(user_id=2, artist_id=1, event_type="share_track", created_at=_ts(12)),
        UserEvent(user_id=2, artist_id=2, event_type="view_profile", created_at=_ts(13)),
        UserEvent(user_id=999, artist_id=2, event_type="play_track", created_at=_ts(14)),
        UserEvent(user_id=1, artist_id=999, event_type="play_track", created_at=_ts(15)),
    ])
    await session.commit()
    return session
