from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel


# ---- Raw feed ----
class UserEventRow(BaseModel):
    user_id: int
    artist_id: int
    event_type: str
    created_at: datetime
    username: str
    timezone: str | None = None
    name: str           # artist name

class UserEventFeedResponse(BaseModel):
    data: list[UserEventRow]

# ---- Scores ----
class ArtistScoreRow(BaseModel):
    artist_id: int
    artist_name: str
    score: float
    event_count: int
    unique_users: int

class ArtistScoreResponse(BaseModel):
    data: list[ArtistScoreRow]
