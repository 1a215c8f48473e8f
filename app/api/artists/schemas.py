from __future__ import annotations
from pydantic import BaseModel


class ArtistEngagementRow(BaseModel):
    artist_id: int
    artist_name: str
    total_visit_duration: int | float   # epoch seconds 합계
    unique_visitor_count: int

class ArtistEngagementResponse(BaseModel):
    data: list[ArtistEngagementRow]
