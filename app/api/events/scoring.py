# app/api/events/scoring.py
# ------------------------------------------------------------------------------ #
# 긍정 engagement 스코어링 (화면단 전용)
#   - 피드 로더는 행을 그대로 반환, 필터링/가중치는 여기서만 적용
#   - 가중치: settings.ENGAGEMENT_WEIGHTS (env 로 조정)
# ------------------------------------------------------------------------------ #
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.config import POSITIVE_ENGAGEMENT_EVENTS, settings


def is_positive(event_type: Optional[str]) -> bool:
    return event_type in POSITIVE_ENGAGEMENT_EVENTS


def filter_positive(rows: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    return [r for r in rows if is_positive(r.get("event_type"))]


@dataclass
class ArtistScore:
    artist_id: int
    artist_name: str
    score: float = 0.0
    event_count: int = 0
    users: set = field(default_factory=set, repr=False)

    @property
    def unique_users(self) -> int:
        return len(self.users)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "artist_id": self.artist_id,
            "artist_name": self.artist_name,
            "score": self.score,
            "event_count": self.event_count,
            "unique_users": self.unique_users,
        }


def score_by_artist(
    rows: Iterable[Mapping[str, Any]],
    weights: Optional[Mapping[str, float]] = None,
) -> List[ArtistScore]:
    """
    긍정 이벤트만 가중 합산.
    정렬: score 내림차순, 동점이면 아티스트 이름순
    """
    weights = settings.ENGAGEMENT_WEIGHTS if weights is None else weights

    scores: Dict[int, ArtistScore] = {}
    for r in filter_positive(rows):
        aid = r["artist_id"]
        s = scores.get(aid)
        if s is None:
            s = scores[aid] = ArtistScore(artist_id=aid, artist_name=r.get("name") or "")
        s.score += float(weights.get(r["event_type"], 1.0))
        s.event_count += 1
        s.users.add(r["user_id"])

    return sorted(scores.values(), key=lambda s: (-s.score, s.artist_name))
