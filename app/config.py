# app/config.py
import os
from typing import Dict, Optional

from dotenv import load_dotenv

# .env 로드 (이 모듈이 임포트될 때 즉시)
load_dotenv()

POSITIVE_ENGAGEMENT_EVENTS = (
    "play_track",
    "share_track",
    "add_track_to_playlist",
    "share_artist",
    "follow_artist",
)


def _env_true(v: Optional[str]) -> bool:
    return str(v).lower() in {"1", "true", "yes", "y"}


def parse_engagement_weights(raw: Optional[str]) -> Dict[str, float]:
    """
    "follow_artist=5,share_artist=3" -> {"follow_artist": 5.0, "share_artist": 3.0}
    Events not mentioned keep weight 1.
    """
    weights = {event: 1.0 for event in POSITIVE_ENGAGEMENT_EVENTS}
    if not raw or not raw.strip():
        return weights

    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        event, sep, value = part.partition("=")
        event = event.strip()
        if not sep:
            raise ValueError(f"ENGAGEMENT_WEIGHTS entry without '=': {part!r}")
        if event not in weights:
            raise ValueError(f"ENGAGEMENT_WEIGHTS names unknown event: {event!r}")
        try:
            weights[event] = float(value)
        except ValueError:
            raise ValueError(f"ENGAGEMENT_WEIGHTS weight is not a number: {part!r}") from None
    return weights


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./artist_engagement.db")
    SQL_ECHO: bool = _env_true(os.getenv("SQL_ECHO", "0"))
    DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
    DB_USE_NULLPOOL: bool = _env_true(os.getenv("DB_USE_NULLPOOL", "1"))

    SKIP_DB_INIT: bool = _env_true(os.getenv("SKIP_DB_INIT"))
    # 배포 프론트 도메인 (CORS)
    FRONTEND_URL: Optional[str] = os.getenv("FRONTEND_URL")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # 스코어링 가중치는 SQL/배포 없이 env로 조정
    ENGAGEMENT_WEIGHTS: Dict[str, float] = parse_engagement_weights(os.getenv("ENGAGEMENT_WEIGHTS"))


settings = Settings()
