# app/api/events/service.py
from typing import Any, Dict

from loguru import logger

from app.db.handle import Database

# ------------------------------------------------------------------------------ #
# 유저 이벤트 + 유저/아티스트 메타데이터
#   - user_id/artist_id/event_type/created_at 는 null 없음 (정제 불필요)
#   - event_type 필터링과 스코어링은 화면단(scoring.py)에서 처리
#     → 가중치를 바꿔도 SQL 수정/재배포 불필요
#   - ORDER BY 없음: 결과 순서는 DB 엔진 의존
# ------------------------------------------------------------------------------ #
USER_EVENT_FEED_SQL = """
SELECT ue.user_id, ue.artist_id, ue.event_type, ue.created_at,
       u.username, u.timezone, a.name
FROM user_events ue
JOIN users u ON ue.user_id = u.id
JOIN artists a ON ue.artist_id = a.id
"""


async def load_user_event_feed(db: Database) -> Dict[str, Any]:
    data = await db.prepare(USER_EVENT_FEED_SQL).all()
    logger.debug("user event feed: {} rows", len(data))
    return {"data": data}
