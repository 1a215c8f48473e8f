# app/api/artists/service.py
from typing import Any, Dict

from loguru import logger

from app.db.handle import Database

# ------------------------------------------------------------------------------ #
# 아티스트별 총 방문 시간 + 순방문자 수
#   - visits/sessions 매칭이 없는 아티스트는 제외 (INNER JOIN)
#   - 순방문자 = DISTINCT user_id (같은 유저의 여러 세션은 1명)
# ------------------------------------------------------------------------------ #
ARTIST_ENGAGEMENT_SUMMARY_SQL = """
SELECT
    a.id AS artist_id,
    a.name AS artist_name,
    SUM(v.end_time - v.start_time) AS total_visit_duration,
    COUNT(DISTINCT s.user_id) AS unique_visitor_count
FROM
    artists a
JOIN
    visits v ON a.id = v.artist_id
JOIN
    sessions s ON v.session_id = s.id
GROUP BY
    a.id
ORDER BY total_visit_duration DESC
"""


async def load_artist_engagement_summary(db: Database) -> Dict[str, Any]:
    data = await db.prepare(ARTIST_ENGAGEMENT_SUMMARY_SQL).all()
    logger.debug("artist engagement summary: {} rows", len(data))
    return {"data": data}
