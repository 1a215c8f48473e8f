# app/db/handle.py
# ------------------------------------------------------------------------------ #
# 요청 단위 DB 핸들 (페이지 로더 전용)
#   db = Database(session)
#   rows = await db.prepare("SELECT ...").all()
#   - 고정 SQL만 실행 → 바인딩 파라미터 없음
#   - 드라이버/엔진 오류는 전부 DatabaseError 로 변환 (재시도 없음)
# ------------------------------------------------------------------------------ #
from __future__ import annotations

from typing import Annotated, Any, Dict, List

from fastapi import Depends
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import SessionDep


class DatabaseError(RuntimeError):
    """Connection failure or query rejected by the engine."""


class PreparedQuery:
    def __init__(self, session: AsyncSession, sql: str):
        self.session = session
        self.sql = sql

    async def all(self) -> List[Dict[str, Any]]:
        try:
            result = await self.session.execute(text(self.sql))
            return [dict(m) for m in result.mappings().all()]
        except (SQLAlchemyError, OSError) as e:
            logger.opt(exception=e).error("Query failed: {}", type(e).__name__)
            raise DatabaseError(str(e)) from e


class Database:
    def __init__(self, session: AsyncSession):
        self.session = session

    def prepare(self, sql: str) -> PreparedQuery:
        return PreparedQuery(self.session, sql)


async def get_database(session: SessionDep) -> Database:
    """Database 의존성 주입"""
    return Database(session)

DatabaseDep = Annotated[Database, Depends(get_database)]
