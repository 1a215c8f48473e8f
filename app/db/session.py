# app/db/session.py
from typing import AsyncGenerator, Annotated

from fastapi import Depends
from loguru import logger
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from app.config import settings

# 테이블 메타데이터 등록용
from app.db import models  # noqa: F401

DATABASE_URL = settings.DATABASE_URL


def _use_nullpool(url: str, use_nullpool: bool) -> bool:
    # pgbouncer(pooler) 앞단에서는 애플리케이션 풀을 끄는 게 안전
    return "pooler.supabase.com" in url or use_nullpool


def build_engine_kwargs(url: str, *, echo: bool, use_nullpool: bool, pool_recycle: int) -> dict:
    kwargs = dict(
        echo=echo,
        future=True,
        pool_pre_ping=True,
    )
    if _use_nullpool(url, use_nullpool):
        kwargs["poolclass"] = NullPool
    else:
        kwargs["pool_recycle"] = pool_recycle
    return kwargs

# ---------------------------------------------------------------------
# ENGINE
# ---------------------------------------------------------------------
engine_kwargs = build_engine_kwargs(
    DATABASE_URL,
    echo=settings.SQL_ECHO,
    use_nullpool=settings.DB_USE_NULLPOOL,
    pool_recycle=settings.DB_POOL_RECYCLE,
)

engine = create_async_engine(DATABASE_URL, **engine_kwargs)

# ---------------------------------------------------------------------
# SESSION FACTORY
# ---------------------------------------------------------------------
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)

# ---------------------------------------------------------------------
# DEPENDENCY
# ---------------------------------------------------------------------
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

SessionDep = Annotated[AsyncSession, Depends(get_session)]

# ---------------------------------------------------------------------
# DDL (부팅 시 1회)
# ---------------------------------------------------------------------
async def create_db_and_tables() -> None:
    logger.info("Creating database tables on {}", engine.url.render_as_string(hide_password=True))
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready")

async def dispose_engine() -> None:
    logger.info("Disposing database engine")
    await engine.dispose()
