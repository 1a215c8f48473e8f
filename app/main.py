# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.config import settings
from app.logging import setup_logging
from app.db.handle import DatabaseError
from app.db.session import create_db_and_tables, dispose_engine
from app.api.artists.router import router as artists_router, page_router as artists_page_router
from app.api.events.router import router as events_router, page_router as events_page_router
from app.api.health.router import router as health_router  # /api/health

setup_logging()


# ---------------------------------------------------------------------
# Lifespan: 앱 생명주기 (부팅 시 DB 스키마 생성 / 종료 시 엔진 정리)
# ---------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.SKIP_DB_INIT:
        await create_db_and_tables()
    else:
        logger.info("SKIP_DB_INIT set, skipping DB init")

    yield

    await dispose_engine()


# ---------------------------------------------------------------------
# FastAPI 앱
# ---------------------------------------------------------------------
app = FastAPI(
    title="Artist Engagement Server",
    description="FastAPI + SQLModel page loaders for artist visit and engagement data",
    version="1.0.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------
# CORS 설정
# ---------------------------------------------------------------------
allow_origins = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
}
if settings.FRONTEND_URL:
    allow_origins.add(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------
# 에러 핸들러: DB 실패는 재시도 없이 503
# ---------------------------------------------------------------------
@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError):
    # traceback 은 handle.py 에서 이미 ERROR 로 기록됨
    logger.warning("Database error on {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "database unavailable"})


# ---------------------------------------------------------------------
# 라우터 등록
# ---------------------------------------------------------------------
app.include_router(artists_router, prefix="/api")
app.include_router(events_router, prefix="/api")
app.include_router(health_router, prefix="/api/health", tags=["health"])
app.include_router(artists_page_router)
app.include_router(events_page_router)

@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/")
async def root():
    return {
        "message": "Artist Engagement API",
        "version": "1.0.0",
        "pages": ["/artists/engagement", "/events/engagement"],
        "docs": "/docs",
    }
