# app/api/artists/router.py
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.db.handle import DatabaseDep
from app.pages import templates

from .schemas import ArtistEngagementResponse
from .service import load_artist_engagement_summary

router = APIRouter(prefix="/artists", tags=["artists"])
page_router = APIRouter(prefix="/artists", tags=["pages"])


@router.get("/engagement", response_model=ArtistEngagementResponse)
async def artist_engagement(db: DatabaseDep):
    return await load_artist_engagement_summary(db)


# ---------------- Page ----------------
@page_router.get("/engagement", response_class=HTMLResponse)
async def artist_engagement_page(request: Request, db: DatabaseDep):
    page = await load_artist_engagement_summary(db)
    return templates.TemplateResponse(request, "artists_engagement.html", page)
