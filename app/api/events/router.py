# app/api/events/router.py
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.db.handle import DatabaseDep
from app.pages import templates

from .schemas import ArtistScoreResponse, UserEventFeedResponse
from .scoring import score_by_artist
from .service import load_user_event_feed

router = APIRouter(prefix="/events", tags=["events"])
page_router = APIRouter(prefix="/events", tags=["pages"])


@router.get("/feed", response_model=UserEventFeedResponse)
async def user_event_feed(db: DatabaseDep):
    return await load_user_event_feed(db)


@router.get("/scores", response_model=ArtistScoreResponse)
async def artist_scores(db: DatabaseDep):
    page = await load_user_event_feed(db)
    return {"data": [s.to_dict() for s in score_by_artist(page["data"])]}


# ---------------- Page ----------------
@page_router.get("/engagement", response_class=HTMLResponse)
async def engagement_page(request: Request, db: DatabaseDep):
    page = await load_user_event_feed(db)
    context = {
        "data": page["data"],
        "scores": [s.to_dict() for s in score_by_artist(page["data"])],
    }
    return templates.TemplateResponse(request, "events_engagement.html", context)
