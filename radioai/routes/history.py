"""
Listening history routes: listened articles and playback progress.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..auth import UserContext, get_current_user
from ..config import get_store
from ..schemas import ArticleResponse, ProgressResponse, UpdateProgressRequest
from ..store import Store

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
async def list_history(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[ArticleResponse]:
    """Get articles the user listened to, most recent first."""
    return [ArticleResponse.from_db(a) for a in store.get_user_history(user.user_id)]


@router.get("/entries")
async def list_history_entries(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[ProgressResponse]:
    """Get raw progress rows, most recent first."""
    return [ProgressResponse.from_db(h) for h in store.get_user_history_entries(user.user_id)]


@router.post("/progress")
async def update_progress(
    request: UpdateProgressRequest,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> ProgressResponse:
    """Record progress for an article, replacing any earlier value."""
    entry = store.update_progress(
        user_id=user.user_id,
        article_id=request.article_id,
        progress=request.progress,
        completed=request.completed,
    )
    return ProgressResponse.from_db(entry)


@router.get("/{article_id}/progress")
async def get_progress(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> ProgressResponse:
    """Get progress for an article, or zero progress if never played."""
    entry = store.get_progress(user.user_id, article_id)
    if entry is None:
        return ProgressResponse(article_id=article_id)
    return ProgressResponse.from_db(entry)
