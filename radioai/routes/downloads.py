"""
Download routes: offline-availability markers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..auth import UserContext, get_current_user
from ..config import get_store
from ..schemas import ArticleResponse, ArticleRefRequest, DownloadResponse, MessageResponse
from ..store import Store

router = APIRouter(prefix="/api/downloads", tags=["downloads"])


@router.get("")
async def list_downloads(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[ArticleResponse]:
    """Get articles the user marked for offline listening."""
    return [ArticleResponse.from_db(a) for a in store.get_user_downloads(user.user_id)]


@router.post("", status_code=201)
async def add_download(
    request: ArticleRefRequest,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> DownloadResponse:
    """Mark an article as downloaded. Marking twice is harmless."""
    if not request.article_id:
        raise HTTPException(status_code=400, detail="Article ID is required")

    store.add_download(user.user_id, request.article_id)
    return DownloadResponse(
        message="Article downloaded for offline use",
        article_id=request.article_id,
    )


@router.delete("/{article_id}")
async def remove_download(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> MessageResponse:
    """Remove a download marker."""
    if not store.remove_download(user.user_id, article_id):
        raise HTTPException(status_code=404, detail="Download not found")
    return MessageResponse(message="Download removed")
