"""
Favorite routes: list, add, remove and check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from ..auth import UserContext, get_current_user
from ..config import get_store
from ..schemas import (
    ArticleResponse,
    ArticleRefRequest,
    FavoriteResponse,
    FavoriteCheckResponse,
)
from ..store import Store

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[ArticleResponse]:
    """Get the user's favorite articles, newest first."""
    return [ArticleResponse.from_db(a) for a in store.get_user_favorites(user.user_id)]


@router.post("", status_code=201)
async def add_favorite(
    request: ArticleRefRequest,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> FavoriteResponse:
    """Favorite an article. Repeated calls insert repeated rows."""
    if not request.article_id:
        raise HTTPException(status_code=400, detail="Article ID is required")

    favorite = store.add_favorite(user.user_id, request.article_id)
    return FavoriteResponse.from_db(favorite)


@router.delete("/{article_id}", status_code=204)
async def remove_favorite(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> Response:
    """Remove a favorite."""
    if not store.remove_favorite(user.user_id, article_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return Response(status_code=204)


@router.get("/{article_id}/check")
async def check_favorite(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> FavoriteCheckResponse:
    """Check whether the user has favorited an article."""
    return FavoriteCheckResponse(is_favorite=store.is_favorite(user.user_id, article_id))
