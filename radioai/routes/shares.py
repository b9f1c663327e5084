"""
Share routes: share-event logging.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..auth import UserContext, get_current_user
from ..config import get_store
from ..schemas import CreateShareRequest, ShareResponse
from ..store import Store

router = APIRouter(prefix="/api/shares", tags=["shares"])


@router.get("")
async def list_shares(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[ShareResponse]:
    """Get the user's share events, newest first."""
    return [ShareResponse.from_db(s) for s in store.get_user_shares(user.user_id)]


@router.post("")
async def create_share(
    request: CreateShareRequest,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> ShareResponse:
    """Log that the user shared an article or playlist."""
    share = store.share_content(
        user_id=user.user_id,
        platform=request.platform,
        article_id=request.article_id or None,
        playlist_id=request.playlist_id or None,
    )
    return ShareResponse.from_db(share)
