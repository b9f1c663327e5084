"""
Playlist routes: list, create, delete and resolve articles.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from ..auth import UserContext, get_current_user
from ..config import get_store
from ..exceptions import require_playlist
from ..schemas import ArticleResponse, CreatePlaylistRequest, PlaylistResponse
from ..store import Store

router = APIRouter(prefix="/api/playlists", tags=["playlists"])


@router.get("")
async def list_playlists(
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> list[PlaylistResponse]:
    """Get the user's playlists, newest first."""
    return [PlaylistResponse.from_db(p) for p in store.get_user_playlists(user.user_id)]


@router.post("", status_code=201)
async def create_playlist(
    request: CreatePlaylistRequest,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> PlaylistResponse:
    """Create a playlist owned by the user."""
    playlist = store.create_playlist(
        user_id=user.user_id,
        name=request.name,
        description=request.description,
        article_ids=request.article_ids,
    )
    return PlaylistResponse.from_db(playlist)


@router.get("/{playlist_id}/articles")
async def playlist_articles(
    playlist_id: int,
    store: Annotated[Store, Depends(get_store)]
) -> list[ArticleResponse]:
    """Get a playlist's articles in order. Unknown playlists yield an empty list."""
    return [ArticleResponse.from_db(a) for a in store.get_playlist_articles(playlist_id)]


@router.delete("/{playlist_id}", status_code=204)
async def delete_playlist(
    playlist_id: int,
    store: Annotated[Store, Depends(get_store)],
    user: Annotated[UserContext, Depends(get_current_user)],
) -> Response:
    """Delete one of the user's playlists."""
    playlist = require_playlist(store.get_playlist(playlist_id))
    if playlist.user_id != user.user_id:
        raise HTTPException(status_code=404, detail="Playlist not found")

    store.delete_playlist(playlist_id)
    return Response(status_code=204)
