"""
Media routes: podcasts, podcast episodes and live streams.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..config import get_store
from ..exceptions import require_podcast, require_live_stream
from ..schemas import PodcastResponse, EpisodeResponse, LiveStreamResponse
from ..store import Store

podcasts_router = APIRouter(prefix="/api/podcasts", tags=["podcasts"])
live_streams_router = APIRouter(prefix="/api/live-streams", tags=["live-streams"])


# ─────────────────────────────────────────────────────────────
# Podcasts
# ─────────────────────────────────────────────────────────────

@podcasts_router.get("")
async def list_podcasts(
    store: Annotated[Store, Depends(get_store)],
    category: str | None = None,
) -> list[PodcastResponse]:
    """Get active podcasts, optionally filtered by category."""
    return [PodcastResponse.from_db(p) for p in store.get_podcasts(category)]


@podcasts_router.get("/{podcast_id}")
async def get_podcast(
    podcast_id: int,
    store: Annotated[Store, Depends(get_store)]
) -> PodcastResponse:
    return PodcastResponse.from_db(require_podcast(store.get_podcast(podcast_id)))


@podcasts_router.get("/{podcast_id}/episodes")
async def list_episodes(
    podcast_id: int,
    store: Annotated[Store, Depends(get_store)]
) -> list[EpisodeResponse]:
    """Get a podcast's episodes, newest first."""
    require_podcast(store.get_podcast(podcast_id))
    return [EpisodeResponse.from_db(e) for e in store.get_podcast_episodes(podcast_id)]


# ─────────────────────────────────────────────────────────────
# Live Streams
# ─────────────────────────────────────────────────────────────

@live_streams_router.get("")
async def list_live_streams(
    store: Annotated[Store, Depends(get_store)],
    category: str | None = None,
) -> list[LiveStreamResponse]:
    return [LiveStreamResponse.from_db(s) for s in store.get_live_streams(category)]


@live_streams_router.get("/{stream_id}")
async def get_live_stream(
    stream_id: int,
    store: Annotated[Store, Depends(get_store)]
) -> LiveStreamResponse:
    return LiveStreamResponse.from_db(require_live_stream(store.get_live_stream(stream_id)))
