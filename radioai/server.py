"""
RadioAI API Server

FastAPI application providing endpoints for:
- Articles (list, search, trending, featured, audio, enhancement)
- Favorites, downloads and playlists
- Listening history and playback progress
- Notifications
- Podcasts, live streams and shares
- AI insights and status
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import __version__
from .config import config, state
from .cache import MemoryCache
from .content_service import ContentService
from .exceptions import setup_exception_handlers
from .notification_service import NotificationFeed
from .providers import get_provider_from_env
from .store import MemoryStore
from .routes import (
    articles_router,
    favorites_router,
    downloads_router,
    playlists_router,
    history_router,
    notifications_router,
    podcasts_router,
    live_streams_router,
    shares_router,
    misc_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application resources."""
    # Startup - skip if already initialized (e.g., by tests)
    if state.store is None:
        state.store = MemoryStore(seed=config.SEED_DATA)
        state.audio_cache = MemoryCache(
            max_size=config.AUDIO_CACHE_SIZE,
            default_ttl=config.AUDIO_CACHE_TTL,
        )
        state.notifications = NotificationFeed(state.store)

        state.provider = get_provider_from_env(
            openai_key=config.OPENAI_API_KEY or None,
            anthropic_key=config.ANTHROPIC_API_KEY or None,
            preferred_provider=config.LLM_PROVIDER or None,
            default_model=config.LLM_MODEL or None,
            tts_model=config.TTS_MODEL,
            tts_voice=config.TTS_VOICE,
        )

        if state.provider:
            state.content_service = ContentService(
                provider=state.provider,
                cache=state.audio_cache,
                audio_ttl=config.AUDIO_CACHE_TTL,
                model=config.LLM_MODEL or None,
            )
            logger.info(f"LLM provider initialized: {state.provider.name}")
            if not state.content_service.speech_enabled:
                logger.warning(
                    f"Provider {state.provider.name} cannot synthesize speech. "
                    "Set OPENAI_API_KEY to enable article audio."
                )
        else:
            logger.warning(
                "No LLM API key configured. Set OPENAI_API_KEY or ANTHROPIC_API_KEY. "
                "Enhancement, insights and audio disabled."
            )

    yield


app = FastAPI(
    title="RadioAI API",
    version=__version__,
    lifespan=lifespan
)

setup_exception_handlers(app)

# Include routers
app.include_router(misc_router)
app.include_router(articles_router)
app.include_router(favorites_router)
app.include_router(downloads_router)
app.include_router(playlists_router)
app.include_router(history_router)
app.include_router(notifications_router)
app.include_router(podcasts_router)
app.include_router(live_streams_router)
app.include_router(shares_router)


def main():
    """Run the API server."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()
