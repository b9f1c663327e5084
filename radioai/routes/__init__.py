"""
API route modules.
"""

from .articles import router as articles_router
from .favorites import router as favorites_router
from .downloads import router as downloads_router
from .playlists import router as playlists_router
from .history import router as history_router
from .notifications import router as notifications_router
from .media import podcasts_router, live_streams_router
from .shares import router as shares_router
from .misc import router as misc_router

__all__ = [
    "articles_router",
    "favorites_router",
    "downloads_router",
    "playlists_router",
    "history_router",
    "notifications_router",
    "podcasts_router",
    "live_streams_router",
    "shares_router",
    "misc_router",
]
