"""
Store module - in-memory persistence for articles and user libraries.

Uses repository pattern behind a single facade.
"""

from .base import Store
from .memory_store import MemoryStore
from .models import (
    NEWS_CATEGORIES,
    DEFAULT_CATEGORY,
    User,
    Article,
    Favorite,
    Playlist,
    ListeningHistory,
    Podcast,
    PodcastEpisode,
    Share,
    LiveStream,
)

__all__ = [
    "Store",
    "MemoryStore",
    "NEWS_CATEGORIES",
    "DEFAULT_CATEGORY",
    "User",
    "Article",
    "Favorite",
    "Playlist",
    "ListeningHistory",
    "Podcast",
    "PodcastEpisode",
    "Share",
    "LiveStream",
]
