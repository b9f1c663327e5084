"""
Memory store facade - provides unified access to all repositories.
"""

from datetime import datetime
from typing import Any

from .base import Store
from .tables import MemoryTables
from .article_repository import ArticleRepository
from .user_repository import UserRepository
from .library_repository import LibraryRepository
from .history_repository import HistoryRepository
from .media_repository import MediaRepository
from .share_repository import ShareRepository
from .models import (
    User, Article, Favorite, Playlist, ListeningHistory,
    Podcast, PodcastEpisode, Share, LiveStream,
)
from . import fixtures


class MemoryStore(Store):
    """
    In-memory store backed by process-lifetime maps.

    Construct one per process and inject it where needed. All data is lost
    on restart; a fresh instance is re-seeded with the demo fixtures.
    """

    def __init__(self, seed: bool = True):
        self._tables = MemoryTables()

        # Initialize repositories
        self.users = UserRepository(self._tables)
        self.articles = ArticleRepository(self._tables)
        self.library = LibraryRepository(self._tables, self.articles)
        self.history = HistoryRepository(self._tables, self.articles)
        self.media = MediaRepository(self._tables)
        self.shares = ShareRepository(self._tables)

        if seed:
            fixtures.seed(self)

    # ─────────────────────────────────────────────────────────────
    # User operations (delegated to UserRepository)
    # ─────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.get_by_username(username)

    def create_user(self, username: str, password: str) -> User:
        return self.users.add(username, password)

    # ─────────────────────────────────────────────────────────────
    # Article operations (delegated to ArticleRepository)
    # ─────────────────────────────────────────────────────────────

    def get_articles(
        self, limit: int = 20, offset: int = 0, category: str | None = None
    ) -> list[Article]:
        return self.articles.get_many(limit=limit, offset=offset, category=category)

    def get_article(self, article_id: int) -> Article | None:
        return self.articles.get(article_id)

    def create_article(self, **fields: Any) -> Article:
        return self.articles.add(**fields)

    def update_article(self, article_id: int, **updates: Any) -> Article | None:
        return self.articles.update(article_id, **updates)

    def search_articles(self, query: str, category: str | None = None) -> list[Article]:
        return self.articles.search(query, category)

    def get_trending_articles(self) -> list[Article]:
        return self.articles.get_trending()

    def get_featured_articles(self) -> list[Article]:
        return self.articles.get_featured()

    # ─────────────────────────────────────────────────────────────
    # Favorites & downloads (delegated to LibraryRepository)
    # ─────────────────────────────────────────────────────────────

    def get_user_favorites(self, user_id: int) -> list[Article]:
        return self.library.get_favorite_articles(user_id)

    def add_favorite(self, user_id: int, article_id: int) -> Favorite:
        return self.library.add_favorite(user_id, article_id)

    def remove_favorite(self, user_id: int, article_id: int) -> bool:
        return self.library.remove_favorite(user_id, article_id)

    def is_favorite(self, user_id: int, article_id: int) -> bool:
        return self.library.is_favorite(user_id, article_id)

    def get_user_downloads(self, user_id: int) -> list[Article]:
        return self.library.get_downloaded_articles(user_id)

    def add_download(self, user_id: int, article_id: int) -> bool:
        return self.library.add_download(user_id, article_id)

    def remove_download(self, user_id: int, article_id: int) -> bool:
        return self.library.remove_download(user_id, article_id)

    # ─────────────────────────────────────────────────────────────
    # Playlists (delegated to LibraryRepository)
    # ─────────────────────────────────────────────────────────────

    def get_user_playlists(self, user_id: int) -> list[Playlist]:
        return self.library.get_playlists(user_id)

    def get_playlist(self, playlist_id: int) -> Playlist | None:
        return self.library.get_playlist(playlist_id)

    def create_playlist(
        self,
        user_id: int,
        name: str,
        description: str | None = None,
        article_ids: list[str] | None = None,
    ) -> Playlist:
        return self.library.add_playlist(user_id, name, description, article_ids)

    def update_playlist(self, playlist_id: int, **updates: Any) -> Playlist | None:
        return self.library.update_playlist(playlist_id, **updates)

    def delete_playlist(self, playlist_id: int) -> bool:
        return self.library.delete_playlist(playlist_id)

    def get_playlist_articles(self, playlist_id: int) -> list[Article]:
        return self.library.get_playlist_articles(playlist_id)

    # ─────────────────────────────────────────────────────────────
    # Listening history (delegated to HistoryRepository)
    # ─────────────────────────────────────────────────────────────

    def get_user_history(self, user_id: int) -> list[Article]:
        return self.history.get_articles(user_id)

    def get_user_history_entries(self, user_id: int) -> list[ListeningHistory]:
        return self.history.get_entries(user_id)

    def update_progress(
        self,
        user_id: int,
        article_id: int,
        progress: float = 0,
        completed: bool = False,
        listened_at: datetime | None = None,
    ) -> ListeningHistory:
        return self.history.upsert(user_id, article_id, progress, completed, listened_at)

    def get_progress(self, user_id: int, article_id: int) -> ListeningHistory | None:
        return self.history.get(user_id, article_id)

    # ─────────────────────────────────────────────────────────────
    # Podcasts & live streams (delegated to MediaRepository)
    # ─────────────────────────────────────────────────────────────

    def get_podcasts(self, category: str | None = None) -> list[Podcast]:
        return self.media.get_podcasts(category)

    def get_podcast(self, podcast_id: int) -> Podcast | None:
        return self.media.get_podcast(podcast_id)

    def create_podcast(self, **fields: Any) -> Podcast:
        return self.media.add_podcast(**fields)

    def get_podcast_episodes(self, podcast_id: int) -> list[PodcastEpisode]:
        return self.media.get_episodes(podcast_id)

    def get_episode(self, episode_id: int) -> PodcastEpisode | None:
        return self.media.get_episode(episode_id)

    def add_podcast_episode(self, **fields: Any) -> PodcastEpisode:
        return self.media.add_episode(**fields)

    def get_live_streams(self, category: str | None = None) -> list[LiveStream]:
        return self.media.get_live_streams(category)

    def get_live_stream(self, stream_id: int) -> LiveStream | None:
        return self.media.get_live_stream(stream_id)

    def create_live_stream(self, **fields: Any) -> LiveStream:
        return self.media.add_live_stream(**fields)

    def update_stream_status(
        self, stream_id: int, is_live: bool, listeners: int | None = None
    ) -> LiveStream | None:
        return self.media.update_stream_status(stream_id, is_live, listeners)

    # ─────────────────────────────────────────────────────────────
    # Shares (delegated to ShareRepository)
    # ─────────────────────────────────────────────────────────────

    def share_content(
        self,
        user_id: int,
        platform: str,
        article_id: int | None = None,
        playlist_id: int | None = None,
    ) -> Share:
        return self.shares.add(user_id, platform, article_id, playlist_id)

    def get_user_shares(self, user_id: int) -> list[Share]:
        return self.shares.get_for_user(user_id)
