"""
Store interface shared by every storage backend.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from .models import (
    User, Article, Favorite, Playlist, ListeningHistory,
    Podcast, PodcastEpisode, Share, LiveStream,
)


class Store(ABC):
    """
    Abstract storage backend.

    Lookups of unknown ids return None (or False / an empty list) rather
    than raising. Route handlers depend on this interface only, so a
    persistent backend can replace the in-memory one.
    """

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def create_user(self, username: str, password: str) -> User: ...

    # Articles
    @abstractmethod
    def get_articles(
        self, limit: int = 20, offset: int = 0, category: str | None = None
    ) -> list[Article]: ...

    @abstractmethod
    def get_article(self, article_id: int) -> Article | None: ...

    @abstractmethod
    def create_article(self, **fields: Any) -> Article: ...

    @abstractmethod
    def update_article(self, article_id: int, **updates: Any) -> Article | None: ...

    @abstractmethod
    def search_articles(self, query: str, category: str | None = None) -> list[Article]: ...

    @abstractmethod
    def get_trending_articles(self) -> list[Article]: ...

    @abstractmethod
    def get_featured_articles(self) -> list[Article]: ...

    # Favorites
    @abstractmethod
    def get_user_favorites(self, user_id: int) -> list[Article]: ...

    @abstractmethod
    def add_favorite(self, user_id: int, article_id: int) -> Favorite: ...

    @abstractmethod
    def remove_favorite(self, user_id: int, article_id: int) -> bool: ...

    @abstractmethod
    def is_favorite(self, user_id: int, article_id: int) -> bool: ...

    # Downloads
    @abstractmethod
    def get_user_downloads(self, user_id: int) -> list[Article]: ...

    @abstractmethod
    def add_download(self, user_id: int, article_id: int) -> bool: ...

    @abstractmethod
    def remove_download(self, user_id: int, article_id: int) -> bool: ...

    # Playlists
    @abstractmethod
    def get_user_playlists(self, user_id: int) -> list[Playlist]: ...

    @abstractmethod
    def get_playlist(self, playlist_id: int) -> Playlist | None: ...

    @abstractmethod
    def create_playlist(
        self,
        user_id: int,
        name: str,
        description: str | None = None,
        article_ids: list[str] | None = None,
    ) -> Playlist: ...

    @abstractmethod
    def update_playlist(self, playlist_id: int, **updates: Any) -> Playlist | None: ...

    @abstractmethod
    def delete_playlist(self, playlist_id: int) -> bool: ...

    @abstractmethod
    def get_playlist_articles(self, playlist_id: int) -> list[Article]: ...

    # Listening history
    @abstractmethod
    def get_user_history(self, user_id: int) -> list[Article]: ...

    @abstractmethod
    def get_user_history_entries(self, user_id: int) -> list[ListeningHistory]: ...

    @abstractmethod
    def update_progress(
        self,
        user_id: int,
        article_id: int,
        progress: float = 0,
        completed: bool = False,
        listened_at: datetime | None = None,
    ) -> ListeningHistory: ...

    @abstractmethod
    def get_progress(self, user_id: int, article_id: int) -> ListeningHistory | None: ...

    # Podcasts
    @abstractmethod
    def get_podcasts(self, category: str | None = None) -> list[Podcast]: ...

    @abstractmethod
    def get_podcast(self, podcast_id: int) -> Podcast | None: ...

    @abstractmethod
    def create_podcast(self, **fields: Any) -> Podcast: ...

    @abstractmethod
    def get_podcast_episodes(self, podcast_id: int) -> list[PodcastEpisode]: ...

    @abstractmethod
    def get_episode(self, episode_id: int) -> PodcastEpisode | None: ...

    @abstractmethod
    def add_podcast_episode(self, **fields: Any) -> PodcastEpisode: ...

    # Shares
    @abstractmethod
    def share_content(
        self,
        user_id: int,
        platform: str,
        article_id: int | None = None,
        playlist_id: int | None = None,
    ) -> Share: ...

    @abstractmethod
    def get_user_shares(self, user_id: int) -> list[Share]: ...

    # Live streams
    @abstractmethod
    def get_live_streams(self, category: str | None = None) -> list[LiveStream]: ...

    @abstractmethod
    def get_live_stream(self, stream_id: int) -> LiveStream | None: ...

    @abstractmethod
    def create_live_stream(self, **fields: Any) -> LiveStream: ...

    @abstractmethod
    def update_stream_status(
        self, stream_id: int, is_live: bool, listeners: int | None = None
    ) -> LiveStream | None: ...
