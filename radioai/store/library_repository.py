"""
Library repository - favorites, offline downloads and playlists.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any

from .article_repository import ArticleRepository
from .models import Article, Favorite, Playlist
from .tables import MemoryTables


def _download_key(user_id: int, article_id: int) -> str:
    return f"{user_id}-{article_id}"


class LibraryRepository:
    """Repository for a user's saved articles."""

    def __init__(self, tables: MemoryTables, articles: ArticleRepository):
        self._tables = tables
        self._articles = articles

    # ─────────────────────────────────────────────────────────────
    # Favorites
    # ─────────────────────────────────────────────────────────────

    def get_favorite_articles(self, user_id: int) -> list[Article]:
        """Get the user's favorited articles, newest first."""
        article_ids = [
            fav.article_id for fav in self._tables.favorites
            if fav.user_id == user_id
        ]
        return self._articles.newest_first(self._articles.get_by_ids(article_ids))

    def add_favorite(self, user_id: int, article_id: int) -> Favorite:
        """Insert a favorite row. No uniqueness check is applied."""
        table = self._tables.favorites
        favorite = Favorite(
            id=table.next_id(),
            user_id=user_id,
            article_id=article_id,
            created_at=datetime.now(),
        )
        return table.put(favorite.id, favorite)

    def remove_favorite(self, user_id: int, article_id: int) -> bool:
        """Remove the first matching favorite. Returns False if none existed."""
        for row_id, fav in self._tables.favorites.items():
            if fav.user_id == user_id and fav.article_id == article_id:
                return self._tables.favorites.delete(row_id)
        return False

    def is_favorite(self, user_id: int, article_id: int) -> bool:
        return any(
            fav.user_id == user_id and fav.article_id == article_id
            for fav in self._tables.favorites
        )

    # ─────────────────────────────────────────────────────────────
    # Downloads
    # ─────────────────────────────────────────────────────────────

    def get_downloaded_articles(self, user_id: int) -> list[Article]:
        article_ids = []
        for key in self._tables.downloads:
            owner, article_id = (int(part) for part in key.split("-"))
            if owner == user_id:
                article_ids.append(article_id)
        return self._articles.newest_first(self._articles.get_by_ids(article_ids))

    def add_download(self, user_id: int, article_id: int) -> bool:
        self._tables.downloads.add(_download_key(user_id, article_id))
        return True

    def remove_download(self, user_id: int, article_id: int) -> bool:
        key = _download_key(user_id, article_id)
        if key not in self._tables.downloads:
            return False
        self._tables.downloads.discard(key)
        return True

    # ─────────────────────────────────────────────────────────────
    # Playlists
    # ─────────────────────────────────────────────────────────────

    def get_playlists(self, user_id: int) -> list[Playlist]:
        """Get the user's playlists, most recently created first."""
        playlists = [p for p in self._tables.playlists if p.user_id == user_id]
        return sorted(playlists, key=lambda p: (p.created_at, p.id), reverse=True)

    def get_playlist(self, playlist_id: int) -> Playlist | None:
        return self._tables.playlists.get(playlist_id)

    def add_playlist(
        self,
        user_id: int,
        name: str,
        description: str | None = None,
        article_ids: list[str] | None = None,
    ) -> Playlist:
        table = self._tables.playlists
        playlist = Playlist(
            id=table.next_id(),
            user_id=user_id,
            name=name,
            description=description or None,
            article_ids=list(article_ids or []),
            created_at=datetime.now(),
        )
        return table.put(playlist.id, playlist)

    def update_playlist(self, playlist_id: int, **updates: Any) -> Playlist | None:
        playlist = self.get_playlist(playlist_id)
        if playlist is None:
            return None
        updates.pop("id", None)
        return self._tables.playlists.put(playlist_id, replace(playlist, **updates))

    def delete_playlist(self, playlist_id: int) -> bool:
        return self._tables.playlists.delete(playlist_id)

    def get_playlist_articles(self, playlist_id: int) -> list[Article]:
        """Articles in playlist order. Unknown or non-numeric ids are skipped."""
        playlist = self.get_playlist(playlist_id)
        if not playlist or not playlist.article_ids:
            return []

        article_ids = []
        for raw_id in playlist.article_ids:
            try:
                article_ids.append(int(raw_id))
            except (TypeError, ValueError):
                continue
        return self._articles.get_by_ids(article_ids)
