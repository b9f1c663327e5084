"""
REST client for the RadioAI API with a query cache.

GET responses are cached under their path (plus query string) and the
affected keys are invalidated after each mutation, so a mutation followed
by a read always observes the write.
"""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from .cache import MemoryCache

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, errors: list | None = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors


class RadioClient:
    """
    Thin client over the RadioAI endpoints.

    Args:
        http: An httpx.Client (a FastAPI TestClient works too). Created from
            base_url when omitted.
        base_url: Server URL used when no client is passed
        cache_ttl: Seconds a cached GET response stays fresh (None = until invalidated)
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        base_url: str = "http://localhost:5000",
        cache_ttl: int | None = None,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=30.0)
        self.cache = MemoryCache(max_size=512, default_ttl=cache_ttl)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "RadioClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────
    # Request plumbing
    # ─────────────────────────────────────────────────────────────

    @staticmethod
    def query_key(path: str, params: dict[str, Any] | None = None) -> str:
        """Cache key for a GET: the path plus its non-empty query parameters."""
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return f"{path}?{urlencode(query)}" if query else path

    def request(self, method: str, path: str, json: Any = None, params: dict | None = None) -> Any:
        """
        Issue a request and decode the JSON body.

        Raises:
            ApiError: If the response status is not 2xx
        """
        response = self.http.request(method, path, json=json, params=params)
        if response.is_error:
            raise self._error_from(response)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def query(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET through the query cache."""
        key = self.query_key(path, params)
        if key in self.cache:
            return self.cache.get(key)

        params = {k: v for k, v in (params or {}).items() if v is not None}
        data = self.request("GET", path, params=params or None)
        self.cache.set(key, data)
        return data

    def invalidate(self, *prefixes: str) -> None:
        """Drop cached responses whose key starts with any of the prefixes."""
        for prefix in prefixes:
            removed = self.cache.delete_prefix(prefix)
            logger.debug(f"Invalidated {removed} cached queries under {prefix}")

    @staticmethod
    def _error_from(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("message") or response.text or response.reason_phrase
        return ApiError(response.status_code, message, body.get("errors"))

    # ─────────────────────────────────────────────────────────────
    # Articles
    # ─────────────────────────────────────────────────────────────

    def get_articles(self, limit: int | None = None, offset: int | None = None, category: str | None = None) -> list[dict]:
        return self.query("/api/articles", {"limit": limit, "offset": offset, "category": category})

    def get_featured_articles(self) -> list[dict]:
        return self.query("/api/articles/featured")

    def get_trending_articles(self) -> list[dict]:
        return self.query("/api/articles/trending")

    def search_articles(self, q: str, category: str | None = None) -> list[dict]:
        return self.query("/api/articles/search", {"q": q, "category": category})

    def get_article(self, article_id: int) -> dict:
        return self.query(f"/api/articles/{article_id}")

    def create_article(self, **fields: Any) -> dict:
        article = self.request("POST", "/api/articles", json=fields)
        self.invalidate("/api/articles", "/api/notifications")
        return article

    def enhance_article(self, article_id: int) -> dict:
        result = self.request("POST", f"/api/articles/{article_id}/enhance")
        self.invalidate("/api/articles")
        return result

    def get_article_audio(self, article_id: int) -> bytes:
        """Fetch narrated MP3 bytes. Not cached here; the server caches audio."""
        response = self.http.get(f"/api/articles/{article_id}/audio")
        if response.is_error:
            raise self._error_from(response)
        return response.content

    def get_categories(self) -> list[str]:
        return self.query("/api/categories")

    # ─────────────────────────────────────────────────────────────
    # Favorites & Downloads
    # ─────────────────────────────────────────────────────────────

    def get_favorites(self) -> list[dict]:
        return self.query("/api/favorites")

    def add_favorite(self, article_id: int) -> dict:
        favorite = self.request("POST", "/api/favorites", json={"articleId": article_id})
        self.invalidate("/api/favorites")
        return favorite

    def remove_favorite(self, article_id: int) -> None:
        self.request("DELETE", f"/api/favorites/{article_id}")
        self.invalidate("/api/favorites")

    def is_favorite(self, article_id: int) -> bool:
        return self.query(f"/api/favorites/{article_id}/check")["isFavorite"]

    def get_downloads(self) -> list[dict]:
        return self.query("/api/downloads")

    def add_download(self, article_id: int) -> dict:
        result = self.request("POST", "/api/downloads", json={"articleId": article_id})
        self.invalidate("/api/downloads")
        return result

    def remove_download(self, article_id: int) -> dict:
        result = self.request("DELETE", f"/api/downloads/{article_id}")
        self.invalidate("/api/downloads")
        return result

    # ─────────────────────────────────────────────────────────────
    # Playlists
    # ─────────────────────────────────────────────────────────────

    def get_playlists(self) -> list[dict]:
        return self.query("/api/playlists")

    def create_playlist(self, name: str, description: str | None = None, article_ids: list | None = None) -> dict:
        playlist = self.request(
            "POST",
            "/api/playlists",
            json={"name": name, "description": description, "articleIds": article_ids or []},
        )
        self.invalidate("/api/playlists")
        return playlist

    def get_playlist_articles(self, playlist_id: int) -> list[dict]:
        return self.query(f"/api/playlists/{playlist_id}/articles")

    def delete_playlist(self, playlist_id: int) -> None:
        self.request("DELETE", f"/api/playlists/{playlist_id}")
        self.invalidate("/api/playlists")

    # ─────────────────────────────────────────────────────────────
    # History
    # ─────────────────────────────────────────────────────────────

    def get_history(self) -> list[dict]:
        return self.query("/api/history")

    def get_progress(self, article_id: int) -> dict:
        return self.query(f"/api/history/{article_id}/progress")

    def update_progress(self, article_id: int, progress: float, completed: bool = False) -> dict:
        entry = self.request(
            "POST",
            "/api/history/progress",
            json={"articleId": article_id, "progress": progress, "completed": completed},
        )
        self.invalidate("/api/history")
        return entry

    # ─────────────────────────────────────────────────────────────
    # Notifications, media, shares, insights
    # ─────────────────────────────────────────────────────────────

    def get_notifications(self) -> list[dict]:
        return self.query("/api/notifications")

    def mark_notification_read(self, notification_id: int) -> dict:
        result = self.request(
            "POST", "/api/notifications/mark-read", json={"notificationId": notification_id}
        )
        self.invalidate("/api/notifications")
        return result

    def get_podcasts(self, category: str | None = None) -> list[dict]:
        return self.query("/api/podcasts", {"category": category})

    def get_podcast(self, podcast_id: int) -> dict:
        return self.query(f"/api/podcasts/{podcast_id}")

    def get_podcast_episodes(self, podcast_id: int) -> list[dict]:
        return self.query(f"/api/podcasts/{podcast_id}/episodes")

    def get_live_streams(self, category: str | None = None) -> list[dict]:
        return self.query("/api/live-streams", {"category": category})

    def get_live_stream(self, stream_id: int) -> dict:
        return self.query(f"/api/live-streams/{stream_id}")

    def get_shares(self) -> list[dict]:
        return self.query("/api/shares")

    def share(self, platform: str, article_id: int | None = None, playlist_id: int | None = None) -> dict:
        share = self.request(
            "POST",
            "/api/shares",
            json={"platform": platform, "articleId": article_id, "playlistId": playlist_id},
        )
        self.invalidate("/api/shares")
        return share

    def get_insights(self) -> dict:
        return self.query("/api/insights")

    def get_status(self) -> dict:
        return self.request("GET", "/api/status")
