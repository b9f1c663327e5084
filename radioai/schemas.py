"""
Pydantic models for API request/response validation.

Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .store import (
    NEWS_CATEGORIES,
    Article,
    Favorite,
    Playlist,
    ListeningHistory,
    Podcast,
    PodcastEpisode,
    Share,
    LiveStream,
)
from .notification_service import Notification


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


class ApiModel(BaseModel):
    """Base model serializing to camelCase and accepting either case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────────────────────────────────────
# Article Schemas
# ─────────────────────────────────────────────────────────────

class ArticleResponse(ApiModel):
    """Article as returned by list and detail endpoints."""
    id: int
    title: str
    content: str
    summary: str
    enhanced_content: str | None = None
    audio_url: str | None = None
    source_url: str
    source_name: str
    category: str
    image_url: str | None = None
    duration: int | None = None
    read_time: int | None = None
    published_at: str
    created_at: str
    is_processed: bool
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_db(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            summary=article.summary,
            enhanced_content=article.enhanced_content,
            audio_url=article.audio_url,
            source_url=article.source_url,
            source_name=article.source_name,
            category=article.category,
            image_url=article.image_url,
            duration=article.duration,
            read_time=article.read_time,
            published_at=article.published_at.isoformat(),
            created_at=article.created_at.isoformat(),
            is_processed=article.is_processed,
            metadata=article.metadata,
        )


class CreateArticleRequest(ApiModel):
    """Request to create an article. New articles start unprocessed."""
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: str
    source_url: str = Field(min_length=1)
    source_name: str = Field(min_length=1)
    category: str
    published_at: datetime
    enhanced_content: str | None = None
    audio_url: str | None = None
    image_url: str | None = None
    duration: int | None = Field(default=None, ge=0)
    read_time: int | None = Field(default=None, ge=0)
    metadata: dict[str, Any] | None = None

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, value: str) -> str:
        if value not in NEWS_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(NEWS_CATEGORIES)}")
        return value


class EnhanceArticleResponse(ApiModel):
    success: bool
    message: str
    article_id: int


# ─────────────────────────────────────────────────────────────
# Favorites & Downloads Schemas
# ─────────────────────────────────────────────────────────────

class ArticleRefRequest(ApiModel):
    """Body carrying an article id. Presence is checked by the route."""
    article_id: int | None = None


class FavoriteResponse(ApiModel):
    id: int
    user_id: int
    article_id: int
    created_at: str

    @classmethod
    def from_db(cls, favorite: Favorite) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            user_id=favorite.user_id,
            article_id=favorite.article_id,
            created_at=favorite.created_at.isoformat(),
        )


class FavoriteCheckResponse(ApiModel):
    is_favorite: bool


class DownloadResponse(ApiModel):
    message: str
    article_id: int


class MessageResponse(ApiModel):
    message: str


# ─────────────────────────────────────────────────────────────
# Playlist Schemas
# ─────────────────────────────────────────────────────────────

class PlaylistResponse(ApiModel):
    id: int
    user_id: int
    name: str
    description: str | None = None
    article_ids: list[str]
    created_at: str

    @classmethod
    def from_db(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(
            id=playlist.id,
            user_id=playlist.user_id,
            name=playlist.name,
            description=playlist.description,
            article_ids=list(playlist.article_ids),
            created_at=playlist.created_at.isoformat(),
        )


class CreatePlaylistRequest(ApiModel):
    """Request to create a playlist. Article ids are stored as strings."""
    name: str = Field(min_length=1)
    description: str | None = None
    article_ids: list[str] = Field(default_factory=list)

    @field_validator("article_ids", mode="before")
    @classmethod
    def stringify_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(v) if isinstance(v, int) and not isinstance(v, bool) else v for v in value]
        return value


# ─────────────────────────────────────────────────────────────
# Listening History Schemas
# ─────────────────────────────────────────────────────────────

class UpdateProgressRequest(ApiModel):
    article_id: int
    progress: float = Field(default=0, ge=0)
    completed: bool = False


class ProgressResponse(ApiModel):
    """Listening progress. id and listenedAt are null when nothing is recorded."""
    id: int | None = None
    user_id: int | None = None
    article_id: int
    progress: float = 0
    completed: bool = False
    listened_at: str | None = None

    @classmethod
    def from_db(cls, entry: ListeningHistory) -> "ProgressResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            article_id=entry.article_id,
            progress=entry.progress,
            completed=entry.completed,
            listened_at=entry.listened_at.isoformat(),
        )


# ─────────────────────────────────────────────────────────────
# Notification Schemas
# ─────────────────────────────────────────────────────────────

class NotificationResponse(ApiModel):
    id: int
    type: str
    title: str
    message: str
    read: bool
    timestamp: str
    article_id: int

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            read=notification.read,
            timestamp=notification.timestamp.isoformat(),
            article_id=notification.article_id,
        )


class MarkNotificationReadRequest(ApiModel):
    notification_id: int


class MarkNotificationReadResponse(ApiModel):
    message: str
    notification_id: int


# ─────────────────────────────────────────────────────────────
# Podcast & Live Stream Schemas
# ─────────────────────────────────────────────────────────────

class PodcastResponse(ApiModel):
    id: int
    title: str
    description: str | None = None
    feed_url: str
    image_url: str | None = None
    category: str
    is_active: bool
    created_at: str

    @classmethod
    def from_db(cls, podcast: Podcast) -> "PodcastResponse":
        return cls(
            id=podcast.id,
            title=podcast.title,
            description=podcast.description,
            feed_url=podcast.feed_url,
            image_url=podcast.image_url,
            category=podcast.category,
            is_active=podcast.is_active,
            created_at=podcast.created_at.isoformat(),
        )


class EpisodeResponse(ApiModel):
    id: int
    podcast_id: int
    title: str
    description: str | None = None
    audio_url: str
    duration: int | None = None
    published_at: str
    created_at: str

    @classmethod
    def from_db(cls, episode: PodcastEpisode) -> "EpisodeResponse":
        return cls(
            id=episode.id,
            podcast_id=episode.podcast_id,
            title=episode.title,
            description=episode.description,
            audio_url=episode.audio_url,
            duration=episode.duration,
            published_at=episode.published_at.isoformat(),
            created_at=episode.created_at.isoformat(),
        )


class LiveStreamResponse(ApiModel):
    id: int
    title: str
    description: str | None = None
    stream_url: str
    category: str
    is_live: bool
    listeners: int
    language: str
    image_url: str | None = None
    created_at: str

    @classmethod
    def from_db(cls, stream: LiveStream) -> "LiveStreamResponse":
        return cls(
            id=stream.id,
            title=stream.title,
            description=stream.description,
            stream_url=stream.stream_url,
            category=stream.category,
            is_live=stream.is_live,
            listeners=stream.listeners,
            language=stream.language,
            image_url=stream.image_url,
            created_at=stream.created_at.isoformat(),
        )


# ─────────────────────────────────────────────────────────────
# Share Schemas
# ─────────────────────────────────────────────────────────────

class CreateShareRequest(ApiModel):
    """Share event. articleId and playlistId are not checked for exclusivity."""
    platform: str = Field(min_length=1)
    article_id: int | None = None
    playlist_id: int | None = None


class ShareResponse(ApiModel):
    id: int
    user_id: int
    article_id: int | None = None
    playlist_id: int | None = None
    platform: str
    shared_at: str

    @classmethod
    def from_db(cls, share: Share) -> "ShareResponse":
        return cls(
            id=share.id,
            user_id=share.user_id,
            article_id=share.article_id,
            playlist_id=share.playlist_id,
            platform=share.platform,
            shared_at=share.shared_at.isoformat(),
        )


# ─────────────────────────────────────────────────────────────
# Misc Schemas
# ─────────────────────────────────────────────────────────────

class InsightsResponse(ApiModel):
    topics: list[str]
    insight: str


class StatusResponse(ApiModel):
    status: str
    version: str
    ai_enabled: bool
    speech_enabled: bool
