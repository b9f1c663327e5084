"""
Store models - dataclasses for stored entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NEWS_CATEGORIES = (
    "Breaking",
    "Politics",
    "Technology",
    "Business",
    "Sports",
    "Health",
    "Science",
    "Entertainment",
)

DEFAULT_CATEGORY = "Breaking"


@dataclass
class User:
    id: int
    username: str
    password: str
    created_at: datetime


@dataclass
class Article:
    id: int
    title: str
    content: str
    summary: str
    source_url: str
    source_name: str
    category: str
    published_at: datetime
    created_at: datetime
    enhanced_content: str | None = None
    audio_url: str | None = None
    image_url: str | None = None
    duration: int | None = None  # seconds
    read_time: int | None = None  # minutes
    is_processed: bool = False
    metadata: dict[str, Any] | None = None


@dataclass
class Favorite:
    id: int
    user_id: int
    article_id: int
    created_at: datetime


@dataclass
class Playlist:
    id: int
    user_id: int
    name: str
    created_at: datetime
    description: str | None = None
    article_ids: list[str] = field(default_factory=list)


@dataclass
class ListeningHistory:
    id: int
    user_id: int
    article_id: int
    listened_at: datetime
    progress: float = 0
    completed: bool = False


@dataclass
class Podcast:
    id: int
    title: str
    feed_url: str
    category: str
    created_at: datetime
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True


@dataclass
class PodcastEpisode:
    id: int
    podcast_id: int
    title: str
    audio_url: str
    published_at: datetime
    created_at: datetime
    description: str | None = None
    duration: int | None = None  # seconds


@dataclass
class Share:
    id: int
    user_id: int
    platform: str
    shared_at: datetime
    article_id: int | None = None
    playlist_id: int | None = None


@dataclass
class LiveStream:
    id: int
    title: str
    stream_url: str
    category: str
    created_at: datetime
    description: str | None = None
    is_live: bool = False
    listeners: int = 0
    language: str = "en"
    image_url: str | None = None
