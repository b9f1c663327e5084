"""
Media repository - podcasts, podcast episodes and live streams.
"""

from dataclasses import replace
from datetime import datetime

from .models import Podcast, PodcastEpisode, LiveStream
from .tables import MemoryTables


class MediaRepository:
    """Repository for audio sources other than articles."""

    def __init__(self, tables: MemoryTables):
        self._tables = tables

    # ─────────────────────────────────────────────────────────────
    # Podcasts
    # ─────────────────────────────────────────────────────────────

    def get_podcasts(self, category: str | None = None) -> list[Podcast]:
        """Get active podcasts, optionally filtered by category."""
        podcasts = [p for p in self._tables.podcasts if p.is_active]
        if category:
            podcasts = [p for p in podcasts if p.category == category]
        return podcasts

    def get_podcast(self, podcast_id: int) -> Podcast | None:
        return self._tables.podcasts.get(podcast_id)

    def add_podcast(
        self,
        title: str,
        feed_url: str,
        category: str,
        description: str | None = None,
        image_url: str | None = None,
        is_active: bool = True,
    ) -> Podcast:
        table = self._tables.podcasts
        podcast = Podcast(
            id=table.next_id(),
            title=title,
            feed_url=feed_url,
            category=category,
            description=description,
            image_url=image_url,
            is_active=is_active,
            created_at=datetime.now(),
        )
        return table.put(podcast.id, podcast)

    def get_episodes(self, podcast_id: int) -> list[PodcastEpisode]:
        """Get a podcast's episodes, newest first."""
        episodes = [e for e in self._tables.episodes if e.podcast_id == podcast_id]
        return sorted(episodes, key=lambda e: e.published_at, reverse=True)

    def get_episode(self, episode_id: int) -> PodcastEpisode | None:
        return self._tables.episodes.get(episode_id)

    def add_episode(
        self,
        podcast_id: int,
        title: str,
        audio_url: str,
        published_at: datetime,
        description: str | None = None,
        duration: int | None = None,
    ) -> PodcastEpisode:
        table = self._tables.episodes
        episode = PodcastEpisode(
            id=table.next_id(),
            podcast_id=podcast_id,
            title=title,
            audio_url=audio_url,
            published_at=published_at,
            description=description,
            duration=duration,
            created_at=datetime.now(),
        )
        return table.put(episode.id, episode)

    # ─────────────────────────────────────────────────────────────
    # Live streams
    # ─────────────────────────────────────────────────────────────

    def get_live_streams(self, category: str | None = None) -> list[LiveStream]:
        streams = self._tables.live_streams.values()
        if category:
            streams = [s for s in streams if s.category == category]
        return streams

    def get_live_stream(self, stream_id: int) -> LiveStream | None:
        return self._tables.live_streams.get(stream_id)

    def add_live_stream(
        self,
        title: str,
        stream_url: str,
        category: str,
        description: str | None = None,
        is_live: bool = False,
        listeners: int = 0,
        language: str = "en",
        image_url: str | None = None,
    ) -> LiveStream:
        table = self._tables.live_streams
        stream = LiveStream(
            id=table.next_id(),
            title=title,
            stream_url=stream_url,
            category=category,
            description=description,
            is_live=is_live,
            listeners=listeners,
            language=language,
            image_url=image_url,
            created_at=datetime.now(),
        )
        return table.put(stream.id, stream)

    def update_stream_status(
        self,
        stream_id: int,
        is_live: bool,
        listeners: int | None = None,
    ) -> LiveStream | None:
        stream = self.get_live_stream(stream_id)
        if stream is None:
            return None
        updated = replace(
            stream,
            is_live=is_live,
            listeners=stream.listeners if listeners is None else listeners,
        )
        return self._tables.live_streams.put(stream_id, updated)
