"""
Audio/queue controller.

Wraps a single AudioElement and keeps an immutable PlayerState snapshot of the
current article, play state, position, volume, loading flag and the queue.
Timing comes only from the element's events. Each load bumps a generation
counter and events or failures from an older generation are dropped, so a
slow response for a previous article never overwrites the current one.

Queue invariant: 0 <= queue_index < len(queue), or queue_index == -1.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable

from .element import AudioElement, AudioEvent, PlaybackError, EVENT_TYPES

logger = logging.getLogger(__name__)

# Articles as returned by the API (camelCase JSON objects)
ArticleData = dict[str, Any]


@dataclass(frozen=True)
class PlayerState:
    current_article: ArticleData | None = None
    is_playing: bool = False
    current_time: float = 0
    duration: float = 0
    queue: tuple[ArticleData, ...] = ()
    queue_index: int = -1
    volume: float = 0.8
    is_loading: bool = False


StateListener = Callable[[PlayerState], None]


class AudioController:
    """Playback state machine over one audio element."""

    def __init__(self, element: AudioElement, base_url: str = ""):
        self.element = element
        self.base_url = base_url.rstrip("/")
        self.state = PlayerState()
        self._generation = 0
        self._listeners: list[StateListener] = []

        self.element.volume = self.state.volume
        for event_type in EVENT_TYPES:
            self.element.add_event_listener(event_type, self._on_event)

    @property
    def generation(self) -> int:
        return self._generation

    def audio_url(self, article: ArticleData) -> str:
        return f"{self.base_url}/api/articles/{article['id']}/audio"

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Receive every new state snapshot. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ─────────────────────────────────────────────────────────────
    # Playback
    # ─────────────────────────────────────────────────────────────

    def play_article(self, article: ArticleData) -> None:
        """Load the article's narration and start playing it."""
        self._update(current_article=article, is_loading=True, current_time=0)
        self._load(article)

    def pause_audio(self) -> None:
        self.element.pause()
        self._update(is_playing=False)

    def resume_audio(self) -> None:
        """Resume the current article. Failures are logged, not raised."""
        if self.state.current_article is None:
            return
        if not self._is_loaded(self.state.current_article):
            self.play_article(self.state.current_article)
            return
        try:
            self.element.play()
        except PlaybackError as e:
            logger.error(f"Failed to resume audio: {e}")
            return
        self._update(is_playing=True)

    def skip_next(self) -> None:
        self._play_index(self.state.queue_index + 1)

    def skip_previous(self) -> None:
        self._play_index(self.state.queue_index - 1)

    def set_volume(self, volume: float) -> None:
        volume = max(0.0, min(1.0, volume))
        self.element.volume = volume
        self._update(volume=volume)

    def seek_to(self, time: float) -> None:
        time = max(0.0, time)
        self.element.current_time = time
        self._update(current_time=time)

    # ─────────────────────────────────────────────────────────────
    # Queue
    # ─────────────────────────────────────────────────────────────

    def set_queue(self, articles: list[ArticleData], start_index: int = 0) -> None:
        """
        Replace the queue and point the cursor at start_index.

        An out-of-range start_index is clamped. If audio is playing or loading,
        playback switches to the new current article unless it is already the
        one playing. Otherwise the element is released so a later resume loads
        the new current article.
        """
        was_active = self.state.is_playing or self.state.is_loading
        queue = tuple(articles)
        if not queue:
            if self.element.src is not None:
                self._release_element()
            self._update(
                queue=(),
                queue_index=-1,
                current_article=None,
                is_playing=False,
                is_loading=False,
            )
            return

        index = max(0, min(start_index, len(queue) - 1))
        article = queue[index]
        self._update(queue=queue, queue_index=index)

        if self._is_loaded(article):
            self._update(current_article=article)
        elif was_active:
            self._play_index(index)
        else:
            if self.element.src is not None:
                self._release_element()
            self._update(current_article=article, current_time=0)

    def add_to_queue(self, article: ArticleData) -> None:
        """Append an article. The first entry of an empty queue becomes the cursor."""
        if self.state.queue:
            self._update(queue=self.state.queue + (article,))
            return

        changes = {"queue": (article,), "queue_index": 0}
        if self.state.current_article is None:
            changes["current_article"] = article
        self._update(**changes)

    def remove_from_queue(self, index: int) -> None:
        """Remove a queue entry, keeping the cursor on the same article where possible."""
        queue = self.state.queue
        if not 0 <= index < len(queue):
            return

        remaining = queue[:index] + queue[index + 1:]
        cursor = self.state.queue_index
        if index < cursor:
            cursor -= 1
        elif index == cursor:
            cursor = min(cursor, len(remaining) - 1)
        self._update(queue=remaining, queue_index=cursor)

    # ─────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────

    def _play_index(self, index: int) -> None:
        if not 0 <= index < len(self.state.queue):
            return
        article = self.state.queue[index]
        self._update(
            current_article=article,
            queue_index=index,
            current_time=0,
            is_loading=True,
        )
        self._load(article)

    def _is_loaded(self, article: ArticleData) -> bool:
        """True if the element holds this article's audio and its events are still live."""
        return (
            self.element.src == self.audio_url(article)
            and self.element.generation == self._generation
        )

    def _release_element(self) -> None:
        """Stop the element and drop any further events from its source."""
        self._generation += 1
        self.element.pause()

    def _load(self, article: ArticleData) -> None:
        self._generation += 1
        generation = self._generation
        self.element.load(self.audio_url(article), generation)

        try:
            self.element.play()
        except PlaybackError as e:
            if generation != self._generation:
                return
            logger.error(f"Failed to play audio for article {article.get('id')}: {e}")
            self._update(is_loading=False, is_playing=False)

    def _on_event(self, event: AudioEvent) -> None:
        if event.generation != self._generation:
            logger.debug(
                f"Dropping stale {event.type} event (generation {event.generation}, "
                f"current {self._generation})"
            )
            return

        if event.type == "timeupdate":
            self._update(current_time=self.element.current_time)
        elif event.type == "durationchange":
            self._update(duration=self.element.duration or 0)
        elif event.type == "play":
            self._update(is_playing=True, is_loading=False)
        elif event.type == "pause":
            self._update(is_playing=False)
        elif event.type == "ended":
            self._advance()
        elif event.type == "loadstart":
            self._update(is_loading=True)
        elif event.type == "canplay":
            self._update(is_loading=False)
        elif event.type == "error":
            logger.error(f"Audio element error for {self.element.src}")
            self._update(is_loading=False, is_playing=False)

    def _advance(self) -> None:
        """Auto-play the next queued article, or stop at the end of the queue."""
        index = self.state.queue_index + 1
        if index < len(self.state.queue):
            self._play_index(index)
        else:
            self._update(is_playing=False, current_time=0)

    def _update(self, **changes: Any) -> None:
        self.state = replace(self.state, **changes)
        for listener in list(self._listeners):
            listener(self.state)
