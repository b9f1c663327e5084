"""
Audio element abstraction driven by native playback events.

An element plays one source at a time. Every event it dispatches is stamped
with the generation of the load it belongs to, so a listener can tell events
of the current source apart from late events of an earlier one.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable


EVENT_TYPES = (
    "timeupdate",
    "durationchange",
    "play",
    "pause",
    "ended",
    "loadstart",
    "canplay",
    "error",
)


class PlaybackError(Exception):
    """Raised when an element cannot start playback."""


@dataclass(frozen=True)
class AudioEvent:
    type: str
    generation: int


EventListener = Callable[[AudioEvent], None]


class AudioElement(ABC):
    """
    Base class for audio backends.

    Subclasses implement the transport (load/play/pause/seek) and call
    `dispatch()` whenever the underlying player reports an event.
    """

    def __init__(self):
        self.src: str | None = None
        self.generation = 0
        self._listeners: dict[str, list[EventListener]] = defaultdict(list)

    # ─────────────────────────────────────────────────────────────
    # Transport
    # ─────────────────────────────────────────────────────────────

    @abstractmethod
    def load(self, src: str, generation: int) -> None:
        """Start loading a source. Events until the next load carry `generation`."""
        pass

    @abstractmethod
    def play(self) -> None:
        """
        Start or resume playback.

        Raises:
            PlaybackError: If playback cannot start
        """
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @property
    @abstractmethod
    def current_time(self) -> float:
        pass

    @current_time.setter
    @abstractmethod
    def current_time(self, value: float) -> None:
        pass

    @property
    @abstractmethod
    def duration(self) -> float:
        """Length of the loaded source in seconds, 0 when unknown."""
        pass

    @property
    @abstractmethod
    def volume(self) -> float:
        pass

    @volume.setter
    @abstractmethod
    def volume(self, value: float) -> None:
        pass

    # ─────────────────────────────────────────────────────────────
    # Events
    # ─────────────────────────────────────────────────────────────

    def add_event_listener(self, event_type: str, listener: EventListener) -> None:
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown audio event: {event_type}")
        self._listeners[event_type].append(listener)

    def dispatch(self, event_type: str, generation: int | None = None) -> None:
        """Deliver an event to listeners, stamped with the current generation by default."""
        event = AudioEvent(
            type=event_type,
            generation=self.generation if generation is None else generation,
        )
        for listener in list(self._listeners[event_type]):
            listener(event)
