"""
In-memory tables - the process-lifetime backing maps for the store.
"""

from copy import deepcopy
from itertools import count
from typing import Generic, Iterator, TypeVar

from .models import (
    User, Article, Favorite, Playlist, ListeningHistory,
    Podcast, PodcastEpisode, Share, LiveStream,
)

T = TypeVar("T")


class Table(Generic[T]):
    """
    Insertion-ordered map of rows keyed by an auto-incrementing id.

    Rows are copied on the way in and on the way out, so callers never hold
    a reference to stored state. Updates go through put().
    """

    def __init__(self):
        self._rows: dict[int, T] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def get(self, row_id: int) -> T | None:
        row = self._rows.get(row_id)
        return deepcopy(row) if row is not None else None

    def put(self, row_id: int, row: T) -> T:
        self._rows[row_id] = deepcopy(row)
        return deepcopy(row)

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None

    def values(self) -> list[T]:
        return [deepcopy(row) for row in self._rows.values()]

    def items(self) -> list[tuple[int, T]]:
        return [(row_id, deepcopy(row)) for row_id, row in self._rows.items()]

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._rows)


class MemoryTables:
    """Holds every table of the store. Restarting the process discards them."""

    def __init__(self):
        self.users: Table[User] = Table()
        self.articles: Table[Article] = Table()
        self.favorites: Table[Favorite] = Table()
        self.downloads: set[str] = set()  # "{user_id}-{article_id}" keys
        self.playlists: Table[Playlist] = Table()
        self.history: Table[ListeningHistory] = Table()
        self.podcasts: Table[Podcast] = Table()
        self.episodes: Table[PodcastEpisode] = Table()
        self.shares: Table[Share] = Table()
        self.live_streams: Table[LiveStream] = Table()
