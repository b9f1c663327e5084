"""
Share repository - log of share events.
"""

from datetime import datetime

from .models import Share
from .tables import MemoryTables


class ShareRepository:
    """Repository for share events."""

    def __init__(self, tables: MemoryTables):
        self._tables = tables

    def add(
        self,
        user_id: int,
        platform: str,
        article_id: int | None = None,
        playlist_id: int | None = None,
    ) -> Share:
        table = self._tables.shares
        share = Share(
            id=table.next_id(),
            user_id=user_id,
            platform=platform,
            article_id=article_id,
            playlist_id=playlist_id,
            shared_at=datetime.now(),
        )
        return table.put(share.id, share)

    def get_for_user(self, user_id: int) -> list[Share]:
        """Get the user's shares, newest first."""
        shares = [s for s in self._tables.shares if s.user_id == user_id]
        return sorted(shares, key=lambda s: (s.shared_at, s.id), reverse=True)
