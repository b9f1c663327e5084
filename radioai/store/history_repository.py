"""
History repository - listening progress per (user, article).
"""

from dataclasses import replace
from datetime import datetime

from .article_repository import ArticleRepository
from .models import Article, ListeningHistory
from .tables import MemoryTables


class HistoryRepository:
    """Repository for listening history. At most one row per (user, article)."""

    def __init__(self, tables: MemoryTables, articles: ArticleRepository):
        self._tables = tables
        self._articles = articles

    def get_entries(self, user_id: int) -> list[ListeningHistory]:
        """Get the user's history rows, most recently listened first."""
        entries = [h for h in self._tables.history if h.user_id == user_id]
        return sorted(entries, key=lambda h: h.listened_at, reverse=True)

    def get_articles(self, user_id: int) -> list[Article]:
        """Get distinct articles the user listened to, most recent first."""
        seen: set[int] = set()
        article_ids = []
        for entry in self.get_entries(user_id):
            if entry.article_id not in seen:
                seen.add(entry.article_id)
                article_ids.append(entry.article_id)
        return self._articles.get_by_ids(article_ids)

    def get(self, user_id: int, article_id: int) -> ListeningHistory | None:
        for entry in self._tables.history:
            if entry.user_id == user_id and entry.article_id == article_id:
                return entry
        return None

    def upsert(
        self,
        user_id: int,
        article_id: int,
        progress: float = 0,
        completed: bool = False,
        listened_at: datetime | None = None,
    ) -> ListeningHistory:
        """Record progress, overwriting any existing row for the same pair."""
        listened_at = listened_at or datetime.now()
        table = self._tables.history

        existing = self.get(user_id, article_id)
        if existing:
            updated = replace(
                existing,
                progress=progress,
                completed=completed,
                listened_at=listened_at,
            )
            return table.put(existing.id, updated)

        entry = ListeningHistory(
            id=table.next_id(),
            user_id=user_id,
            article_id=article_id,
            progress=progress,
            completed=completed,
            listened_at=listened_at,
        )
        return table.put(entry.id, entry)
