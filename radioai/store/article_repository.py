"""
Article repository - CRUD, search and ranking operations for articles.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any

from .models import Article, NEWS_CATEGORIES
from .tables import MemoryTables

ALL_CATEGORIES = "All"


def _newest_first(articles: list[Article]) -> list[Article]:
    return sorted(articles, key=lambda a: a.published_at, reverse=True)


def _in_category(articles: list[Article], category: str | None) -> list[Article]:
    if not category or category == ALL_CATEGORIES:
        return articles
    return [a for a in articles if a.category == category]


class ArticleRepository:
    """Repository for article operations."""

    FEATURED_COUNT = 3
    TRENDING_COUNT = 6

    def __init__(self, tables: MemoryTables):
        self._tables = tables

    def add(
        self,
        title: str,
        content: str,
        summary: str,
        source_url: str,
        source_name: str,
        category: str,
        published_at: datetime,
        enhanced_content: str | None = None,
        audio_url: str | None = None,
        image_url: str | None = None,
        duration: int | None = None,
        read_time: int | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Article:
        """Add a new article. New articles always start unprocessed."""
        if category not in NEWS_CATEGORIES:
            raise ValueError(f"Unknown category: {category}")

        table = self._tables.articles
        article = Article(
            id=table.next_id(),
            title=title,
            content=content,
            summary=summary,
            source_url=source_url,
            source_name=source_name,
            category=category,
            published_at=published_at,
            created_at=datetime.now(),
            enhanced_content=enhanced_content or None,
            audio_url=audio_url or None,
            image_url=image_url or None,
            duration=duration or None,
            read_time=read_time or None,
            is_processed=False,
            metadata=metadata or None,
        )
        return table.put(article.id, article)

    def get(self, article_id: int) -> Article | None:
        """Get single article by ID."""
        return self._tables.articles.get(article_id)

    def get_many(
        self,
        limit: int = 20,
        offset: int = 0,
        category: str | None = None,
    ) -> list[Article]:
        """Get articles newest first, optionally filtered by category."""
        articles = _in_category(self._tables.articles.values(), category)
        return _newest_first(articles)[offset:offset + limit]

    def update(self, article_id: int, **updates: Any) -> Article | None:
        """Apply a partial update. Returns the updated article or None if missing."""
        article = self.get(article_id)
        if article is None:
            return None
        updates.pop("id", None)
        updated = replace(article, **updates)
        return self._tables.articles.put(article_id, updated)

    def search(self, query: str, category: str | None = None) -> list[Article]:
        """Case-insensitive substring search over title, summary and content."""
        term = query.lower()
        articles = _in_category(self._tables.articles.values(), category)
        matches = [
            a for a in articles
            if term in a.title.lower()
            or term in a.summary.lower()
            or term in a.content.lower()
        ]
        return _newest_first(matches)

    def get_trending(self) -> list[Article]:
        """Most recent articles stand in for an engagement ranking."""
        return _newest_first(self._tables.articles.values())[:self.TRENDING_COUNT]

    def get_featured(self) -> list[Article]:
        return _newest_first(self._tables.articles.values())[:self.FEATURED_COUNT]

    def get_by_ids(self, article_ids: list[int]) -> list[Article]:
        """Resolve ids to articles in the given order, skipping unknown ids."""
        articles = []
        for article_id in article_ids:
            article = self.get(article_id)
            if article:
                articles.append(article)
        return articles

    @staticmethod
    def newest_first(articles: list[Article]) -> list[Article]:
        return _newest_first(articles)
