"""
Notification feed - synthetic notifications built from recent articles.

Read state lives in process memory and is lost on restart.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from .store import Store


@dataclass
class Notification:
    id: int
    type: str
    title: str
    message: str
    read: bool
    timestamp: datetime
    article_id: int


class NotificationFeed:
    """
    Derives a notification per recent article.

    The i-th most recent article becomes notification i+1, cycling through
    breaking / update / trending, with timestamps staggered one hour apart.
    """

    FEED_SIZE = 5

    KINDS = (
        ("breaking", "Breaking News"),
        ("update", "News Update"),
        ("trending", "Trending Now"),
    )

    def __init__(self, store: Store):
        self._store = store
        self._read: dict[int, bool] = {}

    def get_notifications(self, now: datetime | None = None) -> list[Notification]:
        now = now or datetime.now()
        notifications = []
        for index, article in enumerate(self._store.get_articles(limit=self.FEED_SIZE)):
            notification_id = index + 1
            kind, title = self.KINDS[index % len(self.KINDS)]
            notifications.append(Notification(
                id=notification_id,
                type=kind,
                title=title,
                message=f"New article: {article.title}",
                read=self._read.get(notification_id, False),
                timestamp=now - timedelta(hours=index),
                article_id=article.id,
            ))
        return notifications

    def mark_read(self, notification_id: int) -> None:
        self._read[notification_id] = True

    def unread_count(self) -> int:
        return sum(1 for n in self.get_notifications() if not n.read)
