"""
Notification routes: synthetic feed and read state.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..config import get_notification_feed
from ..notification_service import NotificationFeed
from ..schemas import (
    NotificationResponse,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("")
async def list_notifications(
    feed: Annotated[NotificationFeed, Depends(get_notification_feed)]
) -> list[NotificationResponse]:
    """Get notifications derived from the most recent articles."""
    return [NotificationResponse.from_notification(n) for n in feed.get_notifications()]


@router.post("/mark-read")
async def mark_notification_read(
    request: MarkNotificationReadRequest,
    feed: Annotated[NotificationFeed, Depends(get_notification_feed)]
) -> MarkNotificationReadResponse:
    """Mark a notification as read until the process restarts."""
    feed.mark_read(request.notification_id)
    return MarkNotificationReadResponse(
        message="Notification marked as read",
        notification_id=request.notification_id,
    )
