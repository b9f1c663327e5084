"""
Background tasks for AI article processing.
"""

import logging

from .config import state
from .content_service import ContentServiceError

logger = logging.getLogger(__name__)


def enhance_article(article_id: int) -> None:
    """
    Enhance an article in the background and mark it processed.

    Failures are logged and leave the article unprocessed.
    """
    store = state.store
    service = state.content_service
    if not store or not service:
        logger.warning(f"Skipping enhancement of article {article_id}: service not configured")
        return

    article = store.get_article(article_id)
    if not article:
        logger.warning(f"Skipping enhancement: article {article_id} no longer exists")
        return

    try:
        result = service.enhance_article(article)
    except ContentServiceError as e:
        logger.error(f"Enhancement failed for article {article_id}: {e}")
        return

    store.update_article(
        article_id,
        enhanced_content=result.enhanced_content,
        summary=result.summary,
        read_time=result.reading_time,
        is_processed=True,
    )
    logger.info(f"Enhanced article {article_id} ({result.reading_time} min read)")
