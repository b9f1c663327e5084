"""
Miscellaneous routes: health check, categories and AI insights.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import state, get_store, get_content_service
from ..content_service import ContentService
from ..schemas import InsightsResponse, StatusResponse
from ..store import Store, NEWS_CATEGORIES

router = APIRouter(prefix="/api", tags=["misc"])


@router.get("/status")
async def health_check() -> StatusResponse:
    """API health check."""
    service = state.content_service
    return StatusResponse(
        status="ok",
        version=__version__,
        ai_enabled=service is not None,
        speech_enabled=bool(service and service.speech_enabled),
    )


@router.get("/categories")
async def list_categories() -> list[str]:
    """Get the fixed list of news categories."""
    return list(NEWS_CATEGORIES)


@router.get("/insights")
async def get_insights(
    store: Annotated[Store, Depends(get_store)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> InsightsResponse:
    """Trending topics and an analyst note drawn from recent articles."""
    articles = store.get_articles(limit=ContentService.TOPIC_ARTICLE_LIMIT)
    topics = await service.extract_key_topics_async(articles)
    insight = await service.generate_news_insight_async(articles)
    return InsightsResponse(topics=topics, insight=insight)
