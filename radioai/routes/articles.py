"""
Article routes: list, search, detail, creation, narration and enhancement.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response

from ..config import get_store, get_content_service
from ..content_service import ContentServiceError
from ..exceptions import require_article
from ..schemas import ArticleResponse, CreateArticleRequest, EnhanceArticleResponse
from ..store import Store
from ..tasks import enhance_article

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])


# ─────────────────────────────────────────────────────────────
# Lists (static paths first)
# ─────────────────────────────────────────────────────────────

@router.get("")
async def list_articles(
    store: Annotated[Store, Depends(get_store)],
    limit: int = Query(default=20, ge=0),
    offset: int = Query(default=0, ge=0),
    category: str | None = None,
) -> list[ArticleResponse]:
    """Get articles newest first, optionally filtered by category."""
    limit = limit or 20
    articles = store.get_articles(limit=limit, offset=offset, category=category)
    return [ArticleResponse.from_db(a) for a in articles]


@router.get("/featured")
async def featured_articles(
    store: Annotated[Store, Depends(get_store)]
) -> list[ArticleResponse]:
    """Get the three most recent articles."""
    return [ArticleResponse.from_db(a) for a in store.get_featured_articles()]


@router.get("/trending")
async def trending_articles(
    store: Annotated[Store, Depends(get_store)]
) -> list[ArticleResponse]:
    """Get the six most recent articles."""
    return [ArticleResponse.from_db(a) for a in store.get_trending_articles()]


@router.get("/search")
async def search_articles(
    store: Annotated[Store, Depends(get_store)],
    q: str | None = None,
    category: str | None = None,
) -> list[ArticleResponse]:
    """Case-insensitive search across titles, summaries and content."""
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")

    return [ArticleResponse.from_db(a) for a in store.search_articles(q, category)]


@router.post("", status_code=201)
async def create_article(
    request: CreateArticleRequest,
    store: Annotated[Store, Depends(get_store)]
) -> ArticleResponse:
    """Create an article from a validated body."""
    article = store.create_article(**request.model_dump())
    return ArticleResponse.from_db(article)


# ─────────────────────────────────────────────────────────────
# Single Article Operations (parameterized paths last)
# ─────────────────────────────────────────────────────────────

@router.get("/{article_id}")
async def get_article(
    article_id: int,
    store: Annotated[Store, Depends(get_store)]
) -> ArticleResponse:
    """Get a single article."""
    return ArticleResponse.from_db(require_article(store.get_article(article_id)))


@router.get("/{article_id}/audio")
async def get_article_audio(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
) -> Response:
    """Narrate an article as MP3. Clients may cache the audio for an hour."""
    article = require_article(store.get_article(article_id))
    service = get_content_service()

    if not service.speech_enabled:
        raise HTTPException(
            status_code=503,
            detail="Speech synthesis unavailable: configured provider cannot generate audio"
        )

    try:
        audio = await service.convert_text_to_speech_async(article.content, article.title)
    except ContentServiceError as e:
        logger.error(f"Failed to generate audio for article {article_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate audio")

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.post(
    "/{article_id}/enhance",
    status_code=202,
)
async def enhance_article_endpoint(
    article_id: int,
    store: Annotated[Store, Depends(get_store)],
    background_tasks: BackgroundTasks,
) -> EnhanceArticleResponse:
    """Expand the article with AI in the background and mark it processed."""
    require_article(store.get_article(article_id))
    get_content_service()

    background_tasks.add_task(enhance_article, article_id)

    return EnhanceArticleResponse(
        success=True,
        message="Enhancement started",
        article_id=article_id,
    )
