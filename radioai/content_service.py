"""
Content service - AI-powered article enhancement and narration.

Features:
- Article enhancement (expanded text, summary, reading time)
- Summaries, categorization and trending-topic extraction
- Text-to-speech with an in-memory audio cache

Enhancement, summarization and speech raise ContentServiceError on failure.
Categorization, topic extraction and insights fall back to safe defaults.
"""

import asyncio
import hashlib
import json
import logging
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from .providers import LLMProvider
from .providers.base import ModelTier
from .store.models import Article, NEWS_CATEGORIES, DEFAULT_CATEGORY

if TYPE_CHECKING:
    from .cache import MemoryCache

logger = logging.getLogger(__name__)


class ContentServiceError(Exception):
    """Raised when the AI service cannot produce the requested content."""


@dataclass
class EnhancedArticleContent:
    """Result of enhancing an article."""
    enhanced_content: str
    summary: str
    reading_time: int  # minutes


class ContentService:
    """Wraps an AI provider for news enhancement and narration."""

    MIN_READING_TIME = 1
    MAX_READING_TIME = 15
    DEFAULT_READING_TIME = 5

    # Only the start of an article is needed to pick a category
    CATEGORIZE_CONTENT_CHARS = 1000
    TOPIC_ARTICLE_LIMIT = 10
    INSIGHT_ARTICLE_LIMIT = 5

    ENHANCE_SYSTEM_PROMPT = (
        "You are an expert news editor who enhances articles while maintaining "
        "journalistic integrity. Always respond with valid JSON."
    )

    ENHANCE_PROMPT = """You are an expert news editor and content enhancer. Your task is to take a news article and enhance it while maintaining journalistic integrity and accuracy.

Original Article:
Title: {title}
Content: {content}
Source: {source}
Category: {category}

Please enhance this article by:
1. Expanding on key points with additional context and background information
2. Adding relevant details that would help readers understand the full scope of the story
3. Improving the narrative flow and readability
4. Maintaining factual accuracy and journalistic standards
5. Creating a compelling but balanced presentation

Also provide:
- A concise summary (2-3 sentences)
- Estimated reading time in minutes

Respond with JSON in this exact format:
{{
  "enhancedContent": "The enhanced article content here...",
  "summary": "Concise 2-3 sentence summary...",
  "readingTime": 5
}}"""

    SUMMARY_SYSTEM_PROMPT = "You are a news editor who creates clear, concise summaries of articles."

    SUMMARY_PROMPT = """Summarize this news article in 2-3 clear, concise sentences that capture the main points and significance:

Title: {title}
Content: {content}

Provide a summary that would help someone quickly understand what happened and why it matters."""

    CATEGORIZE_SYSTEM_PROMPT = (
        "You are an expert news categorization system. Analyze the content "
        "and provide the most appropriate category."
    )

    CATEGORIZE_PROMPT = """Analyze this news article and categorize it into one of these categories:
{categories}

Title: {title}
Content: {content}

Respond with JSON in this format:
{{
  "category": "Technology",
  "confidence": 0.95,
  "reasoning": "Brief explanation of why this category was chosen"
}}"""

    TOPICS_SYSTEM_PROMPT = (
        "You are a news trend analyst who identifies important topics and "
        "themes from multiple articles."
    )

    TOPICS_PROMPT = """Analyze these news articles and extract the top 5-8 trending topics or themes. Focus on current events, technologies, people, or issues that appear frequently or are particularly significant.

Articles:
{articles}

Respond with JSON in this format:
{{
  "topics": ["Topic 1", "Topic 2", "Topic 3"],
  "reasoning": "Brief explanation of the trending themes identified"
}}"""

    INSIGHT_SYSTEM_PROMPT = (
        "You are a thoughtful news analyst who provides context and insights "
        "about current events."
    )

    INSIGHT_PROMPT = """Based on these recent news articles, provide a brief insight or analysis about current trends, patterns, or significant developments. Write this as if you're a news analyst providing context to listeners.

Recent Articles:
{articles}

Write a 2-3 sentence insight that connects these stories or highlights what's significant about current events."""

    SPEECH_TEMPLATE = "Breaking News: {title}\n\n{text}\n\nThis was your AI News Radio report."

    def __init__(
        self,
        provider: LLMProvider,
        cache: "MemoryCache | None" = None,
        audio_ttl: int = 3600,
        model: str | None = None,
    ):
        """
        Initialize the service with an AI provider.

        Args:
            provider: Provider used for completions and speech
            cache: Optional cache for synthesized audio
            audio_ttl: Seconds synthesized audio stays cached
            model: Overrides the standard-tier model; fast-tier calls keep
                the provider's cheaper model
        """
        self.provider = provider
        self.cache = cache
        self.audio_ttl = audio_ttl
        self.model = model

    @property
    def speech_enabled(self) -> bool:
        return self.provider.capabilities.supports_speech

    def _model(self, tier: ModelTier) -> str:
        if tier == ModelTier.STANDARD and self.model:
            return self.model
        return self.provider.get_model_for_tier(tier)

    # ─────────────────────────────────────────────────────────────
    # Enhancement & summaries (raise on failure)
    # ─────────────────────────────────────────────────────────────

    def enhance_article(self, article: Article) -> EnhancedArticleContent:
        """
        Expand an article and produce a fresh summary and reading time.

        Missing fields in the model output fall back to the article's own
        content and summary.

        Raises:
            ContentServiceError: If the provider call or JSON parsing fails
        """
        try:
            response = self.provider.complete(
                user_prompt=self.ENHANCE_PROMPT.format(
                    title=article.title,
                    content=article.content,
                    source=article.source_name,
                    category=article.category,
                ),
                system_prompt=self.ENHANCE_SYSTEM_PROMPT,
                model=self._model(ModelTier.STANDARD),
                max_tokens=2000,
                json_mode=True,
            )
            result = self._parse_json(response.text)
        except Exception as e:
            logger.error(f"Failed to enhance article {article.id}: {e}")
            raise ContentServiceError(f"Failed to enhance article with AI: {e}") from e

        return EnhancedArticleContent(
            enhanced_content=result.get("enhancedContent") or article.content,
            summary=result.get("summary") or article.summary,
            reading_time=self._clamp_reading_time(result.get("readingTime")),
        )

    def generate_summary(self, content: str, title: str) -> str:
        """
        Summarize an article in two or three sentences.

        Raises:
            ContentServiceError: If the provider call fails
        """
        try:
            response = self.provider.complete(
                user_prompt=self.SUMMARY_PROMPT.format(title=title, content=content),
                system_prompt=self.SUMMARY_SYSTEM_PROMPT,
                model=self._model(ModelTier.STANDARD),
                max_tokens=200,
            )
        except Exception as e:
            logger.error(f"Failed to generate summary: {e}")
            raise ContentServiceError(f"Failed to generate article summary: {e}") from e

        return response.text.strip()

    # ─────────────────────────────────────────────────────────────
    # Classification & trends (fall back on failure)
    # ─────────────────────────────────────────────────────────────

    def categorize_article(self, title: str, content: str) -> str:
        """Pick a news category. Returns DEFAULT_CATEGORY when unsure."""
        try:
            response = self.provider.complete(
                user_prompt=self.CATEGORIZE_PROMPT.format(
                    categories="\n".join(f"- {c}" for c in NEWS_CATEGORIES),
                    title=title,
                    content=content[:self.CATEGORIZE_CONTENT_CHARS],
                ),
                system_prompt=self.CATEGORIZE_SYSTEM_PROMPT,
                model=self._model(ModelTier.FAST),
                max_tokens=150,
                json_mode=True,
            )
            category = self._parse_json(response.text).get("category")
        except Exception as e:
            logger.error(f"Failed to categorize article: {e}")
            return DEFAULT_CATEGORY

        if category not in NEWS_CATEGORIES:
            logger.warning(f"Model returned unknown category {category!r}")
            return DEFAULT_CATEGORY
        return category

    def extract_key_topics(self, articles: list[Article]) -> list[str]:
        """Extract trending topics from the most recent articles. Empty on failure."""
        if not articles:
            return []

        listing = "\n\n".join(
            f"{a.title}: {a.summary}" for a in articles[:self.TOPIC_ARTICLE_LIMIT]
        )
        try:
            response = self.provider.complete(
                user_prompt=self.TOPICS_PROMPT.format(articles=listing),
                system_prompt=self.TOPICS_SYSTEM_PROMPT,
                model=self._model(ModelTier.FAST),
                max_tokens=300,
                json_mode=True,
            )
            topics = self._parse_json(response.text).get("topics") or []
        except Exception as e:
            logger.error(f"Failed to extract key topics: {e}")
            return []

        return [str(t) for t in topics if t]

    def generate_news_insight(self, articles: list[Article]) -> str:
        """Write a short analyst note connecting recent stories. Empty on failure."""
        if not articles:
            return ""

        listing = "\n\n".join(
            f"{a.title} ({a.category}): {a.summary}"
            for a in articles[:self.INSIGHT_ARTICLE_LIMIT]
        )
        try:
            response = self.provider.complete(
                user_prompt=self.INSIGHT_PROMPT.format(articles=listing),
                system_prompt=self.INSIGHT_SYSTEM_PROMPT,
                model=self._model(ModelTier.STANDARD),
                max_tokens=200,
            )
        except Exception as e:
            logger.error(f"Failed to generate news insight: {e}")
            return ""

        return response.text.strip()

    # ─────────────────────────────────────────────────────────────
    # Speech (raises on failure, no fallback)
    # ─────────────────────────────────────────────────────────────

    def convert_text_to_speech(self, text: str, title: str) -> bytes:
        """
        Narrate an article as MP3 audio.

        Raises:
            ContentServiceError: If synthesis fails or is unsupported
        """
        cache_key = self._audio_cache_key(text, title)
        if self.cache:
            if cached := self.cache.get(cache_key):
                return cached

        speech_text = self.SPEECH_TEMPLATE.format(title=title, text=text)
        try:
            audio = self.provider.synthesize_speech(speech_text)
        except Exception as e:
            logger.error(f"Failed to convert text to speech: {e}")
            raise ContentServiceError(f"Failed to convert article to audio: {e}") from e

        if self.cache:
            self.cache.set(cache_key, audio, ttl=self.audio_ttl)
        return audio

    # ─────────────────────────────────────────────────────────────
    # Async wrappers
    # ─────────────────────────────────────────────────────────────

    async def _run(self, func, *args):
        """Run a blocking provider call in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args))

    async def enhance_article_async(self, article: Article) -> EnhancedArticleContent:
        return await self._run(self.enhance_article, article)

    async def convert_text_to_speech_async(self, text: str, title: str) -> bytes:
        return await self._run(self.convert_text_to_speech, text, title)

    async def extract_key_topics_async(self, articles: list[Article]) -> list[str]:
        return await self._run(self.extract_key_topics, articles)

    async def generate_news_insight_async(self, articles: list[Article]) -> str:
        return await self._run(self.generate_news_insight, articles)

    # ─────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────

    def _clamp_reading_time(self, value) -> int:
        try:
            minutes = int(value) if value else self.DEFAULT_READING_TIME
        except (TypeError, ValueError):
            minutes = self.DEFAULT_READING_TIME
        return max(self.MIN_READING_TIME, min(self.MAX_READING_TIME, minutes))

    @staticmethod
    def _parse_json(text: str) -> dict:
        """Parse a JSON object from model output, tolerating code fences."""
        cleaned = text.strip()
        if cleaned.startswith("```"):
            cleaned = cleaned.strip("`")
            if cleaned.startswith("json"):
                cleaned = cleaned[4:]
        result = json.loads(cleaned or "{}")
        if not isinstance(result, dict):
            raise ValueError("Expected a JSON object")
        return result

    @staticmethod
    def _audio_cache_key(text: str, title: str) -> str:
        digest = hashlib.sha256(f"{title}\n{text}".encode()).hexdigest()[:16]
        return f"audio:{digest}"
