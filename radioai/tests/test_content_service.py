"""
Tests for the AI content service.

Uses a mock provider so no API keys are required.
"""

import json

import pytest

from radioai.cache import MemoryCache
from radioai.content_service import ContentService, ContentServiceError


@pytest.fixture
def service(mock_provider):
    return ContentService(provider=mock_provider, cache=MemoryCache(max_size=8))


class TestEnhanceArticle:
    """Tests for enhance_article."""

    def test_parses_result(self, service, mock_provider, store):
        mock_provider.queue_response(json.dumps({
            "enhancedContent": "Expanded text.",
            "summary": "Two sentence summary.",
            "readingTime": 3,
        }))
        result = service.enhance_article(store.get_article(1))
        assert result.enhanced_content == "Expanded text."
        assert result.summary == "Two sentence summary."
        assert result.reading_time == 3
        assert mock_provider.calls[0]["json_mode"] is True
        assert mock_provider.calls[0]["model"] == "mock-standard"

    def test_reading_time_clamped(self, service, mock_provider, store):
        mock_provider.queue_response(json.dumps({"readingTime": 0}))
        mock_provider.queue_response(json.dumps({"readingTime": 99}))
        mock_provider.queue_response(json.dumps({"readingTime": "soon"}))
        article = store.get_article(1)
        assert service.enhance_article(article).reading_time == 5
        assert service.enhance_article(article).reading_time == 15
        assert service.enhance_article(article).reading_time == 5

    def test_missing_fields_fall_back_to_article(self, service, mock_provider, store):
        mock_provider.queue_response("{}")
        article = store.get_article(2)
        result = service.enhance_article(article)
        assert result.enhanced_content == article.content
        assert result.summary == article.summary

    def test_tolerates_code_fences(self, service, mock_provider, store):
        mock_provider.queue_response('```json\n{"summary": "Fenced."}\n```')
        assert service.enhance_article(store.get_article(1)).summary == "Fenced."

    def test_invalid_json_raises(self, service, mock_provider, store):
        mock_provider.queue_response("not json at all")
        with pytest.raises(ContentServiceError):
            service.enhance_article(store.get_article(1))

    def test_provider_failure_raises(self, service, mock_provider, store):
        mock_provider.fail = True
        with pytest.raises(ContentServiceError):
            service.enhance_article(store.get_article(1))


class TestSummaryAndCategorization:
    """Tests for summaries, categories and topics."""

    def test_generate_summary(self, service, mock_provider):
        mock_provider.queue_response("  A short summary.  ")
        assert service.generate_summary("content", "title") == "A short summary."

    def test_generate_summary_failure_raises(self, service, mock_provider):
        mock_provider.fail = True
        with pytest.raises(ContentServiceError):
            service.generate_summary("content", "title")

    def test_categorize(self, service, mock_provider):
        mock_provider.queue_response(json.dumps({"category": "Science", "confidence": 0.9}))
        assert service.categorize_article("Title", "x" * 5000) == "Science"
        assert "x" * 1001 not in mock_provider.calls[0]["user_prompt"]

    def test_categorize_unknown_falls_back(self, service, mock_provider):
        mock_provider.queue_response(json.dumps({"category": "Weather"}))
        assert service.categorize_article("Title", "Body") == "Breaking"

    def test_categorize_failure_falls_back(self, service, mock_provider):
        mock_provider.fail = True
        assert service.categorize_article("Title", "Body") == "Breaking"

    def test_extract_key_topics(self, service, mock_provider, store):
        mock_provider.queue_response(json.dumps({"topics": ["AI", "Climate", ""]}))
        topics = service.extract_key_topics(store.get_articles(limit=12))
        assert topics == ["AI", "Climate"]
        # Only the first ten articles are sent
        assert store.get_articles(limit=12)[-1].title not in mock_provider.calls[0]["user_prompt"]

    def test_extract_key_topics_failure(self, service, mock_provider, store):
        mock_provider.fail = True
        assert service.extract_key_topics(store.get_articles()) == []

    def test_no_articles_skips_provider(self, service, mock_provider):
        assert service.extract_key_topics([]) == []
        assert service.generate_news_insight([]) == ""
        assert mock_provider.calls == []

    def test_generate_news_insight_failure(self, service, mock_provider, store):
        mock_provider.fail = True
        assert service.generate_news_insight(store.get_articles()) == ""

    def test_configured_model_overrides_standard_tier(self, mock_provider, store):
        """A configured model is used for standard calls; fast calls keep the tier model."""
        service = ContentService(provider=mock_provider, model="my-custom-model")
        mock_provider.queue_response("Summary.")
        mock_provider.queue_response(json.dumps({"category": "Science"}))
        mock_provider.queue_response("Insight.")

        service.generate_summary("content", "title")
        service.categorize_article("Title", "Body")
        service.generate_news_insight(store.get_articles())

        models = [call["model"] for call in mock_provider.calls]
        assert models == ["my-custom-model", "mock-fast", "my-custom-model"]

    def test_tier_models_without_override(self, service, mock_provider):
        service.generate_summary("content", "title")
        service.categorize_article("Title", "Body")
        assert [call["model"] for call in mock_provider.calls] == ["mock-standard", "mock-fast"]


class TestTextToSpeech:
    """Tests for convert_text_to_speech."""

    def test_wraps_text_and_caches(self, service, mock_provider):
        audio = service.convert_text_to_speech("Body text.", "Headline")
        assert audio == mock_provider.speech_audio
        assert mock_provider.speech_calls == [
            "Breaking News: Headline\n\nBody text.\n\nThis was your AI News Radio report."
        ]

        service.convert_text_to_speech("Body text.", "Headline")
        assert len(mock_provider.speech_calls) == 1

    def test_failure_raises(self, service, mock_provider):
        mock_provider.fail = True
        with pytest.raises(ContentServiceError):
            service.convert_text_to_speech("Body", "Title")

    def test_unsupported_provider_raises(self, speechless_provider):
        service = ContentService(provider=speechless_provider)
        assert service.speech_enabled is False
        with pytest.raises(ContentServiceError):
            service.convert_text_to_speech("Body", "Title")
