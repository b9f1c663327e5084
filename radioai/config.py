"""
Configuration and application state management.
"""

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .store import Store
    from .cache import MemoryCache
    from .content_service import ContentService
    from .notification_service import NotificationFeed
    from .providers import LLMProvider

# Load environment variables
load_dotenv()


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


class Config:
    """Application configuration from environment."""
    # Provider configuration. OpenAI is required for speech synthesis.
    OPENAI_API_KEY: str = (
        os.getenv("OPENAI_API_KEY")
        or os.getenv("OPENAI_KEY")
        or os.getenv("API_KEY", "")
    )
    ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "")

    # Preferred provider: "openai" or "anthropic"
    LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "")

    TTS_MODEL: str = os.getenv("TTS_MODEL", "tts-1-hd")
    TTS_VOICE: str = os.getenv("TTS_VOICE", "nova")
    AUDIO_CACHE_TTL: int = int(os.getenv("AUDIO_CACHE_TTL", "3600"))  # seconds
    AUDIO_CACHE_SIZE: int = int(os.getenv("AUDIO_CACHE_SIZE", "64"))

    # Identity used for user-scoped endpoints
    DEMO_USER_ID: int = int(os.getenv("DEMO_USER_ID", "1"))
    # Let clients pick the acting user with an X-User-Id header
    ALLOW_USER_HEADER: bool = _parse_bool(os.getenv("ALLOW_USER_HEADER"))

    SEED_DATA: bool = _parse_bool(os.getenv("SEED_DATA"), default=True)
    PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def has_ai_key(cls) -> bool:
        """Check if any provider API key is configured."""
        return bool(cls.OPENAI_API_KEY or cls.ANTHROPIC_API_KEY)


config = Config()


class AppState:
    """Shared application state, populated by the server lifespan."""
    store: "Store | None" = None
    audio_cache: "MemoryCache | None" = None
    provider: "LLMProvider | None" = None
    content_service: "ContentService | None" = None
    notifications: "NotificationFeed | None" = None


state = AppState()


def get_store() -> "Store":
    """Dependency to get the store instance."""
    if not state.store:
        raise HTTPException(status_code=500, detail="Store not initialized")
    return state.store


def get_content_service() -> "ContentService":
    """Dependency to get the AI content service."""
    if not state.content_service:
        raise HTTPException(
            status_code=503,
            detail="AI content service unavailable: API key not configured"
        )
    return state.content_service


def get_notification_feed() -> "NotificationFeed":
    """Dependency to get the notification feed."""
    if not state.notifications:
        raise HTTPException(status_code=500, detail="Notifications not initialized")
    return state.notifications
