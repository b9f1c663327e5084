"""
AI provider abstraction layer.

Supports OpenAI (completions and speech) and Anthropic (completions) with a
unified interface.
"""

from .base import LLMProvider, LLMResponse, ProviderCapabilities, ModelTier
from .anthropic import AnthropicProvider
from .openai import OpenAIProvider
from .factory import create_provider, get_provider_from_env, ProviderType

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "ProviderCapabilities",
    "ModelTier",
    "AnthropicProvider",
    "OpenAIProvider",
    "create_provider",
    "get_provider_from_env",
    "ProviderType",
]
