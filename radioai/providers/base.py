"""
Base AI provider interface.

Defines the abstract interface that all provider implementations must follow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class ModelTier(Enum):
    """Model capability tiers for automatic selection."""
    FAST = "fast"          # Quick, cheap models for classification
    STANDARD = "standard"  # Balanced models for enhancement and summaries


@dataclass
class ProviderCapabilities:
    """Describes what features a provider supports."""
    supports_system_prompt: bool = True
    supports_json_mode: bool = False
    supports_speech: bool = False
    max_context_tokens: int = 128000


@dataclass
class LLMResponse:
    """Standardized response from any provider."""
    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    metadata: dict = field(default_factory=dict)


class LLMProvider(ABC):
    """
    Abstract base class for AI providers.

    Every provider generates text completions. Providers that can also
    synthesize speech advertise it through ``capabilities.supports_speech``
    and override ``synthesize_speech``.
    """

    TIER_MODELS: dict[ModelTier, str] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name (e.g., 'openai', 'anthropic')."""
        pass

    @property
    @abstractmethod
    def capabilities(self) -> ProviderCapabilities:
        """Return the provider's capabilities."""
        pass

    def get_model_for_tier(self, tier: ModelTier) -> str:
        """Get the model ID configured for a capability tier."""
        return self.TIER_MODELS[tier]

    @abstractmethod
    def complete(
        self,
        user_prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.0,
        json_mode: bool = False,
    ) -> LLMResponse:
        """
        Generate a completion from the model.

        Args:
            user_prompt: The user message/prompt
            system_prompt: Optional system prompt for context
            model: Specific model to use (defaults to provider's default)
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature (0.0 = deterministic)
            json_mode: Request JSON-formatted response if supported

        Returns:
            LLMResponse with the generated text and metadata
        """
        pass

    def synthesize_speech(
        self,
        text: str,
        model: str | None = None,
        voice: str | None = None,
        speed: float = 1.0,
    ) -> bytes:
        """
        Convert text to MP3 audio.

        Raises:
            NotImplementedError: If the provider cannot synthesize speech
        """
        raise NotImplementedError(f"{self.name} provider does not support speech synthesis")
