"""
Anthropic Claude provider implementation.

Text completions only; Claude has no speech synthesis.
"""

import anthropic

from .base import LLMProvider, LLMResponse, ProviderCapabilities, ModelTier


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    TIER_MODELS = {
        ModelTier.FAST: "claude-haiku-4-5-20251001",
        ModelTier.STANDARD: "claude-sonnet-4-5-20250514",
    }

    MODEL_ALIASES = {
        "haiku": "claude-haiku-4-5-20251001",
        "sonnet": "claude-sonnet-4-5-20250514",
        "fast": "claude-haiku-4-5-20251001",
        "standard": "claude-sonnet-4-5-20250514",
    }

    def __init__(
        self,
        api_key: str,
        default_model: str = "claude-sonnet-4-5-20250514",
    ):
        self.client = anthropic.Anthropic(api_key=api_key)
        self._default_model = self._resolve_model(default_model)

    def _resolve_model(self, model: str) -> str:
        return self.MODEL_ALIASES.get(model, model)

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            supports_system_prompt=True,
            supports_json_mode=False,  # JSON is requested through the prompt instead
            supports_speech=False,
            max_context_tokens=200000,
        )

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
        Generate a completion using Claude.

        json_mode appends an instruction to the system prompt, since the
        Messages API has no native JSON response format.
        """
        resolved_model = self._resolve_model(model) if model else self._default_model

        system = system_prompt or ""
        if json_mode:
            system = f"{system}\n\nRespond with a single valid JSON object and nothing else.".strip()

        kwargs = {
            "model": resolved_model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": user_prompt}],
        }
        if temperature > 0:
            kwargs["temperature"] = temperature
        if system:
            kwargs["system"] = system

        response = self.client.messages.create(**kwargs)
        usage = response.usage

        return LLMResponse(
            text=response.content[0].text,
            model=resolved_model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            metadata={
                "stop_reason": response.stop_reason,
                "provider": "anthropic",
            }
        )
