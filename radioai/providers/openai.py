"""
OpenAI provider implementation.

Supports GPT models with JSON mode and text-to-speech.
"""

from openai import OpenAI

from .base import LLMProvider, LLMResponse, ProviderCapabilities, ModelTier


class OpenAIProvider(LLMProvider):
    """
    OpenAI provider with JSON mode and speech synthesis.
    """

    TIER_MODELS = {
        ModelTier.FAST: "gpt-4o-mini",
        ModelTier.STANDARD: "gpt-4o",
    }

    MODEL_ALIASES = {
        "gpt4": "gpt-4o",
        "gpt4-mini": "gpt-4o-mini",
        "fast": "gpt-4o-mini",
        "standard": "gpt-4o",
    }

    # OpenAI rejects speech input longer than this
    MAX_SPEECH_CHARS = 4096

    def __init__(
        self,
        api_key: str,
        default_model: str = "gpt-4o",
        tts_model: str = "tts-1-hd",
        tts_voice: str = "nova",
        organization: str | None = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            default_model: Default chat model to use
            tts_model: Speech model used by synthesize_speech
            tts_voice: Voice used by synthesize_speech
            organization: Optional organization ID
        """
        self.client = OpenAI(api_key=api_key, organization=organization)
        self._default_model = self._resolve_model(default_model)
        self.tts_model = tts_model
        self.tts_voice = tts_voice

    def _resolve_model(self, model: str) -> str:
        """Resolve model alias to full model ID."""
        return self.MODEL_ALIASES.get(model, model)

    @property
    def name(self) -> str:
        return "openai"

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            supports_system_prompt=True,
            supports_json_mode=True,
            supports_speech=True,
            max_context_tokens=128000,
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
        """Generate a chat completion."""
        resolved_model = self._resolve_model(model) if model else self._default_model

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        kwargs = {
            "model": resolved_model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = self.client.chat.completions.create(**kwargs)

        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            text=choice.message.content or "",
            model=resolved_model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            metadata={
                "finish_reason": choice.finish_reason,
                "provider": "openai",
            }
        )

    def synthesize_speech(
        self,
        text: str,
        model: str | None = None,
        voice: str | None = None,
        speed: float = 1.0,
    ) -> bytes:
        """
        Convert text to MP3 audio bytes.

        Input beyond MAX_SPEECH_CHARS is cut off.
        """
        response = self.client.audio.speech.create(
            model=model or self.tts_model,
            voice=voice or self.tts_voice,
            input=text[:self.MAX_SPEECH_CHARS],
            speed=speed,
            response_format="mp3",
        )
        return response.content
