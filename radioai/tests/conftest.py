"""
Pytest fixtures for RadioAI tests.
"""

import pytest
from fastapi.testclient import TestClient

from radioai.cache import MemoryCache
from radioai.config import state
from radioai.content_service import ContentService
from radioai.notification_service import NotificationFeed
from radioai.player import AudioElement, PlaybackError
from radioai.providers.base import LLMProvider, LLMResponse, ProviderCapabilities, ModelTier
from radioai.server import app
from radioai.store import MemoryStore


class MockProvider(LLMProvider):
    """Mock AI provider that returns pre-configured responses."""

    TIER_MODELS = {
        ModelTier.FAST: "mock-fast",
        ModelTier.STANDARD: "mock-standard",
    }

    def __init__(self, supports_speech: bool = True):
        self.calls: list[dict] = []
        self.responses: list[str] = []
        self.speech_calls: list[str] = []
        self.speech_audio = b"ID3mock-mp3-bytes"
        self.fail = False
        self._supports_speech = supports_speech
        self._call_index = 0

    @property
    def name(self) -> str:
        return "mock"

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(supports_json_mode=True, supports_speech=self._supports_speech)

    def queue_response(self, text: str):
        """Queue a response to be returned on the next complete() call."""
        self.responses.append(text)

    def complete(
        self,
        user_prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.0,
        json_mode: bool = False,
    ) -> LLMResponse:
        self.calls.append({
            "user_prompt": user_prompt,
            "system_prompt": system_prompt,
            "model": model,
            "json_mode": json_mode,
        })
        if self.fail:
            raise RuntimeError("provider unavailable")
        text = self.responses[self._call_index] if self._call_index < len(self.responses) else "{}"
        self._call_index += 1
        return LLMResponse(text=text, model=model or "mock-fast")

    def synthesize_speech(
        self,
        text: str,
        model: str | None = None,
        voice: str | None = None,
        speed: float = 1.0,
    ) -> bytes:
        if not self._supports_speech:
            return super().synthesize_speech(text, model, voice, speed)
        self.speech_calls.append(text)
        if self.fail:
            raise RuntimeError("speech unavailable")
        return self.speech_audio


class FakeAudioElement(AudioElement):
    """
    In-memory audio element.

    Records transport calls; tests drive playback by calling `dispatch()`.
    """

    def __init__(self):
        super().__init__()
        self.loads: list[str] = []
        self.play_calls = 0
        self.pause_calls = 0
        self.fail_play = False
        self._current_time = 0.0
        self._duration = 0.0
        self._volume = 1.0

    def load(self, src: str, generation: int) -> None:
        self.src = src
        self.generation = generation
        self.loads.append(src)
        self._current_time = 0.0

    def play(self) -> None:
        self.play_calls += 1
        if self.fail_play:
            raise PlaybackError("autoplay blocked")

    def pause(self) -> None:
        self.pause_calls += 1

    @property
    def current_time(self) -> float:
        return self._current_time

    @current_time.setter
    def current_time(self, value: float) -> None:
        self._current_time = value

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = value

    def advance(self, seconds: float) -> None:
        """Move playback forward and fire timeupdate."""
        self._current_time += seconds
        self.dispatch("timeupdate")

    def set_duration(self, seconds: float) -> None:
        self._duration = seconds
        self.dispatch("durationchange")


def _install_state(store, provider=None):
    """Swap process state for test instances. Returns the previous values."""
    original = (
        state.store,
        state.audio_cache,
        state.provider,
        state.content_service,
        state.notifications,
    )
    state.store = store
    state.audio_cache = MemoryCache(max_size=16)
    state.provider = provider
    state.content_service = (
        ContentService(provider=provider, cache=state.audio_cache) if provider else None
    )
    state.notifications = NotificationFeed(store)
    return original


def _restore_state(original):
    (
        state.store,
        state.audio_cache,
        state.provider,
        state.content_service,
        state.notifications,
    ) = original


@pytest.fixture
def store():
    """A freshly seeded store."""
    return MemoryStore(seed=True)


@pytest.fixture
def empty_store():
    """A store with no fixture data."""
    return MemoryStore(seed=False)


@pytest.fixture
def mock_provider():
    return MockProvider()


@pytest.fixture
def speechless_provider():
    """Provider that can only complete text."""
    return MockProvider(supports_speech=False)


@pytest.fixture
def client(store):
    """Test client over a seeded store with AI disabled."""
    original = _install_state(store)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    _restore_state(original)


@pytest.fixture
def ai_client(store, mock_provider):
    """Test client with a mock AI provider. Yields (client, provider)."""
    original = _install_state(store, provider=mock_provider)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client, mock_provider

    _restore_state(original)


@pytest.fixture
def audio_element():
    return FakeAudioElement()
