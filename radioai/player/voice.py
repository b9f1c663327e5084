"""
Voice commands for the player.

Transcripts must contain a wake phrase. The remaining text is matched against
a small set of keywords and applied to the controller.
"""

import logging
from dataclasses import dataclass

from ..client import RadioClient
from .controller import AudioController

logger = logging.getLogger(__name__)

DEFAULT_WAKE_PHRASES = ("hey radio", "radio ai")
VOLUME_STEP = 0.1


@dataclass(frozen=True)
class VoiceCommandResult:
    action: str
    message: str


class VoiceCommandProcessor:
    """Map spoken commands onto an AudioController."""

    def __init__(
        self,
        controller: AudioController,
        client: RadioClient | None = None,
        wake_phrases: tuple[str, ...] = DEFAULT_WAKE_PHRASES,
    ):
        self.controller = controller
        self.client = client
        self.wake_phrases = wake_phrases

    def process(self, transcript: str) -> VoiceCommandResult | None:
        """Handle one transcript. Returns None when no wake phrase was spoken."""
        command = transcript.lower().strip()
        if not any(phrase in command for phrase in self.wake_phrases):
            return None

        for phrase in self.wake_phrases:
            command = command.replace(phrase, "").strip()
        logger.info(f"Voice command detected: {command}")

        state = self.controller.state

        if "what" in command and "playing" in command:
            if state.current_article is None:
                return VoiceCommandResult("now_playing", "Nothing is playing")
            return VoiceCommandResult("now_playing", state.current_article.get("title", ""))

        if "play" in command and "pause" not in command and "stop" not in command:
            if state.is_playing:
                return VoiceCommandResult("none", "Already playing")
            self.controller.resume_audio()
            return VoiceCommandResult("resume", "Resuming playback")

        if "pause" in command or "stop" in command:
            if not state.is_playing:
                return VoiceCommandResult("none", "Already paused")
            self.controller.pause_audio()
            return VoiceCommandResult("pause", "Paused playback")

        if "next" in command or "skip" in command:
            self.controller.skip_next()
            return VoiceCommandResult("next", "Next article")

        if "previous" in command or "back" in command:
            self.controller.skip_previous()
            return VoiceCommandResult("previous", "Previous article")

        if "volume up" in command or "louder" in command:
            self.controller.set_volume(round(state.volume + VOLUME_STEP, 2))
            return VoiceCommandResult("volume_up", self._volume_message())

        if "volume down" in command or "quieter" in command:
            self.controller.set_volume(round(state.volume - VOLUME_STEP, 2))
            return VoiceCommandResult("volume_down", self._volume_message())

        if "add to favorites" in command or "favorite this" in command:
            return self._favorite_current()

        return VoiceCommandResult("unrecognized", f'Command not recognized: "{command}"')

    def _volume_message(self) -> str:
        return f"Volume: {round(self.controller.state.volume * 100)}%"

    def _favorite_current(self) -> VoiceCommandResult:
        article = self.controller.state.current_article
        if article is None:
            return VoiceCommandResult("none", "Nothing is playing")
        if self.client is not None:
            self.client.add_favorite(article["id"])
        return VoiceCommandResult("favorite", "Added to favorites")
