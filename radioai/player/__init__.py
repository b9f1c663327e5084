"""
Client-side audio playback: element abstraction, queue controller,
player helpers and voice commands.
"""

from .element import AudioElement, AudioEvent, PlaybackError, EVENT_TYPES
from .controller import AudioController, PlayerState, ArticleData
from .audio_player import AudioPlayer, format_time, progress_percent
from .voice import VoiceCommandProcessor, VoiceCommandResult

__all__ = [
    "AudioElement",
    "AudioEvent",
    "PlaybackError",
    "EVENT_TYPES",
    "AudioController",
    "PlayerState",
    "ArticleData",
    "AudioPlayer",
    "format_time",
    "progress_percent",
    "VoiceCommandProcessor",
    "VoiceCommandResult",
]
