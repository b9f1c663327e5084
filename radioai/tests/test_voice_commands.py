"""
Tests for player helpers and voice commands.
"""

import pytest

from radioai.client import RadioClient
from radioai.player import (
    AudioController,
    AudioPlayer,
    PlayerState,
    VoiceCommandProcessor,
    format_time,
    progress_percent,
)


A = {"id": 1, "title": "Article A"}
B = {"id": 2, "title": "Article B"}


@pytest.fixture
def controller(audio_element):
    return AudioController(audio_element)


@pytest.fixture
def processor(controller):
    return VoiceCommandProcessor(controller)


class TestHelpers:
    """Tests for format_time and progress_percent."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (5, "0:05"),
        (65, "1:05"),
        (600.9, "10:00"),
        (-3, "0:00"),
    ])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_progress_percent(self):
        assert progress_percent(PlayerState(current_time=30, duration=120)) == 25
        assert progress_percent(PlayerState(current_time=30, duration=0)) == 0


class TestAudioPlayer:
    """Tests for AudioPlayer.save_progress."""

    def test_save_progress_invalidates_history(self, client, controller):
        radio = RadioClient(http=client)
        player = AudioPlayer(controller, radio)

        before = radio.get_history()
        assert before[0]["id"] == 1

        entry = player.save_progress(11, 75, completed=True)
        assert entry["articleId"] == 11
        assert entry["completed"] is True

        after = radio.get_history()
        assert after[0]["id"] == 11

    def test_save_progress_failure_returns_none(self, client, controller):
        player = AudioPlayer(controller, RadioClient(http=client))
        assert player.save_progress(1, -10) is None

    def test_buffering_follows_loading(self, client, controller):
        player = AudioPlayer(controller, RadioClient(http=client))
        assert player.is_buffering is False
        controller.play_article(A)
        assert player.is_buffering is True


class TestVoiceCommands:
    """Tests for VoiceCommandProcessor."""

    def test_requires_wake_phrase(self, processor, controller):
        controller.set_queue([A, B])
        assert processor.process("next") is None
        assert controller.state.queue_index == 0

    def test_next_and_previous(self, processor, controller):
        controller.set_queue([A, B])
        result = processor.process("Hey Radio, next")
        assert result.action == "next"
        assert controller.state.current_article == B

        result = processor.process("radio ai go back")
        assert result.action == "previous"
        assert controller.state.current_article == A

    def test_pause_and_resume(self, processor, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")

        assert processor.process("hey radio pause").action == "pause"
        assert controller.state.is_playing is False

        assert processor.process("hey radio play").action == "resume"
        assert controller.state.is_playing is True

    def test_stop_playing_pauses(self, processor, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        assert processor.process("hey radio stop playing").action == "pause"

    def test_play_when_already_playing(self, processor, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        assert processor.process("hey radio play").action == "none"

    def test_volume(self, processor, controller):
        result = processor.process("hey radio volume up")
        assert result.action == "volume_up"
        assert controller.state.volume == 0.9
        assert result.message == "Volume: 90%"

        processor.process("hey radio louder")
        processor.process("hey radio louder")
        assert controller.state.volume == 1.0

        result = processor.process("hey radio quieter")
        assert result.action == "volume_down"
        assert controller.state.volume == 0.9

    def test_what_is_playing(self, processor, controller):
        assert processor.process("hey radio what's playing").message == "Nothing is playing"
        controller.play_article(B)
        result = processor.process("hey radio what is playing")
        assert result.action == "now_playing"
        assert result.message == "Article B"

    def test_favorite_this(self, client, controller):
        radio = RadioClient(http=client)
        processor = VoiceCommandProcessor(controller, client=radio)
        controller.play_article(B)

        result = processor.process("hey radio favorite this")
        assert result.action == "favorite"
        assert radio.is_favorite(2) is True

    def test_unrecognized(self, processor):
        result = processor.process("hey radio sing a song")
        assert result.action == "unrecognized"
        assert result.message == 'Command not recognized: "sing a song"'
