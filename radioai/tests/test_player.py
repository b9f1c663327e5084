"""
Tests for the audio/queue controller.

A fake element stands in for the browser audio element; tests fire its
events directly.
"""

import pytest

from radioai.player import AudioController, PlayerState


A = {"id": 1, "title": "Article A"}
B = {"id": 2, "title": "Article B"}
C = {"id": 3, "title": "Article C"}


@pytest.fixture
def controller(audio_element):
    return AudioController(audio_element)


def _assert_queue_invariant(state: PlayerState):
    if state.queue:
        assert 0 <= state.queue_index < len(state.queue)
    else:
        assert state.queue_index == -1


class TestInitialState:
    """Tests for a fresh controller."""

    def test_defaults(self, controller, audio_element):
        state = controller.state
        assert state.current_article is None
        assert state.is_playing is False
        assert state.queue == ()
        assert state.queue_index == -1
        assert state.volume == 0.8
        assert audio_element.volume == 0.8


class TestPlayArticle:
    """Tests for play_article."""

    def test_loads_audio_url(self, controller, audio_element):
        controller.play_article(A)
        assert audio_element.loads == ["/api/articles/1/audio"]
        assert audio_element.play_calls == 1
        assert controller.state.current_article == A
        assert controller.state.is_loading is True
        assert controller.state.current_time == 0

    def test_base_url_prefix(self, audio_element):
        controller = AudioController(audio_element, base_url="http://radio.local/")
        controller.play_article(B)
        assert audio_element.src == "http://radio.local/api/articles/2/audio"

    def test_play_event_sets_playing(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        assert controller.state.is_playing is True
        assert controller.state.is_loading is False

    def test_playback_failure(self, controller, audio_element):
        """A rejected play clears loading and leaves playback stopped."""
        audio_element.fail_play = True
        controller.play_article(A)
        assert controller.state.is_loading is False
        assert controller.state.is_playing is False
        assert controller.state.current_article == A


class TestElementEvents:
    """Element events are the only timing source."""

    def test_time_and_duration(self, controller, audio_element):
        controller.play_article(A)
        audio_element.set_duration(120)
        audio_element.advance(5)
        assert controller.state.duration == 120
        assert controller.state.current_time == 5

    def test_loading_events(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("canplay")
        assert controller.state.is_loading is False
        audio_element.dispatch("loadstart")
        assert controller.state.is_loading is True

    def test_error_event(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        audio_element.dispatch("error")
        assert controller.state.is_playing is False
        assert controller.state.is_loading is False

    def test_stale_events_are_dropped(self, controller, audio_element):
        """Events from an earlier load must not touch the current state."""
        controller.play_article(A)
        stale_generation = controller.generation
        controller.play_article(B)

        audio_element.dispatch("play", generation=stale_generation)
        audio_element.dispatch("ended", generation=stale_generation)
        assert controller.state.current_article == B
        assert controller.state.is_playing is False

        audio_element.dispatch("play")
        assert controller.state.is_playing is True

    def test_generation_increases_per_load(self, controller):
        controller.play_article(A)
        first = controller.generation
        controller.play_article(A)
        assert controller.generation == first + 1


class TestPauseResume:
    """Tests for pause_audio and resume_audio."""

    def test_pause(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        controller.pause_audio()
        assert audio_element.pause_calls == 1
        assert controller.state.is_playing is False

    def test_resume(self, controller, audio_element):
        controller.play_article(A)
        controller.pause_audio()
        controller.resume_audio()
        assert audio_element.play_calls == 2
        assert controller.state.is_playing is True

    def test_resume_failure_is_not_raised(self, controller, audio_element):
        controller.play_article(A)
        controller.pause_audio()
        audio_element.fail_play = True
        controller.resume_audio()
        assert controller.state.is_playing is False

    def test_resume_without_article(self, controller, audio_element):
        controller.resume_audio()
        assert audio_element.play_calls == 0


class TestQueue:
    """Tests for queue navigation."""

    def test_set_queue_and_skip(self, controller, audio_element):
        """Two skips reach C; a third is a no-op."""
        controller.set_queue([A, B, C])
        assert controller.state.current_article == A
        assert controller.state.queue_index == 0

        controller.skip_next()
        controller.skip_next()
        assert controller.state.current_article == C
        assert controller.state.queue_index == 2
        loads = list(audio_element.loads)

        controller.skip_next()
        assert controller.state.current_article == C
        assert controller.state.queue_index == 2
        assert audio_element.loads == loads

    def test_skip_resets_time_and_loads(self, controller, audio_element):
        controller.set_queue([A, B])
        audio_element.advance(30)
        controller.skip_next()
        assert controller.state.current_time == 0
        assert controller.state.is_loading is True
        assert audio_element.src == "/api/articles/2/audio"

    def test_skip_previous(self, controller):
        controller.set_queue([A, B, C], start_index=2)
        controller.skip_previous()
        assert controller.state.current_article == B
        controller.skip_previous()
        controller.skip_previous()
        assert controller.state.queue_index == 0
        assert controller.state.current_article == A

    def test_set_empty_queue(self, controller):
        controller.set_queue([A, B])
        controller.set_queue([])
        assert controller.state.queue_index == -1
        assert controller.state.current_article is None

    def test_start_index_clamped(self, controller):
        controller.set_queue([A, B], start_index=7)
        assert controller.state.queue_index == 1
        _assert_queue_invariant(controller.state)

    def test_add_to_empty_queue_sets_cursor(self, controller, audio_element):
        """The first queued article becomes the cursor without starting playback."""
        controller.add_to_queue(A)
        assert controller.state.queue == (A,)
        assert controller.state.queue_index == 0
        assert controller.state.current_article == A
        assert audio_element.loads == []
        _assert_queue_invariant(controller.state)

        controller.add_to_queue(B)
        assert controller.state.queue_index == 0
        controller.skip_next()
        assert controller.state.current_article == B

    def test_add_to_empty_queue_keeps_playing_article(self, controller):
        controller.play_article(C)
        controller.add_to_queue(A)
        assert controller.state.queue_index == 0
        assert controller.state.current_article == C

    def test_set_queue_while_playing_switches_source(self, controller, audio_element):
        """Replacing the queue mid-playback loads the new current article."""
        other = {"id": 9, "title": "Other"}
        controller.play_article(other)
        audio_element.dispatch("play")
        old_generation = controller.generation

        controller.set_queue([A, B, C])
        assert controller.state.current_article == A
        assert controller.state.queue_index == 0
        assert audio_element.src == "/api/articles/1/audio"

        audio_element.dispatch("ended", generation=old_generation)
        assert controller.state.current_article == A
        assert controller.state.queue_index == 0

    def test_set_queue_while_paused_releases_element(self, controller, audio_element):
        """Events from the paused source are dropped and resume loads the new article."""
        other = {"id": 9, "title": "Other"}
        controller.play_article(other)
        audio_element.dispatch("play")
        controller.pause_audio()

        controller.set_queue([A, B], start_index=0)
        assert controller.state.current_article == A
        audio_element.dispatch("ended")
        assert controller.state.current_article == A
        assert controller.state.queue_index == 0

        controller.resume_audio()
        assert audio_element.src == "/api/articles/1/audio"
        assert controller.state.is_loading is True

    def test_set_queue_keeps_loaded_article(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        loads = list(audio_element.loads)

        controller.set_queue([A, B])
        assert audio_element.loads == loads
        assert controller.state.is_playing is True

    def test_requeueing_released_article_reloads(self, controller, audio_element):
        """A source released by set_queue is loaded again before it can play."""
        other = {"id": 9, "title": "Other"}
        controller.play_article(other)
        controller.pause_audio()
        controller.set_queue([A])
        controller.set_queue([other])

        controller.resume_audio()
        assert audio_element.loads == ["/api/articles/9/audio", "/api/articles/9/audio"]
        audio_element.dispatch("play")
        assert controller.state.is_playing is True

    def test_set_empty_queue_while_playing_stops(self, controller, audio_element):
        controller.play_article(A)
        audio_element.dispatch("play")
        controller.set_queue([])
        assert controller.state.current_article is None
        assert controller.state.is_playing is False
        audio_element.dispatch("ended", generation=audio_element.generation)
        assert controller.state.current_article is None

    def test_remove_before_cursor_shifts(self, controller):
        controller.set_queue([A, B, C], start_index=2)
        controller.remove_from_queue(0)
        assert controller.state.queue == (B, C)
        assert controller.state.queue_index == 1

    def test_remove_after_cursor(self, controller):
        controller.set_queue([A, B, C], start_index=0)
        controller.remove_from_queue(2)
        assert controller.state.queue_index == 0

    def test_remove_current_last_entry_clamps(self, controller):
        controller.set_queue([A, B, C], start_index=2)
        controller.remove_from_queue(2)
        assert controller.state.queue == (A, B)
        assert controller.state.queue_index == 1

    def test_remove_only_entry(self, controller):
        controller.set_queue([A])
        controller.remove_from_queue(0)
        assert controller.state.queue == ()
        assert controller.state.queue_index == -1

    def test_remove_out_of_range(self, controller):
        controller.set_queue([A, B])
        controller.remove_from_queue(5)
        controller.remove_from_queue(-1)
        assert controller.state.queue == (A, B)

    def test_invariant_through_operations(self, controller):
        controller.set_queue([A, B, C], start_index=1)
        for op in (
            lambda: controller.remove_from_queue(1),
            lambda: controller.skip_next(),
            lambda: controller.remove_from_queue(0),
            lambda: controller.remove_from_queue(0),
            lambda: controller.skip_previous(),
            lambda: controller.add_to_queue(A),
        ):
            op()
            _assert_queue_invariant(controller.state)


class TestAutoAdvance:
    """Tests for the ended event."""

    def test_ended_plays_next(self, controller, audio_element):
        controller.set_queue([A, B])
        controller.play_article(A)
        audio_element.dispatch("ended")
        assert controller.state.current_article == B
        assert controller.state.queue_index == 1
        assert audio_element.src == "/api/articles/2/audio"

    def test_ended_at_end_stops(self, controller, audio_element):
        controller.set_queue([A])
        controller.play_article(A)
        audio_element.dispatch("play")
        audio_element.advance(40)
        audio_element.dispatch("ended")
        assert controller.state.is_playing is False
        assert controller.state.current_time == 0
        assert controller.state.current_article == A


class TestVolumeAndSeek:
    """Tests for set_volume and seek_to."""

    def test_volume_clamped(self, controller, audio_element):
        controller.set_volume(1.5)
        assert controller.state.volume == 1.0
        controller.set_volume(-1)
        assert controller.state.volume == 0.0
        assert audio_element.volume == 0.0

    def test_seek(self, controller, audio_element):
        controller.play_article(A)
        controller.seek_to(42)
        assert audio_element.current_time == 42
        assert controller.state.current_time == 42


class TestListeners:
    """Tests for state subscriptions."""

    def test_listener_receives_snapshots(self, controller):
        snapshots = []
        unsubscribe = controller.subscribe(snapshots.append)
        controller.set_volume(0.5)
        controller.add_to_queue(A)
        assert [s.volume for s in snapshots] == [0.5, 0.5]
        assert snapshots[0].queue == ()

        unsubscribe()
        controller.set_volume(0.2)
        assert len(snapshots) == 2

    def test_snapshots_are_immutable(self, controller):
        with pytest.raises(AttributeError):
            controller.state.volume = 0.1
