"""
Player helpers: time formatting, progress and saving listening progress.
"""

import logging

import httpx

from ..client import RadioClient, ApiError
from .controller import AudioController, PlayerState

logger = logging.getLogger(__name__)


def format_time(seconds: float) -> str:
    """Format seconds as m:ss."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def progress_percent(state: PlayerState) -> float:
    """Playback position as a percentage of duration, 0 when duration is unknown."""
    if not state.duration:
        return 0.0
    return state.current_time / state.duration * 100


class AudioPlayer:
    """Controller plus the API client used to record listening history."""

    def __init__(self, controller: AudioController, client: RadioClient):
        self.controller = controller
        self.client = client

    @property
    def state(self) -> PlayerState:
        return self.controller.state

    @property
    def is_buffering(self) -> bool:
        return self.controller.state.is_loading

    def progress_percent(self) -> float:
        return progress_percent(self.controller.state)

    def save_progress(self, article_id: int, progress: float, completed: bool = False) -> dict | None:
        """
        Record progress for an article. The client drops cached history.

        Failures are logged and return None so playback is never interrupted.
        """
        try:
            return self.client.update_progress(article_id, progress, completed)
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Failed to save progress for article {article_id}: {e}")
            return None
