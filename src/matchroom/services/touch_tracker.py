"""Bounded history of ball touches used for goal attribution."""

import time
from collections import deque

from matchroom.models.session import PlayerSession
from matchroom.models.touch import BallTouch

DEFAULT_CAPACITY = 10
DEFAULT_WINDOW_MS = 5000


def _now_ms() -> float:
    return time.time() * 1000


class BallTouchTracker:
    """Keeps the most recent touches, oldest evicted first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, window_ms: int = DEFAULT_WINDOW_MS):
        self.capacity = capacity
        self.window_ms = window_ms
        self._touches: deque[BallTouch] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._touches)

    @property
    def history(self) -> list[BallTouch]:
        """All retained touches, oldest first."""
        return list(self._touches)

    def record_touch(self, player: PlayerSession, timestamp_ms: float | None = None) -> BallTouch:
        touch = BallTouch(
            player=player,
            team=player.team,
            timestamp_ms=_now_ms() if timestamp_ms is None else timestamp_ms,
        )
        self._touches.append(touch)
        return touch

    def recent_touches(
        self,
        window_ms: int | None = None,
        now_ms: float | None = None,
    ) -> list[BallTouch]:
        """Touches younger than the window, most recent first."""
        window = self.window_ms if window_ms is None else window_ms
        now = _now_ms() if now_ms is None else now_ms
        return [t for t in reversed(self._touches) if now - t.timestamp_ms < window]

    def clear(self) -> None:
        self._touches.clear()
