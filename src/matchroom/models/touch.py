"""Ball touch models."""

from dataclasses import dataclass

from matchroom.models.session import PlayerSession, Team


@dataclass(frozen=True)
class BallTouch:
    """A single ball contact."""

    player: PlayerSession
    team: Team  # Team at the time of the touch
    timestamp_ms: float
