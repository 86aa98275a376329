"""Inbound room events.

The host platform and the background timers both produce these; they are
consumed one at a time by `EventRouter.dispatch`.
"""

from dataclasses import dataclass
from typing import Union

from matchroom.models.session import PlayerSession, Team


@dataclass(frozen=True)
class PlayerJoined:
    player: PlayerSession


@dataclass(frozen=True)
class PlayerLeft:
    player: PlayerSession


@dataclass(frozen=True)
class PlayerChat:
    player: PlayerSession
    message: str


@dataclass(frozen=True)
class PlayerTeamChanged:
    player: PlayerSession
    by_player: PlayerSession | None = None


@dataclass(frozen=True)
class TeamGoal:
    team: Team


@dataclass(frozen=True)
class GameStarted:
    by_player: PlayerSession | None = None


@dataclass(frozen=True)
class GameStopped:
    by_player: PlayerSession | None = None


@dataclass(frozen=True)
class GamePaused:
    by_player: PlayerSession | None = None


@dataclass(frozen=True)
class GameUnpaused:
    by_player: PlayerSession | None = None


@dataclass(frozen=True)
class BallTouched:
    player: PlayerSession


@dataclass(frozen=True)
class AdminChanged:
    player: PlayerSession
    by_player: PlayerSession | None = None


# Timer events


@dataclass(frozen=True)
class ReminderTick:
    pass


@dataclass(frozen=True)
class AutoJoinTick:
    pass


@dataclass(frozen=True)
class LivenessTick:
    pass


@dataclass(frozen=True)
class ReadyCountdownElapsed:
    pass


@dataclass(frozen=True)
class GoalCelebration:
    scorer_name: str


RoomEvent = Union[
    PlayerJoined,
    PlayerLeft,
    PlayerChat,
    PlayerTeamChanged,
    TeamGoal,
    GameStarted,
    GameStopped,
    GamePaused,
    GameUnpaused,
    BallTouched,
    AdminChanged,
    ReminderTick,
    AutoJoinTick,
    LivenessTick,
    ReadyCountdownElapsed,
    GoalCelebration,
]
