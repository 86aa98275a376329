"""Data models for the match room moderator."""

from matchroom.models.authority import Permission, RestoredRole
from matchroom.models.club import Club, Roster
from matchroom.models.events import (
    AdminChanged,
    AutoJoinTick,
    BallTouched,
    GamePaused,
    GameStarted,
    GameStopped,
    GameUnpaused,
    LivenessTick,
    PlayerChat,
    PlayerJoined,
    PlayerLeft,
    PlayerTeamChanged,
    ReadyCountdownElapsed,
    ReminderTick,
    RoomEvent,
    TeamGoal,
)
from matchroom.models.notification import Notification, NotificationField
from matchroom.models.session import PlayerSession, Team
from matchroom.models.stats import MatchStats, PlayerStats
from matchroom.models.touch import BallTouch

__all__ = [
    "Permission",
    "RestoredRole",
    "Club",
    "Roster",
    "AdminChanged",
    "AutoJoinTick",
    "BallTouched",
    "GamePaused",
    "GameStarted",
    "GameStopped",
    "GameUnpaused",
    "LivenessTick",
    "PlayerChat",
    "PlayerJoined",
    "PlayerLeft",
    "PlayerTeamChanged",
    "ReadyCountdownElapsed",
    "ReminderTick",
    "RoomEvent",
    "TeamGoal",
    "Notification",
    "NotificationField",
    "PlayerSession",
    "Team",
    "MatchStats",
    "PlayerStats",
    "BallTouch",
]
