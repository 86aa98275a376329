"""Business logic services."""

from matchroom.services.authority import AuthorityStore
from matchroom.services.club_registry import ClubRegistry
from matchroom.services.event_queue import RoomEventQueue
from matchroom.services.event_router import EventRouter
from matchroom.services.match_engine import GameResult, GoalAttribution, MatchAttributionEngine
from matchroom.services.match_logger import MatchLogger
from matchroom.services.notifier import (
    DiscordNotifier,
    MockNotifier,
    get_notifier,
)
from matchroom.services.room_bot import RoomBot
from matchroom.services.room_gateway import LocalRoom, RoomGateway, Scores
from matchroom.services.scheduler import BackgroundScheduler
from matchroom.services.session_state import MatchPhase, SessionState
from matchroom.services.stats_store import PlayerStatsStore
from matchroom.services.touch_tracker import BallTouchTracker

__all__ = [
    "AuthorityStore",
    "ClubRegistry",
    "RoomEventQueue",
    "EventRouter",
    "GameResult",
    "GoalAttribution",
    "MatchAttributionEngine",
    "MatchLogger",
    "DiscordNotifier",
    "MockNotifier",
    "get_notifier",
    "RoomBot",
    "LocalRoom",
    "RoomGateway",
    "Scores",
    "BackgroundScheduler",
    "MatchPhase",
    "SessionState",
    "PlayerStatsStore",
    "BallTouchTracker",
]
