"""Interface to the game host room.

The real host (room creation, physics, transport) lives outside this
service. `LocalRoom` is an in-memory stand-in used for development runs and
tests; it records announcements instead of delivering them.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from matchroom.models.events import (
    AdminChanged,
    BallTouched,
    GamePaused,
    GameStarted,
    GameStopped,
    GameUnpaused,
    PlayerJoined,
    PlayerLeft,
    PlayerTeamChanged,
    RoomEvent,
    TeamGoal,
)
from matchroom.models.session import PlayerSession, Team

logger = logging.getLogger(__name__)


@dataclass
class Scores:
    """Score snapshot reported by the host."""

    red: int = 0
    blue: int = 0
    time: float = 0.0
    time_limit: int = 3
    score_limit: int = 3


@dataclass
class Announcement:
    message: str
    target_id: int | None = None  # None broadcasts to the whole room
    color: int | None = None
    style: str = "normal"
    sound: int = 1


class RoomGateway(Protocol):
    """Operations this service consumes from the game host."""

    def get_player_list(self) -> list[PlayerSession]: ...

    def get_player(self, player_id: int) -> PlayerSession | None: ...

    def get_max_players(self) -> int: ...

    def set_player_team(self, player_id: int, team: Team) -> None: ...

    def set_player_admin(self, player_id: int, admin: bool) -> None: ...

    def kick_player(self, player_id: int, reason: str, ban: bool = False) -> None: ...

    def start_game(self) -> None: ...

    def stop_game(self) -> None: ...

    def pause_game(self, paused: bool) -> None: ...

    def get_scores(self) -> Scores | None: ...

    def get_ball_position(self) -> tuple[float, float] | None: ...

    def send_announcement(
        self,
        message: str,
        target_id: int | None = None,
        color: int | None = None,
        style: str = "normal",
        sound: int = 1,
    ) -> None: ...

    def is_alive(self) -> bool: ...


@dataclass
class LocalRoom:
    """In-memory room used when no real host is attached.

    When `event_sink` is set, state changes are reported back as room
    events, the way a real host fires its hooks.
    """

    max_players: int = 16
    players: dict[int, PlayerSession] = field(default_factory=dict)
    announcements: list[Announcement] = field(default_factory=list)
    kicked: list[tuple[int, str, bool]] = field(default_factory=list)
    game_running: bool = False
    paused: bool = False
    scores: Scores = field(default_factory=Scores)
    ball_position: tuple[float, float] = (0.0, 0.0)
    alive: bool = True
    event_sink: Callable[[RoomEvent], None] | None = None

    def _emit(self, event: RoomEvent) -> None:
        if self.event_sink is not None:
            self.event_sink(event)

    # Host-side helpers (not part of the gateway protocol)

    def add_player(
        self,
        player_id: int,
        name: str,
        fingerprint: str | None = None,
        team: Team = Team.SPECTATORS,
    ) -> PlayerSession:
        player = PlayerSession(id=player_id, name=name, fingerprint=fingerprint, team=team)
        self.players[player_id] = player
        self._emit(PlayerJoined(player))
        return player

    def remove_player(self, player_id: int) -> PlayerSession | None:
        player = self.players.pop(player_id, None)
        if player is not None:
            self._emit(PlayerLeft(player))
        return player

    def touch_ball(self, player_id: int) -> None:
        player = self.players.get(player_id)
        if player is not None:
            self._emit(BallTouched(player))

    def score_goal(self, team: Team) -> None:
        if Team(team) == Team.RED:
            self.scores.red += 1
        else:
            self.scores.blue += 1
        self._emit(TeamGoal(Team(team)))

    def messages_for(self, player_id: int | None) -> list[str]:
        """Messages targeted at `player_id` (None: broadcasts only)."""
        return [a.message for a in self.announcements if a.target_id == player_id]

    # RoomGateway

    def get_player_list(self) -> list[PlayerSession]:
        return list(self.players.values())

    def get_player(self, player_id: int) -> PlayerSession | None:
        return self.players.get(player_id)

    def get_max_players(self) -> int:
        return self.max_players

    def set_player_team(self, player_id: int, team: Team) -> None:
        player = self.players.get(player_id)
        if player is not None:
            player.team = Team(team)
            self._emit(PlayerTeamChanged(player))

    def set_player_admin(self, player_id: int, admin: bool) -> None:
        player = self.players.get(player_id)
        if player is not None:
            player.admin = admin
            self._emit(AdminChanged(player))

    def kick_player(self, player_id: int, reason: str, ban: bool = False) -> None:
        self.kicked.append((player_id, reason, ban))
        logger.info(f"Player {player_id} {'banned' if ban else 'kicked'}: {reason}")
        self.remove_player(player_id)

    def start_game(self) -> None:
        if self.game_running:
            return
        self.game_running = True
        self.paused = False
        self.scores = Scores(time_limit=self.scores.time_limit, score_limit=self.scores.score_limit)
        self._emit(GameStarted())

    def stop_game(self) -> None:
        if not self.game_running:
            return
        self.game_running = False
        self.paused = False
        self._emit(GameStopped())

    def pause_game(self, paused: bool) -> None:
        self.paused = paused
        self._emit(GamePaused() if paused else GameUnpaused())

    def get_scores(self) -> Scores | None:
        # Final scores stay readable after stop until the next start
        return self.scores

    def get_ball_position(self) -> tuple[float, float] | None:
        return self.ball_position if self.game_running else None

    def send_announcement(
        self,
        message: str,
        target_id: int | None = None,
        color: int | None = None,
        style: str = "normal",
        sound: int = 1,
    ) -> None:
        self.announcements.append(
            Announcement(message=message, target_id=target_id, color=color, style=style, sound=sound)
        )
        logger.debug(f"[announce -> {target_id if target_id is not None else 'all'}] {message}")

    def is_alive(self) -> bool:
        return self.alive
