"""Process-wide room state aggregate."""

import time
from dataclasses import dataclass, field
from enum import Enum

from matchroom.config import Settings
from matchroom.models.authority import Permission
from matchroom.models.session import PlayerSession
from matchroom.models.stats import MatchStats
from matchroom.services.authority import AuthorityStore
from matchroom.services.club_registry import ClubRegistry
from matchroom.services.stats_store import PlayerStatsStore
from matchroom.services.touch_tracker import BallTouchTracker
from matchroom.utils.roles import role_label


class MatchPhase(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"


@dataclass
class SessionState:
    """Every store the event router and commands mutate.

    Built once per process and passed by reference; events are handled one
    at a time so nothing here is locked.
    """

    authority: AuthorityStore
    clubs: ClubRegistry
    stats: PlayerStatsStore
    touches: BallTouchTracker
    match: MatchStats = field(default_factory=MatchStats)
    last_match: MatchStats | None = None
    phase: MatchPhase = MatchPhase.IDLE

    # Players an admin placed on a team; exempt from auto-join correction
    manually_moved: set[int] = field(default_factory=set)
    ready_players: set[int] = field(default_factory=set)
    ready_countdown_pending: bool = False
    last_reminder_at: float | None = None
    started_at: float = field(default_factory=time.time)

    @classmethod
    def create(cls, settings: Settings) -> "SessionState":
        authority = AuthorityStore(owner_password=settings.owner_password)
        return cls(
            authority=authority,
            clubs=ClubRegistry(authority),
            stats=PlayerStatsStore(),
            touches=BallTouchTracker(
                capacity=settings.touch_history_capacity,
                window_ms=settings.touch_window_ms,
            ),
        )

    def has_permission(self, player: PlayerSession, permission: Permission) -> bool:
        if permission == Permission.PLAYER:
            return True
        if permission == Permission.CAPTAIN:
            return self.clubs.is_captain(player.name)
        if permission == Permission.ADMIN:
            return self.authority.is_admin(player)
        if permission == Permission.OWNER:
            return self.authority.is_owner(player)
        return False

    def role_label(self, player: PlayerSession) -> str:
        return role_label(player, self.authority, self.clubs)

    def format_player_name(self, player: PlayerSession) -> str:
        return f"{self.role_label(player)} {player.name}"

    def mark_manually_moved(self, player_id: int) -> None:
        self.manually_moved.add(player_id)

    def forget_session(self, player: PlayerSession) -> None:
        """Drop everything keyed by the volatile session id."""
        self.authority.forget_session(player)
        self.manually_moved.discard(player.id)
        self.ready_players.discard(player.id)

    def reset_sessions(self) -> None:
        """Forget every connected session, e.g. after the room was recreated."""
        self.authority.owner = None
        self.authority.admins.clear()
        self.manually_moved.clear()
        self.ready_players.clear()
        self.ready_countdown_pending = False
        self.phase = MatchPhase.IDLE

    def to_dict(self) -> dict:
        """Snapshot for the status API."""
        return {
            "clubs": {
                name: {"captain": club.captain_name, "members": list(club.members)}
                for name, club in self.clubs.clubs.items()
            },
            "player_stats": self.stats.to_dict(),
            "match_stats": self.match.to_dict(),
            "match_phase": self.phase.value,
            "admins": len(self.authority.saved_admins),
            "owner": self.authority.owner_name,
        }
