"""Per-invocation command context handed to every handler."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from matchroom.config import Settings
from matchroom.errors import PlayerNotFound
from matchroom.models.authority import Permission
from matchroom.models.events import RoomEvent
from matchroom.models.notification import Notification
from matchroom.models.session import PlayerSession, Team
from matchroom.services.match_engine import MatchAttributionEngine
from matchroom.services.notifier import Notifier
from matchroom.services.room_gateway import RoomGateway
from matchroom.services.session_state import SessionState
from matchroom.utils import colors

if TYPE_CHECKING:
    from matchroom.services.commands.registry import CommandRegistry

ScheduleFn = Callable[[float, RoomEvent], None]


@dataclass
class CommandContext:
    """The invoking player plus everything a handler may touch."""

    player: PlayerSession
    command: str
    state: SessionState
    room: RoomGateway
    notifier: Notifier
    settings: Settings
    engine: MatchAttributionEngine
    registry: "CommandRegistry"
    schedule: ScheduleFn
    received_at: float = field(default_factory=time.monotonic)

    @property
    def prefix(self) -> str:
        return self.settings.command_prefix

    def reply(self, message: str, color: int = colors.GREEN, style: str = "normal") -> None:
        """Message only the invoking player."""
        self.room.send_announcement(message, self.player.id, color, style, 1)

    def announce(
        self,
        message: str,
        color: int = colors.GREEN,
        style: str = "bold",
        sound: int = 1,
    ) -> None:
        """Message the whole room."""
        self.room.send_announcement(message, None, color, style, sound)

    def notify(self, notification: Notification) -> None:
        self.notifier.send(notification)

    def has_permission(self, permission: Permission) -> bool:
        return self.state.has_permission(self.player, permission)

    def online_players(self) -> list[PlayerSession]:
        return self.room.get_player_list()

    def online_names(self) -> set[str]:
        return {p.name for p in self.room.get_player_list()}

    def find_player(self, name: str) -> PlayerSession:
        """Exact display-name lookup among connected players."""
        for player in self.room.get_player_list():
            if player.name == name:
                return player
        raise PlayerNotFound(f'❌ Player "{name}" not found.')

    def move_player(self, target: PlayerSession, team: Team) -> None:
        """Move a player and exempt them from auto-join correction."""
        self.room.set_player_team(target.id, team)
        self.state.mark_manually_moved(target.id)
