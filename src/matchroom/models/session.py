"""Connected player session models."""

from dataclasses import dataclass
from enum import IntEnum


class Team(IntEnum):
    """Team ids as used by the game host."""

    SPECTATORS = 0
    RED = 1
    BLUE = 2

    @property
    def label(self) -> str:
        return {
            Team.SPECTATORS: "Spectators",
            Team.RED: "Red Team",
            Team.BLUE: "Blue Team",
        }[self]


@dataclass(eq=False)
class PlayerSession:
    """A connected player as reported by the host.

    `id` is only unique while connected; `fingerprint` identifies the
    underlying connection and is what reconnects are recognised by.
    """

    id: int
    name: str
    fingerprint: str | None = None
    team: Team = Team.SPECTATORS
    admin: bool = False  # Host-level admin flag

    @property
    def on_team(self) -> bool:
        return self.team != Team.SPECTATORS
