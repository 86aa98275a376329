"""Club and roster models."""

from dataclasses import dataclass, field


@dataclass
class Club:
    """A named group of display names led by one captain.

    Captains are tracked by name since they may be offline.
    """

    name: str
    captain_name: str
    members: list[str] = field(default_factory=list)  # Captain included, insertion order

    def has_member(self, player_name: str) -> bool:
        return player_name in self.members

    def is_captain(self, player_name: str) -> bool:
        return self.captain_name == player_name


@dataclass
class Roster:
    """A club's members annotated with who is currently connected."""

    club_name: str
    captain_name: str
    members: list[str]
    online: list[str]
