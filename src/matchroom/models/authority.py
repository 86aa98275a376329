"""Authority and permission models."""

from enum import Enum


class RestoredRole(str, Enum):
    """Role re-established for a returning player on join."""

    OWNER = "owner"
    ADMIN = "admin"


class Permission(str, Enum):
    """Permission tier required to run a command."""

    PLAYER = "player"
    CAPTAIN = "captain"
    ADMIN = "admin"
    OWNER = "owner"
