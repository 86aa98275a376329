"""Command registry: name -> handler record with permission tier and arity."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from matchroom.models.authority import Permission

if TYPE_CHECKING:
    from matchroom.services.commands.context import CommandContext

CommandHandler = Callable[["CommandContext", list[str]], None]

# Help sections, in display order
PERMISSION_ORDER = (Permission.PLAYER, Permission.CAPTAIN, Permission.ADMIN, Permission.OWNER)
PERMISSION_HEADINGS = {
    Permission.PLAYER: "👤 PLAYER",
    Permission.CAPTAIN: "👨‍✈️ CAPTAIN",
    Permission.ADMIN: "🛡️ ADMIN",
    Permission.OWNER: "👑 OWNER",
}


@dataclass(frozen=True)
class CommandSpec:
    """A registered chat command."""

    name: str
    handler: CommandHandler
    permission: Permission = Permission.PLAYER
    min_args: int = 0
    max_args: int | None = None  # None: any number of trailing tokens
    usage: str = ""
    description: str = ""
    denied_message: str | None = None

    def accepts(self, arg_count: int) -> bool:
        if arg_count < self.min_args:
            return False
        return self.max_args is None or arg_count <= self.max_args


class CommandRegistry:
    """Fixed mapping of lowercase command names to their specs."""

    def __init__(self, specs: list[CommandSpec] | None = None):
        self._commands: dict[str, CommandSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: CommandSpec) -> None:
        name = spec.name.lower()
        if name in self._commands:
            raise ValueError(f"Command already registered: {name}")
        self._commands[name] = spec

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name.lower())

    def names(self) -> list[str]:
        return list(self._commands)

    def by_permission(self, permission: Permission) -> list[CommandSpec]:
        return [spec for spec in self._commands.values() if spec.permission == permission]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
