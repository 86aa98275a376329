"""Chat commands: registry, dispatcher and handlers."""

from matchroom.services.commands import (
    authority_commands,
    club_commands,
    general_commands,
    match_commands,
)
from matchroom.services.commands.context import CommandContext
from matchroom.services.commands.dispatcher import CommandDispatcher
from matchroom.services.commands.registry import CommandRegistry, CommandSpec


def build_registry() -> CommandRegistry:
    """Registry holding every built-in command."""
    return CommandRegistry(
        general_commands.COMMANDS
        + authority_commands.COMMANDS
        + club_commands.COMMANDS
        + match_commands.COMMANDS
    )


__all__ = [
    "CommandContext",
    "CommandDispatcher",
    "CommandRegistry",
    "CommandSpec",
    "build_registry",
]
