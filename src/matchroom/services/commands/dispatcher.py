"""Routes prefixed chat text to registered command handlers."""

import logging

from matchroom.config import Settings
from matchroom.errors import (
    HandlerFault,
    InvalidArguments,
    PermissionDenied,
    RoomCommandError,
    UnknownCommand,
)
from matchroom.models.session import PlayerSession
from matchroom.services.commands.context import CommandContext, ScheduleFn
from matchroom.services.commands.registry import CommandRegistry, CommandSpec
from matchroom.services.match_engine import MatchAttributionEngine
from matchroom.services.notifier import Notifier
from matchroom.services.room_gateway import RoomGateway
from matchroom.services.session_state import SessionState
from matchroom.utils import colors

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Parses chat commands, checks permission and arity, runs handlers.

    Every failure is turned into a red message for the invoking player;
    nothing raised by a handler escapes `dispatch`.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        state: SessionState,
        room: RoomGateway,
        notifier: Notifier,
        settings: Settings,
        engine: MatchAttributionEngine,
        schedule: ScheduleFn,
    ):
        self.registry = registry
        self.state = state
        self.room = room
        self.notifier = notifier
        self.settings = settings
        self.engine = engine
        self.schedule = schedule

    @property
    def prefix(self) -> str:
        return self.settings.command_prefix

    def parse(self, message: str) -> tuple[str, list[str]] | None:
        """Split chat text into (lowercase command name, args); None if not a command."""
        if not message.startswith(self.prefix):
            return None
        tokens = message[len(self.prefix):].split()
        if not tokens:
            return "", []
        return tokens[0].lower(), tokens[1:]

    def dispatch(self, player: PlayerSession, message: str) -> bool:
        """Handle chat text; True when it was a command (known or not)."""
        parsed = self.parse(message)
        if parsed is None:
            return False

        name, args = parsed
        ctx = CommandContext(
            player=player,
            command=name,
            state=self.state,
            room=self.room,
            notifier=self.notifier,
            settings=self.settings,
            engine=self.engine,
            registry=self.registry,
            schedule=self.schedule,
        )

        try:
            spec = self._resolve(name)
            self._check(ctx, spec, args)
            spec.handler(ctx, args)
            logger.info(f"{player.name} used command: {self.prefix}{name} {' '.join(args)}".rstrip())
        except RoomCommandError as e:
            logger.info(f"Command {self.prefix}{name} by {player.name} refused: {e.message}")
            ctx.reply(e.message, colors.RED)
        except Exception as e:
            fault = HandlerFault(name, e)
            logger.exception(
                f"Error executing command {self.prefix}{name} args={args} "
                f"by {player.name} (id={player.id})"
            )
            ctx.reply(fault.message, colors.RED)

        return True

    def _resolve(self, name: str) -> CommandSpec:
        spec = self.registry.get(name)
        if spec is None:
            raise UnknownCommand(
                f"❌ Unknown command: {self.prefix}{name}. "
                f"Type {self.prefix}help for available commands."
            )
        return spec

    def _check(self, ctx: CommandContext, spec: CommandSpec, args: list[str]) -> None:
        if not ctx.has_permission(spec.permission):
            raise PermissionDenied(spec.denied_message)
        if not spec.accepts(len(args)):
            raise InvalidArguments(f"❌ Usage: {self.prefix}{spec.usage or spec.name}")
