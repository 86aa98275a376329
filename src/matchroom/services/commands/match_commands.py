"""Team placement and game control commands."""

import logging
import random

from matchroom.errors import InvalidArguments, PlayerNotFound
from matchroom.models.authority import Permission
from matchroom.models.events import ReadyCountdownElapsed
from matchroom.models.notification import Notification, NotificationField
from matchroom.models.session import Team
from matchroom.services.commands.context import CommandContext
from matchroom.services.commands.registry import CommandSpec
from matchroom.utils import colors

logger = logging.getLogger(__name__)

ADMIN_ONLY = "❌ Admin only!"


def _move_command(team: Team, message: str, color: int):
    def handler(ctx: CommandContext, args: list[str]) -> None:
        target = ctx.find_player(" ".join(args))
        ctx.move_player(target, team)
        ctx.announce(message.format(target=target.name, actor=ctx.player.name), color, "normal")

    return handler


red_command = _move_command(Team.RED, "🔴 {target} moved to RED team by {actor}", colors.LIGHT_RED)
blue_command = _move_command(Team.BLUE, "🔵 {target} moved to BLUE team by {actor}", colors.LIGHT_BLUE)
spec_command = _move_command(Team.SPECTATORS, "⚪ {target} moved to spectators by {actor}", colors.GREY)


def start_command(ctx: CommandContext, args: list[str]) -> None:
    ctx.room.start_game()
    ctx.announce(f"🚀 Game started by {ctx.player.name}!")


def stop_command(ctx: CommandContext, args: list[str]) -> None:
    ctx.room.stop_game()
    ctx.announce(f"🛑 Game stopped by {ctx.player.name}!", colors.RED)


def pause_command(ctx: CommandContext, args: list[str]) -> None:
    ctx.room.pause_game(True)
    ctx.announce(f"⏸️ Game paused by {ctx.player.name}", colors.AMBER)


def unpause_command(ctx: CommandContext, args: list[str]) -> None:
    ctx.room.pause_game(False)
    ctx.announce(f"▶️ Game unpaused by {ctx.player.name}")


def clear_command(ctx: CommandContext, args: list[str]) -> None:
    for player in ctx.online_players():
        if player.on_team:
            ctx.room.set_player_team(player.id, Team.SPECTATORS)
    ctx.announce(f"🧹 All teams cleared by {ctx.player.name}!", colors.AMBER)


def kick_command(ctx: CommandContext, args: list[str]) -> None:
    target = ctx.find_player(args[0])
    reason = " ".join(args[1:]) or "No reason provided"

    ctx.room.kick_player(target.id, reason, False)
    ctx.announce(f"👢 {target.name} kicked by {ctx.player.name}. Reason: {reason}", colors.RED)
    ctx.notify(Notification(
        title="👢 Player Kicked",
        description=f"**{target.name}** was kicked by **{ctx.player.name}**",
        color=colors.ORANGE,
        fields=[NotificationField("Reason", reason, inline=False)],
    ))


def choose_command(ctx: CommandContext, args: list[str]) -> None:
    """Shuffle the named players onto alternating teams."""
    wanted = set(args)
    chosen = [p for p in ctx.online_players() if p.name in wanted]
    if not chosen:
        raise PlayerNotFound("❌ No valid players found!")

    random.shuffle(chosen)
    for index, player in enumerate(chosen):
        ctx.move_player(player, Team.RED if index % 2 == 0 else Team.BLUE)
    ctx.announce(f"🎲 Teams randomly assigned by {ctx.player.name}!")


def sub_command(ctx: CommandContext, args: list[str]) -> None:
    out_name, in_name = args
    players = {p.name: p for p in ctx.online_players()}
    player_out = players.get(out_name)
    player_in = players.get(in_name)

    if player_out is None or player_in is None:
        raise PlayerNotFound("❌ One or both players not found!")
    if not player_out.on_team:
        raise InvalidArguments("❌ Player to substitute is not in a team!")

    team = player_out.team
    ctx.room.set_player_team(player_out.id, Team.SPECTATORS)
    ctx.move_player(player_in, team)
    ctx.announce(
        f"🔄 Substitution: {player_in.name} in for {player_out.name}",
        colors.RED if team == Team.RED else colors.BLUE,
    )


def ready_command(ctx: CommandContext, args: list[str]) -> None:
    """Toggle ready; start after a countdown once every team player is ready."""
    state = ctx.state
    player = ctx.player

    if player.id in state.ready_players:
        state.ready_players.discard(player.id)
        ctx.announce(f"❌ {player.name} is not ready", colors.ORANGE, "normal")
    else:
        state.ready_players.add(player.id)
        ctx.announce(f"✅ {player.name} is ready!", colors.GREEN, "normal")

    team_ids = {p.id for p in ctx.online_players() if p.on_team}
    if len(team_ids) < 2 or not team_ids <= state.ready_players:
        return
    if state.ready_countdown_pending:
        return

    delay = ctx.settings.ready_countdown_seconds
    state.ready_countdown_pending = True
    ctx.announce(f"🚀 All players ready! Starting in {delay:g} seconds...")
    ctx.schedule(delay, ReadyCountdownElapsed())
    logger.info(f"All {len(team_ids)} team players ready, starting in {delay:g}s")


COMMANDS = [
    CommandSpec(
        name="ready",
        handler=ready_command,
        usage="ready",
        description="Toggle your ready status",
    ),
    CommandSpec(
        name="red",
        handler=red_command,
        permission=Permission.ADMIN,
        min_args=1,
        usage="red <player>",
        description="Move a player to the red team",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="blue",
        handler=blue_command,
        permission=Permission.ADMIN,
        min_args=1,
        usage="blue <player>",
        description="Move a player to the blue team",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="spec",
        handler=spec_command,
        permission=Permission.ADMIN,
        min_args=1,
        usage="spec <player>",
        description="Move a player to spectators",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="start",
        handler=start_command,
        permission=Permission.ADMIN,
        usage="start",
        description="Start the game",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="stop",
        handler=stop_command,
        permission=Permission.ADMIN,
        usage="stop",
        description="Stop the game",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="pause",
        handler=pause_command,
        permission=Permission.ADMIN,
        usage="pause",
        description="Pause the game",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="unpause",
        handler=unpause_command,
        permission=Permission.ADMIN,
        usage="unpause",
        description="Unpause the game",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="clear",
        handler=clear_command,
        permission=Permission.ADMIN,
        usage="clear",
        description="Move everyone to spectators",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="kick",
        handler=kick_command,
        permission=Permission.ADMIN,
        min_args=1,
        usage="kick <player> [reason]",
        description="Kick a player",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="choose",
        handler=choose_command,
        permission=Permission.ADMIN,
        min_args=1,
        usage="choose <player1> <player2> ...",
        description="Randomly assign players to teams",
        denied_message=ADMIN_ONLY,
    ),
    CommandSpec(
        name="sub",
        handler=sub_command,
        permission=Permission.ADMIN,
        min_args=2,
        max_args=2,
        usage="sub <player_out> <player_in>",
        description="Substitute a team player",
        denied_message=ADMIN_ONLY,
    ),
]
