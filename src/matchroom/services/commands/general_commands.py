"""Commands available to every player."""

import random
import time

from matchroom.config import VERSION
from matchroom.errors import InvalidArguments
from matchroom.models.session import PlayerSession, Team
from matchroom.services.commands.context import CommandContext
from matchroom.services.commands.registry import (
    PERMISSION_HEADINGS,
    PERMISSION_ORDER,
    CommandSpec,
)
from matchroom.services.session_state import MatchPhase
from matchroom.services.stats_store import RANKABLE_STATS
from matchroom.utils import colors
from matchroom.utils.formatting import format_time, format_uptime

MEDALS = ("🥇", "🥈", "🥉", "4️⃣", "5️⃣")
ROLL_MAX = 1000
ROLL_DEFAULT = 100


def stats_command(ctx: CommandContext, args: list[str]) -> None:
    target_name = " ".join(args) if args else ctx.player.name
    stats = ctx.state.stats.get(target_name)
    ctx.reply(
        f"📊 {target_name}'s Stats:\n"
        f"⚽ Goals: {stats.goals} | 👊 Assists: {stats.assists} | 😅 Own Goals: {stats.own_goals}\n"
        f"🏆 Wins: {stats.wins} | 💔 Losses: {stats.losses} | 🎮 Games: {stats.games_played}\n"
        f"🌟 MVPs: {stats.mvps} | 📈 Win Rate: {stats.win_rate:.1f}%",
        colors.SKY,
    )


def ranking_command(ctx: CommandContext, args: list[str]) -> None:
    stat = args[0].lower() if args else "goals"
    if stat not in RANKABLE_STATS:
        raise InvalidArguments(f"❌ Unknown stat! Use one of: {', '.join(RANKABLE_STATS)}")

    top = [(name, stats) for name, stats in ctx.state.stats.top(stat, len(MEDALS)) if getattr(stats, stat) > 0]
    label = stat.replace("_", " ")
    if not top:
        ctx.reply(f"🏅 No {label} recorded yet!", colors.GOLD)
        return

    lines = [f"🏅 TOP {label.upper()}:"]
    for medal, (name, stats) in zip(MEDALS, top):
        lines.append(f"{medal} {name}: {getattr(stats, stat)} {label}")
    ctx.reply("\n".join(lines), colors.GOLD)


def coin_command(ctx: CommandContext, args: list[str]) -> None:
    result = random.choice(("Heads", "Tails"))
    ctx.announce(f"🪙 {ctx.player.name} flipped a coin: {result}!", colors.GOLD, "normal")


def roll_command(ctx: CommandContext, args: list[str]) -> None:
    try:
        maximum = int(args[0]) if args else ROLL_DEFAULT
    except ValueError:
        raise InvalidArguments(f"❌ Roll between 1-{ROLL_MAX}")
    if not 1 <= maximum <= ROLL_MAX:
        raise InvalidArguments(f"❌ Roll between 1-{ROLL_MAX}")

    result = random.randint(1, maximum)
    ctx.announce(f"🎲 {ctx.player.name} rolled {result} (1-{maximum})", colors.GREEN, "normal")


def help_command(ctx: CommandContext, args: list[str]) -> None:
    """List the commands the caller is allowed to use, grouped by tier."""
    lines = [f"🎮 {ctx.settings.room_name} - Available Commands:"]
    for permission in PERMISSION_ORDER:
        if not ctx.has_permission(permission):
            continue
        specs = ctx.registry.by_permission(permission)
        if not specs:
            continue
        lines.append("")
        lines.append(f"{PERMISSION_HEADINGS[permission]}:")
        for spec in specs:
            lines.append(f"{ctx.prefix}{spec.usage or spec.name} - {spec.description}")
    ctx.reply("\n".join(lines))


def discord_command(ctx: CommandContext, args: list[str]) -> None:
    invite = ctx.settings.discord_server_invite
    if not invite:
        ctx.reply("❌ Discord invite not configured.", colors.RED)
        return
    ctx.reply(f"💬 Join our Discord: {invite}", colors.DISCORD_BLURPLE, "bold")


def ping_command(ctx: CommandContext, args: list[str]) -> None:
    elapsed_ms = (time.monotonic() - ctx.received_at) * 1000
    ctx.reply(f"🏓 Pong! Response time: {elapsed_ms:.0f}ms")


def info_command(ctx: CommandContext, args: list[str]) -> None:
    game = "Waiting"
    if ctx.state.phase == MatchPhase.IN_PROGRESS:
        scores = ctx.room.get_scores()
        game = f"In Progress ({format_time(scores.time)})" if scores else "In Progress"

    ctx.reply(
        f"🎮 {ctx.settings.room_name}\n\n"
        f"📊 Room Info:\n"
        f"Players: {len(ctx.online_players())}/{ctx.room.get_max_players()}\n"
        f"Game: {game}\n"
        f"Clubs: {len(ctx.state.clubs.clubs)}\n"
        f"Uptime: {format_uptime(time.time() - ctx.state.started_at)}\n\n"
        f"🌐 Links:\n"
        f"Discord: {ctx.settings.discord_server_invite or 'Not set'}\n"
        f"Version: {VERSION}",
        colors.CYAN,
    )


def afk_command(ctx: CommandContext, args: list[str]) -> None:
    player = ctx.player
    ctx.room.set_player_team(player.id, Team.SPECTATORS)
    ctx.state.ready_players.discard(player.id)
    ctx.announce(f"💤 {player.name} moved to spectators (AFK)", colors.AMBER, "normal")


def _team_section(ctx: CommandContext, heading: str, players: list[PlayerSession]) -> list[str]:
    if not players:
        return []
    lines = [f"{heading} ({len(players)}):"]
    lines.extend(f"   {ctx.state.format_player_name(p)}" for p in players)
    return lines


def list_command(ctx: CommandContext, args: list[str]) -> None:
    players = ctx.online_players()
    lines = [f"👥 PLAYERS ({len(players)}/{ctx.room.get_max_players()}):"]
    lines += _team_section(ctx, "🔴 Red Team", [p for p in players if p.team == Team.RED])
    lines += _team_section(ctx, "🔵 Blue Team", [p for p in players if p.team == Team.BLUE])
    lines += _team_section(ctx, "👁️ Spectators", [p for p in players if p.team == Team.SPECTATORS])
    ctx.reply("\n".join(lines))


COMMANDS = [
    CommandSpec(name="help", handler=help_command, usage="help", description="Show available commands"),
    CommandSpec(
        name="stats",
        handler=stats_command,
        usage="stats [player]",
        description="View player statistics",
    ),
    CommandSpec(
        name="ranking",
        handler=ranking_command,
        max_args=1,
        usage="ranking [stat]",
        description="Top 5 players (default: goals)",
    ),
    CommandSpec(name="list", handler=list_command, usage="list", description="View all players"),
    CommandSpec(name="afk", handler=afk_command, usage="afk", description="Move yourself to spectators"),
    CommandSpec(name="discord", handler=discord_command, usage="discord", description="Get the Discord link"),
    CommandSpec(name="ping", handler=ping_command, usage="ping", description="Check bot response"),
    CommandSpec(name="info", handler=info_command, usage="info", description="Room information"),
    CommandSpec(name="coin", handler=coin_command, usage="coin", description="Flip a coin"),
    CommandSpec(
        name="roll",
        handler=roll_command,
        max_args=1,
        usage="roll [max]",
        description=f"Roll 1-max (default {ROLL_DEFAULT}, up to {ROLL_MAX})",
    ),
]
