"""Club creation, signing and roster commands."""

from matchroom.errors import ClubNotFound, InvalidArguments
from matchroom.models.authority import Permission
from matchroom.models.notification import Notification, NotificationField
from matchroom.services.commands.context import CommandContext
from matchroom.services.commands.registry import CommandSpec
from matchroom.utils import colors
from matchroom.utils.formatting import join_names


def newclub_command(ctx: CommandContext, args: list[str]) -> None:
    club_name, captain_name = args[0], " ".join(args[1:])
    club = ctx.state.clubs.create_club(ctx.player, club_name, captain_name)

    ctx.announce(f'⚽ Club "{club.name}" created with {club.captain_name} as captain!')
    ctx.notify(Notification(
        title="⚽ New Club Created",
        description=f"**{club.name}** has been created with **{club.captain_name}** as captain",
        color=colors.GREEN,
    ))


def addplayer_command(ctx: CommandContext, args: list[str]) -> None:
    club_name, player_name = args[0], " ".join(args[1:])
    club = ctx.state.clubs.add_member(ctx.player, club_name, player_name)
    ctx.announce(f'⚽ {player_name} added to club "{club.name}"!')


def clubs_command(ctx: CommandContext, args: list[str]) -> None:
    clubs = ctx.state.clubs.clubs
    if not clubs:
        ctx.reply("📋 No clubs created yet!", colors.WHITE)
        return

    lines = ["📋 CLUBS LIST:"]
    for club in clubs.values():
        lines.append(f"⚽ {club.name} (Captain: {club.captain_name}) - {len(club.members)} members")
    ctx.reply("\n".join(lines))


def _club_change_fields(player_name: str, club_name: str, captain_name: str) -> list[NotificationField]:
    return [
        NotificationField("Player", player_name),
        NotificationField("Club", club_name),
        NotificationField("Captain", captain_name),
    ]


def sign_command(ctx: CommandContext, args: list[str]) -> None:
    target_name = " ".join(args)
    club = ctx.state.clubs.sign_player(ctx.player, target_name, ctx.online_names())

    ctx.announce(f"✅ {target_name} signed to club [{club.name}] by Captain {ctx.player.name}!")
    ctx.notify(Notification(
        title="✍️ Player Signed",
        description=f"**{target_name}** has been signed to **{club.name}**",
        color=colors.GREEN,
        fields=_club_change_fields(target_name, club.name, ctx.player.name),
    ))


def remove_command(ctx: CommandContext, args: list[str]) -> None:
    target_name = " ".join(args)
    club = ctx.state.clubs.remove_member(ctx.player, target_name)

    ctx.announce(
        f"🗑️ {target_name} removed from club [{club.name}] by Captain {ctx.player.name}!",
        colors.ORANGE,
    )
    ctx.notify(Notification(
        title="🗑️ Player Removed",
        description=f"**{target_name}** has been removed from **{club.name}**",
        color=colors.ORANGE,
        fields=_club_change_fields(target_name, club.name, ctx.player.name),
    ))


def roster_command(ctx: CommandContext, args: list[str]) -> None:
    if args:
        club_name = " ".join(args)
    else:
        own_club = ctx.state.clubs.find_club_of(ctx.player.name)
        if own_club is None:
            raise InvalidArguments(
                f"❌ Usage: {ctx.prefix}roster <club_name> or join a club first!"
            )
        club_name = own_club.name

    if club_name not in ctx.state.clubs.clubs:
        raise ClubNotFound()

    roster = ctx.state.clubs.roster(club_name, ctx.online_names())
    lines = [
        f"⚽ [{roster.club_name}] ROSTER:",
        f"👨‍✈️ Captain: {roster.captain_name}",
        f"👥 Players ({len(roster.members)}): {join_names(roster.members)}",
    ]
    if roster.online:
        lines.append(f"🟢 Online: {join_names(roster.online)}")
    ctx.reply("\n".join(lines))


COMMANDS = [
    CommandSpec(
        name="clubs",
        handler=clubs_command,
        usage="clubs",
        description="List all clubs",
    ),
    CommandSpec(
        name="roster",
        handler=roster_command,
        usage="roster [club]",
        description="View a club roster",
    ),
    CommandSpec(
        name="sign",
        handler=sign_command,
        permission=Permission.CAPTAIN,
        min_args=1,
        usage="sign <player>",
        description="Sign a player to your club",
        denied_message="❌ Only club captains can sign players!",
    ),
    CommandSpec(
        name="remove",
        handler=remove_command,
        permission=Permission.CAPTAIN,
        min_args=1,
        usage="remove <player>",
        description="Remove a player from your club",
        denied_message="❌ Only club captains can remove players!",
    ),
    CommandSpec(
        name="newclub",
        handler=newclub_command,
        permission=Permission.OWNER,
        min_args=2,
        usage="newclub <club_name> <captain_name>",
        description="Create a new club",
        denied_message="❌ Only the owner can create clubs!",
    ),
    CommandSpec(
        name="addplayer",
        handler=addplayer_command,
        permission=Permission.OWNER,
        min_args=2,
        usage="addplayer <club_name> <player_name>",
        description="Add a player to a club",
        denied_message="❌ Only the owner can add players to clubs!",
    ),
]
