"""Owner login and admin management commands."""

from matchroom.models.authority import Permission
from matchroom.models.notification import Notification
from matchroom.services.commands.context import CommandContext
from matchroom.services.commands.registry import CommandSpec
from matchroom.utils import colors


def owner_command(ctx: CommandContext, args: list[str]) -> None:
    player = ctx.player
    if not ctx.state.authority.claim_owner(player, args[0]):
        ctx.reply("❌ Wrong owner password!", colors.RED)
        return

    ctx.room.set_player_admin(player.id, True)
    ctx.announce(f"👑 {player.name} is now the Owner! (Permanently saved)", colors.GOLD)
    ctx.notify(Notification(
        title="👑 Owner Login",
        description=f"**{player.name}** authenticated as room owner",
        color=colors.GOLD,
    ))


def admin_command(ctx: CommandContext, args: list[str]) -> None:
    target = ctx.state.authority.grant_admin(ctx.player, " ".join(args), ctx.online_players())
    ctx.room.set_player_admin(target.id, True)
    ctx.announce(f"🛡️ {target.name} is now an admin! (Permanently saved)", colors.GREEN)
    ctx.notify(Notification(
        title="🛡️ New Admin",
        description=f"**{target.name}** promoted to admin by **{ctx.player.name}**",
        color=colors.GREEN,
    ))


def unadmin_command(ctx: CommandContext, args: list[str]) -> None:
    target = ctx.state.authority.revoke_admin(ctx.player, " ".join(args), ctx.online_players())
    ctx.room.set_player_admin(target.id, False)
    ctx.announce(f"❌ {target.name} is no longer an admin!", colors.ORANGE)
    ctx.notify(Notification(
        title="🛡️ Admin Removed",
        description=f"**{target.name}** was removed as admin by **{ctx.player.name}**",
        color=colors.ORANGE,
    ))


COMMANDS = [
    CommandSpec(
        name="owner",
        handler=owner_command,
        min_args=1,
        max_args=1,
        usage="owner <password>",
        description="Log in as room owner",
    ),
    CommandSpec(
        name="admin",
        handler=admin_command,
        permission=Permission.OWNER,
        min_args=1,
        usage="admin <player>",
        description="Give admin privileges",
        denied_message="❌ Only the owner can give admin privileges!",
    ),
    CommandSpec(
        name="unadmin",
        handler=unadmin_command,
        permission=Permission.OWNER,
        min_args=1,
        usage="unadmin <player>",
        description="Remove admin privileges",
        denied_message="❌ Only the owner can remove admin privileges!",
    ),
]
