"""Role labels shown next to player names."""

from typing import TYPE_CHECKING

from matchroom.models.session import PlayerSession

if TYPE_CHECKING:
    from matchroom.services.authority import AuthorityStore
    from matchroom.services.club_registry import ClubRegistry


def role_label(
    player: PlayerSession,
    authority: "AuthorityStore",
    clubs: "ClubRegistry",
) -> str:
    """Describe a player's highest role.

    Captains get their club appended to the owner/admin/captain label; plain
    club members show only their club.
    """
    club = clubs.find_club_of(player.name)

    if club is not None and club.is_captain(player.name):
        if authority.is_owner(player):
            return f"👑 OWNER [{club.name}]"
        if authority.is_admin(player):
            return f"🛡️ ADMIN [{club.name}]"
        return f"👨‍✈️ CAPTAIN [{club.name}]"

    if authority.is_owner(player):
        return "👑 OWNER"
    if authority.is_admin(player):
        return "🛡️ ADMIN"
    if club is not None:
        return f"⚽ [{club.name}]"
    return "👤 PLAYER"
