"""Owner/admin authority tracking with reconnection restoration."""

import logging
from collections.abc import Iterable

from matchroom.errors import PermissionDenied, PlayerNotFound
from matchroom.models.authority import RestoredRole
from matchroom.models.session import PlayerSession

logger = logging.getLogger(__name__)


class AuthorityStore:
    """Tracks the room owner, active admins and saved credentials.

    Active roles are keyed by session id and vanish on disconnect; the saved
    owner name/fingerprint and the `saved_admins` mapping survive so a
    returning player can be restored on join.
    """

    def __init__(self, owner_password: str):
        self._owner_password = owner_password
        self.owner: PlayerSession | None = None
        self.owner_name: str | None = None
        self.owner_fingerprint: str | None = None
        self.admins: set[int] = set()
        # display name -> last known fingerprint (None matches by name only)
        self.saved_admins: dict[str, str | None] = {}

    def is_owner(self, player: PlayerSession) -> bool:
        return self.owner is not None and self.owner.id == player.id

    def is_admin(self, player: PlayerSession) -> bool:
        return self.is_owner(player) or player.id in self.admins

    def claim_owner(self, player: PlayerSession, supplied_password: str) -> bool:
        """Make `player` the owner if the password matches.

        Replaces any previous owner. Returns False on a wrong password
        without touching state.
        """
        if supplied_password != self._owner_password:
            logger.info(f"Rejected owner claim from {player.name} (id={player.id})")
            return False

        self.owner = player
        self.owner_name = player.name
        self.owner_fingerprint = player.fingerprint
        logger.info(f"{player.name} (id={player.id}) claimed owner")
        return True

    def grant_admin(
        self,
        actor: PlayerSession,
        target_name: str,
        connected: Iterable[PlayerSession],
    ) -> PlayerSession:
        """Give admin rights to a connected player (owner only)."""
        if not self.is_owner(actor):
            raise PermissionDenied("❌ Only the owner can give admin privileges!")

        target = _find_connected(target_name, connected)
        self.admins.add(target.id)
        self.saved_admins[target.name] = target.fingerprint
        logger.info(f"{actor.name} granted admin to {target.name} (id={target.id})")
        return target

    def revoke_admin(
        self,
        actor: PlayerSession,
        target_name: str,
        connected: Iterable[PlayerSession],
    ) -> PlayerSession:
        """Remove admin rights from a connected player (owner only)."""
        if not self.is_owner(actor):
            raise PermissionDenied("❌ Only the owner can remove admin privileges!")

        target = _find_connected(target_name, connected)
        self.admins.discard(target.id)
        self.saved_admins.pop(target.name, None)
        logger.info(f"{actor.name} revoked admin from {target.name} (id={target.id})")
        return target

    def is_saved_owner(self, player: PlayerSession) -> bool:
        fingerprint_match = (
            self.owner_fingerprint is not None
            and player.fingerprint == self.owner_fingerprint
        )
        name_match = self.owner_name is not None and player.name == self.owner_name
        return fingerprint_match or name_match

    def is_saved_admin(self, player: PlayerSession) -> bool:
        if player.name not in self.saved_admins:
            return False
        saved_fingerprint = self.saved_admins[player.name]
        return saved_fingerprint is None or saved_fingerprint == player.fingerprint

    def try_restore(self, player: PlayerSession) -> RestoredRole | None:
        """Re-establish a saved role for a joining player.

        Owner takes priority over admin; at most one role is restored.
        """
        if self.is_saved_owner(player):
            self.owner = player
            self.owner_name = player.name
            self.owner_fingerprint = player.fingerprint
            logger.info(f"Restored owner {player.name} (id={player.id})")
            return RestoredRole.OWNER

        if self.is_saved_admin(player):
            self.admins.add(player.id)
            self.saved_admins[player.name] = player.fingerprint
            logger.info(f"Restored admin {player.name} (id={player.id})")
            return RestoredRole.ADMIN

        return None

    def forget_session(self, player: PlayerSession) -> None:
        """Drop active roles of a disconnecting session; saved ones remain."""
        self.admins.discard(player.id)
        if self.is_owner(player):
            self.owner = None


def _find_connected(name: str, connected: Iterable[PlayerSession]) -> PlayerSession:
    for player in connected:
        if player.name == name:
            return player
    raise PlayerNotFound()
