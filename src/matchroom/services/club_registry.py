"""Club registry: clubs, captains and rosters."""

import logging
from collections.abc import Collection

from matchroom.errors import (
    AlreadyMember,
    CannotRemoveCaptain,
    ClubAlreadyExists,
    ClubNotFound,
    InvalidArguments,
    NotCaptain,
    NotInClub,
    PermissionDenied,
    PlayerAlreadyInClub,
    PlayerNotFound,
)
from matchroom.models.club import Club, Roster
from matchroom.models.session import PlayerSession
from matchroom.services.authority import AuthorityStore
from matchroom.utils.formatting import is_valid_club_name

logger = logging.getLogger(__name__)


class ClubRegistry:
    """In-memory club store keyed by club name.

    A display name belongs to at most one club, the captain is always a
    member, and clubs are never deleted.
    """

    def __init__(self, authority: AuthorityStore):
        self.authority = authority
        self.clubs: dict[str, Club] = {}

    def get(self, club_name: str) -> Club:
        club = self.clubs.get(club_name)
        if club is None:
            raise ClubNotFound()
        return club

    def find_club_of(self, player_name: str) -> Club | None:
        """Return the first club listing `player_name`, if any."""
        for club in self.clubs.values():
            if club.has_member(player_name):
                return club
        return None

    def is_captain(self, player_name: str) -> bool:
        club = self.find_club_of(player_name)
        return club is not None and club.is_captain(player_name)

    def create_club(self, actor: PlayerSession, club_name: str, captain_name: str) -> Club:
        """Create a club with `captain_name` as its only member (owner only)."""
        if not self.authority.is_owner(actor):
            raise PermissionDenied("❌ Only the owner can create clubs!")
        if not is_valid_club_name(club_name):
            raise InvalidArguments(
                "❌ Club names must be 2-20 letters, digits or spaces!"
            )
        if club_name in self.clubs:
            raise ClubAlreadyExists()
        existing = self.find_club_of(captain_name)
        if existing is not None:
            raise PlayerAlreadyInClub(
                f"❌ {captain_name} is already in club [{existing.name}]!"
            )

        club = Club(name=club_name, captain_name=captain_name, members=[captain_name])
        self.clubs[club_name] = club
        logger.info(f"Club {club_name} created by {actor.name}, captain {captain_name}")
        return club

    def add_member(self, actor: PlayerSession, club_name: str, player_name: str) -> Club:
        """Add a display name to a club (owner only)."""
        if not self.authority.is_owner(actor):
            raise PermissionDenied("❌ Only the owner can add players to clubs!")
        if club_name not in self.clubs:
            raise ClubNotFound("❌ Club doesn't exist!")

        club = self.clubs[club_name]
        if club.has_member(player_name):
            raise AlreadyMember()
        other = self.find_club_of(player_name)
        if other is not None:
            raise PlayerAlreadyInClub(
                f"❌ {player_name} is already in club [{other.name}]!"
            )

        club.members.append(player_name)
        logger.info(f"{player_name} added to {club_name} by {actor.name}")
        return club

    def _club_led_by(self, captain_name: str) -> Club:
        club = self.find_club_of(captain_name)
        if club is None or not club.is_captain(captain_name):
            raise NotCaptain()
        return club

    def sign_player(
        self,
        captain: PlayerSession,
        target_name: str,
        online_names: Collection[str],
    ) -> Club:
        """Sign a connected, club-less player to the captain's club."""
        club = self._club_led_by(captain.name)
        if target_name not in online_names:
            raise PlayerNotFound("❌ Player not found in room!")
        existing = self.find_club_of(target_name)
        if existing is not None:
            raise PlayerAlreadyInClub(
                f"❌ {target_name} is already in club [{existing.name}]!"
            )

        club.members.append(target_name)
        logger.info(f"{target_name} signed to {club.name} by captain {captain.name}")
        return club

    def remove_member(self, captain: PlayerSession, target_name: str) -> Club:
        """Remove a member from the captain's club; the captain stays."""
        club = self._club_led_by(captain.name)
        if not club.has_member(target_name):
            raise NotInClub(f"❌ {target_name} is not in your club!")
        if club.is_captain(target_name):
            raise CannotRemoveCaptain()

        club.members.remove(target_name)
        logger.info(f"{target_name} removed from {club.name} by captain {captain.name}")
        return club

    def roster(self, club_name: str, online_names: Collection[str]) -> Roster:
        club = self.get(club_name)
        return Roster(
            club_name=club.name,
            captain_name=club.captain_name,
            members=list(club.members),
            online=[name for name in club.members if name in online_names],
        )
