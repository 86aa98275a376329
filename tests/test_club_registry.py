"""Tests for the club registry."""

import pytest

from matchroom.errors import (
    AlreadyMember,
    ClubAlreadyExists,
    ClubNotFound,
    InvalidArguments,
    InvariantViolationAttempt,
    NotCaptain,
    NotInClub,
    PermissionDenied,
    PlayerAlreadyInClub,
    PlayerNotFound,
)
from matchroom.models.session import PlayerSession
from matchroom.services.authority import AuthorityStore
from matchroom.services.club_registry import ClubRegistry


@pytest.fixture
def authority():
    return AuthorityStore(owner_password="secret")


@pytest.fixture
def boss(authority):
    player = PlayerSession(id=1, name="Boss")
    authority.claim_owner(player, "secret")
    return player


@pytest.fixture
def registry(authority):
    return ClubRegistry(authority)


@pytest.fixture
def lions(registry, boss):
    """Club 'Lions' captained by Leo."""
    return registry.create_club(boss, "Lions", "Leo")


@pytest.fixture
def leo():
    return PlayerSession(id=2, name="Leo")


def assert_exclusive(registry: ClubRegistry):
    seen: dict[str, str] = {}
    for club in registry.clubs.values():
        assert len(club.members) == len(set(club.members))
        for name in club.members:
            assert name not in seen, f"{name} in both {seen.get(name)} and {club.name}"
            seen[name] = club.name


class TestCreateClub:
    def test_captain_is_sole_member(self, lions):
        assert lions.captain_name == "Leo"
        assert lions.members == ["Leo"]

    def test_owner_only(self, registry, leo):
        with pytest.raises(PermissionDenied):
            registry.create_club(leo, "Lions", "Leo")
        assert registry.clubs == {}

    def test_duplicate_name(self, registry, boss, lions):
        with pytest.raises(ClubAlreadyExists):
            registry.create_club(boss, "Lions", "Someone")

    @pytest.mark.parametrize("name", ["X", "A" * 21, "Bad-Name!", ""])
    def test_invalid_name(self, registry, boss, name):
        with pytest.raises(InvalidArguments):
            registry.create_club(boss, name, "Cap")

    def test_captain_already_in_club(self, registry, boss, lions):
        with pytest.raises(PlayerAlreadyInClub):
            registry.create_club(boss, "Tigers", "Leo")
        assert "Tigers" not in registry.clubs


class TestAddMember:
    def test_appends_in_order(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")
        registry.add_member(boss, "Lions", "Bob")

        assert lions.members == ["Leo", "Ann", "Bob"]

    def test_unknown_club(self, registry, boss):
        with pytest.raises(ClubNotFound):
            registry.add_member(boss, "Nowhere", "Ann")

    def test_already_member(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")

        with pytest.raises(AlreadyMember):
            registry.add_member(boss, "Lions", "Ann")

    def test_member_of_other_club_rejected(self, registry, boss, lions):
        registry.create_club(boss, "Tigers", "Tim")
        registry.add_member(boss, "Tigers", "Ann")

        with pytest.raises(PlayerAlreadyInClub):
            registry.add_member(boss, "Lions", "Ann")
        assert_exclusive(registry)

    def test_owner_only(self, registry, lions, leo):
        with pytest.raises(PermissionDenied):
            registry.add_member(leo, "Lions", "Ann")


class TestSignPlayer:
    def test_captain_signs_online_player(self, registry, lions, leo):
        club = registry.sign_player(leo, "Ann", {"Leo", "Ann"})

        assert club is lions
        assert lions.members == ["Leo", "Ann"]

    def test_non_captain_rejected(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")
        ann = PlayerSession(id=3, name="Ann")

        with pytest.raises(NotCaptain):
            registry.sign_player(ann, "Bob", {"Ann", "Bob"})

    def test_player_without_club_rejected(self, registry, lions):
        stranger = PlayerSession(id=4, name="Stranger")

        with pytest.raises(NotCaptain):
            registry.sign_player(stranger, "Bob", {"Bob"})

    def test_target_must_be_online(self, registry, lions, leo):
        with pytest.raises(PlayerNotFound):
            registry.sign_player(leo, "Ghost", {"Leo"})

    def test_target_in_same_club(self, registry, boss, lions, leo):
        registry.add_member(boss, "Lions", "Ann")

        with pytest.raises(PlayerAlreadyInClub):
            registry.sign_player(leo, "Ann", {"Leo", "Ann"})

    def test_target_in_other_club(self, registry, boss, lions, leo):
        registry.create_club(boss, "Tigers", "Tim")

        with pytest.raises(PlayerAlreadyInClub):
            registry.sign_player(leo, "Tim", {"Leo", "Tim"})
        assert_exclusive(registry)


class TestRemoveMember:
    def test_removes_member(self, registry, boss, lions, leo):
        registry.add_member(boss, "Lions", "Ann")

        registry.remove_member(leo, "Ann")

        assert lions.members == ["Leo"]

    def test_not_in_club(self, registry, lions, leo):
        with pytest.raises(NotInClub):
            registry.remove_member(leo, "Ann")

    def test_captain_cannot_be_removed(self, registry, boss, lions, leo):
        registry.add_member(boss, "Lions", "Ann")

        with pytest.raises(InvariantViolationAttempt):
            registry.remove_member(leo, "Leo")
        assert lions.members == ["Leo", "Ann"]
        assert lions.is_captain("Leo")


class TestLookups:
    def test_find_club_of(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")

        assert registry.find_club_of("Ann") is lions
        assert registry.find_club_of("Nobody") is None

    def test_is_captain(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")

        assert registry.is_captain("Leo")
        assert not registry.is_captain("Ann")

    def test_roster_marks_online_members(self, registry, boss, lions):
        registry.add_member(boss, "Lions", "Ann")
        registry.add_member(boss, "Lions", "Bob")

        roster = registry.roster("Lions", {"Bob", "Leo", "Outsider"})

        assert roster.captain_name == "Leo"
        assert roster.members == ["Leo", "Ann", "Bob"]
        assert roster.online == ["Leo", "Bob"]

    def test_roster_unknown_club(self, registry):
        with pytest.raises(ClubNotFound):
            registry.roster("Nowhere", set())
