"""Tests for owner/admin authority tracking and restoration."""

import pytest

from matchroom.errors import PermissionDenied, PlayerNotFound
from matchroom.models.authority import RestoredRole
from matchroom.models.session import PlayerSession
from matchroom.services.authority import AuthorityStore


@pytest.fixture
def store():
    return AuthorityStore(owner_password="secret")


def make_player(player_id: int, name: str, fingerprint: str | None = None) -> PlayerSession:
    return PlayerSession(id=player_id, name=name, fingerprint=fingerprint)


class TestClaimOwner:
    def test_correct_password_sets_owner(self, store):
        player = make_player(1, "Boss", "conn-1")

        assert store.claim_owner(player, "secret") is True
        assert store.is_owner(player)
        assert store.is_admin(player)
        assert store.owner_name == "Boss"
        assert store.owner_fingerprint == "conn-1"

    def test_wrong_password_changes_nothing(self, store):
        player = make_player(1, "Boss", "conn-1")

        assert store.claim_owner(player, "nope") is False
        assert store.owner is None
        assert store.owner_name is None
        assert not store.is_owner(player)

    def test_at_most_one_owner(self, store):
        first = make_player(1, "First")
        second = make_player(2, "Second")

        store.claim_owner(first, "secret")
        store.claim_owner(second, "secret")

        owners = [p for p in (first, second) if store.is_owner(p)]
        assert owners == [second]


class TestAdminManagement:
    def test_owner_grants_admin_to_connected_player(self, store):
        boss = make_player(1, "Boss")
        target = make_player(2, "Helper", "conn-2")
        store.claim_owner(boss, "secret")

        granted = store.grant_admin(boss, "Helper", [boss, target])

        assert granted is target
        assert store.is_admin(target)
        assert store.saved_admins == {"Helper": "conn-2"}

    def test_non_owner_cannot_grant(self, store):
        actor = make_player(1, "Someone")
        target = make_player(2, "Helper")

        with pytest.raises(PermissionDenied):
            store.grant_admin(actor, "Helper", [actor, target])
        assert not store.is_admin(target)

    def test_grant_unknown_player(self, store):
        boss = make_player(1, "Boss")
        store.claim_owner(boss, "secret")

        with pytest.raises(PlayerNotFound):
            store.grant_admin(boss, "Ghost", [boss])

    def test_revoke_drops_active_and_saved(self, store):
        boss = make_player(1, "Boss")
        target = make_player(2, "Helper")
        store.claim_owner(boss, "secret")
        store.grant_admin(boss, "Helper", [boss, target])

        store.revoke_admin(boss, "Helper", [boss, target])

        assert not store.is_admin(target)
        assert "Helper" not in store.saved_admins


class TestRestoration:
    def test_owner_restored_by_fingerprint(self, store):
        boss = make_player(1, "Boss", "conn-1")
        store.claim_owner(boss, "secret")
        store.forget_session(boss)
        assert store.owner is None

        returning = make_player(7, "Renamed", "conn-1")

        assert store.try_restore(returning) == RestoredRole.OWNER
        assert store.is_owner(returning)
        assert store.owner_name == "Renamed"

    def test_owner_restored_by_name(self, store):
        boss = make_player(1, "Boss", "conn-1")
        store.claim_owner(boss, "secret")
        store.forget_session(boss)

        assert store.try_restore(make_player(8, "Boss", "conn-other")) == RestoredRole.OWNER

    def test_admin_restored_with_same_fingerprint(self, store):
        boss = make_player(1, "Boss", "conn-1")
        helper = make_player(2, "Helper", "conn-2")
        store.claim_owner(boss, "secret")
        store.grant_admin(boss, "Helper", [boss, helper])
        store.forget_session(helper)
        assert not store.is_admin(helper)

        returning = make_player(9, "Helper", "conn-2")

        assert store.try_restore(returning) == RestoredRole.ADMIN
        assert store.is_admin(returning)

    def test_admin_name_with_other_fingerprint_not_restored(self, store):
        boss = make_player(1, "Boss", "conn-1")
        helper = make_player(2, "Helper", "conn-2")
        store.claim_owner(boss, "secret")
        store.grant_admin(boss, "Helper", [boss, helper])
        store.forget_session(helper)

        impostor = make_player(9, "Helper", "conn-evil")

        assert store.try_restore(impostor) is None
        assert not store.is_admin(impostor)

    def test_name_only_admin_entry_matches_any_fingerprint(self, store):
        store.saved_admins["Helper"] = None

        assert store.try_restore(make_player(3, "Helper", "anything")) == RestoredRole.ADMIN

    def test_owner_takes_priority_over_admin(self, store):
        boss = make_player(1, "Boss", "conn-1")
        store.claim_owner(boss, "secret")
        store.saved_admins["Boss"] = "conn-1"
        store.forget_session(boss)

        returning = make_player(5, "Boss", "conn-1")

        assert store.try_restore(returning) == RestoredRole.OWNER
        assert returning.id not in store.admins

    def test_unknown_player_is_not_restored(self, store):
        assert store.try_restore(make_player(4, "Nobody", "conn-4")) is None

    def test_forget_session_keeps_saved_credentials(self, store):
        boss = make_player(1, "Boss", "conn-1")
        helper = make_player(2, "Helper", "conn-2")
        store.claim_owner(boss, "secret")
        store.grant_admin(boss, "Helper", [boss, helper])

        store.forget_session(boss)
        store.forget_session(helper)

        assert store.owner is None
        assert store.admins == set()
        assert store.owner_name == "Boss"
        assert store.saved_admins == {"Helper": "conn-2"}
