"""Tests for command parsing, permission/arity checks and error recovery."""

import pytest

from matchroom.models.authority import Permission
from matchroom.models.session import Team
from matchroom.services.commands import CommandRegistry, CommandSpec, build_registry
from matchroom.services.commands.dispatcher import CommandDispatcher
from matchroom.utils import colors


@pytest.fixture
def player(room):
    return room.add_player(2, "Pleb")


class TestParse:
    def test_plain_chat_is_not_a_command(self, dispatcher):
        assert dispatcher.parse("hello !there") is None

    def test_name_is_lowercased_and_args_split(self, dispatcher):
        assert dispatcher.parse("!KICK  Bob  being rude") == ("kick", ["Bob", "being", "rude"])

    def test_bare_prefix(self, dispatcher):
        assert dispatcher.parse("!") == ("", [])


class TestDispatch:
    def test_non_command_returns_false(self, dispatcher, room, player):
        assert dispatcher.dispatch(player, "gg") is False
        assert room.announcements == []

    def test_unknown_command(self, dispatcher, room, player):
        assert dispatcher.dispatch(player, "!dance") is True

        assert room.messages_for(player.id) == [
            "❌ Unknown command: !dance. Type !help for available commands."
        ]
        assert room.announcements[-1].color == colors.RED

    def test_command_names_are_case_insensitive(self, dispatcher, room, player):
        dispatcher.dispatch(player, "!PING")

        assert room.messages_for(player.id)[0].startswith("🏓 Pong!")

    def test_permission_denied_changes_nothing(self, dispatcher, room, player):
        target = room.add_player(3, "Target")

        dispatcher.dispatch(player, "!red Target")

        assert target.team == Team.SPECTATORS
        assert room.messages_for(player.id) == ["❌ Admin only!"]

    def test_captain_denied_message(self, dispatcher, room, player):
        dispatcher.dispatch(player, "!sign Someone")

        assert room.messages_for(player.id) == ["❌ Only club captains can sign players!"]

    def test_missing_arguments_show_usage(self, dispatcher, room, owner):
        dispatcher.dispatch(owner, "!newclub Lions")

        assert room.messages_for(owner.id) == ["❌ Usage: !newclub <club_name> <captain_name>"]

    def test_too_many_arguments_show_usage(self, dispatcher, room, player):
        dispatcher.dispatch(player, "!roll 1 2")

        assert room.messages_for(player.id) == ["❌ Usage: !roll [max]"]

    def test_domain_error_becomes_red_reply(self, dispatcher, room, owner):
        dispatcher.dispatch(owner, "!red Ghost")

        assert room.messages_for(owner.id) == ['❌ Player "Ghost" not found.']
        assert room.announcements[-1].color == colors.RED

    def test_faulty_handler_gets_generic_notice(self, state, room, notifier, settings, engine, player):
        def explode(ctx, args):
            raise RuntimeError("boom")

        registry = CommandRegistry([CommandSpec(name="boom", handler=explode)])
        dispatcher = CommandDispatcher(registry, state, room, notifier, settings, engine, schedule=lambda d, e: None)
        state.stats.get("Pleb")
        players_before = set(state.stats.players)
        clubs_before = dict(state.clubs.clubs)
        admins_before = set(state.authority.admins)

        assert dispatcher.dispatch(player, "!boom") is True
        assert room.messages_for(player.id) == ["❌ Error executing command. Please try again."]

        assert len(registry) == 1
        assert registry.get("boom") is not None
        assert set(state.stats.players) == players_before
        assert state.clubs.clubs == clubs_before
        assert state.authority.admins == admins_before
        assert state.authority.owner is None

        assert dispatcher.dispatch(player, "!boom") is True
        assert len(room.messages_for(player.id)) == 2

    def test_custom_prefix(self, state, room, notifier, settings, engine, player):
        custom = settings.model_copy(update={"command_prefix": "/"})
        dispatcher = CommandDispatcher(build_registry(), state, room, notifier, custom, engine, schedule=lambda d, e: None)

        assert dispatcher.dispatch(player, "!ping") is False
        assert dispatcher.dispatch(player, "/ping") is True


class TestRegistry:
    def test_duplicate_registration_rejected(self):
        spec = CommandSpec(name="x", handler=lambda ctx, args: None)

        with pytest.raises(ValueError):
            CommandRegistry([spec, spec])

    def test_lookup_is_case_insensitive(self):
        registry = build_registry()

        assert registry.get("HeLp") is registry.get("help")
        assert "KICK" in registry

    def test_builtin_permission_tiers(self):
        registry = build_registry()

        assert registry.get("owner").permission == Permission.PLAYER
        assert registry.get("sign").permission == Permission.CAPTAIN
        assert registry.get("kick").permission == Permission.ADMIN
        assert registry.get("newclub").permission == Permission.OWNER

    @pytest.mark.parametrize(
        "spec,count,expected",
        [
            (CommandSpec(name="a", handler=print, min_args=1), 0, False),
            (CommandSpec(name="a", handler=print, min_args=1), 5, True),
            (CommandSpec(name="a", handler=print, max_args=1), 2, False),
            (CommandSpec(name="a", handler=print, min_args=2, max_args=2), 2, True),
        ],
    )
    def test_accepts(self, spec, count, expected):
        assert spec.accepts(count) is expected
