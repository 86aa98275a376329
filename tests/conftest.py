"""Shared fixtures for room moderator tests."""

import pytest

from matchroom.config import Settings
from matchroom.services.commands import CommandDispatcher, build_registry
from matchroom.services.match_engine import MatchAttributionEngine
from matchroom.services.notifier import MockNotifier
from matchroom.services.room_gateway import LocalRoom
from matchroom.services.session_state import SessionState


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        owner_password="secret",
        discord_server_invite="https://discord.gg/test",
        discord_webhook_url="",
    )


@pytest.fixture
def room():
    return LocalRoom()


@pytest.fixture
def notifier():
    return MockNotifier()


@pytest.fixture
def state(settings):
    return SessionState.create(settings)


@pytest.fixture
def engine(state, room, notifier):
    return MatchAttributionEngine(state, room, notifier)


@pytest.fixture
def scheduled():
    """Delayed events requested by commands, as (delay, event) pairs."""
    return []


@pytest.fixture
def dispatcher(state, room, notifier, settings, engine, scheduled):
    return CommandDispatcher(
        build_registry(),
        state,
        room,
        notifier,
        settings,
        engine,
        schedule=lambda delay, event: scheduled.append((delay, event)),
    )


@pytest.fixture
def owner(state, room):
    """A connected player who has claimed ownership."""
    player = room.add_player(1, "Boss", fingerprint="conn-boss")
    assert state.authority.claim_owner(player, "secret")
    return player
