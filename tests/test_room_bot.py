"""End-to-end tests: host events flowing through the queue into the bot."""

import anyio
import pytest

from matchroom.models.events import LivenessTick, PlayerChat
from matchroom.models.session import Team
from matchroom.services import match_engine
from matchroom.services.notifier import MockNotifier
from matchroom.services.room_bot import RoomBot
from matchroom.services.room_gateway import LocalRoom
from matchroom.services.session_state import MatchPhase

pytestmark = pytest.mark.anyio


@pytest.fixture
def bot(settings):
    return RoomBot(settings.model_copy(update={"ready_countdown_seconds": 0.01}), notifier=MockNotifier())


async def say(bot: RoomBot, player, message: str) -> None:
    bot.submit(PlayerChat(player, message))
    await bot.queue.drain(bot.router)


async def test_full_match(bot):
    room = bot.room
    boss = room.add_player(1, "Boss", fingerprint="conn-1")
    ann = room.add_player(2, "Ann")
    bob = room.add_player(3, "Bob")
    cy = room.add_player(4, "Cy")
    await bot.queue.drain(bot.router)

    await say(bot, boss, "!owner secret")
    await say(bot, boss, "!red Ann")
    await say(bot, boss, "!red Bob")
    await say(bot, boss, "!blue Cy")
    await say(bot, boss, "!start")
    assert bot.state.phase == MatchPhase.IN_PROGRESS

    room.touch_ball(ann.id)
    room.touch_ball(bob.id)
    room.score_goal(Team.RED)
    room.touch_ball(cy.id)
    room.score_goal(Team.RED)
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!stop")

    stats = bot.state.stats
    assert stats.get("Bob").goals == 1
    assert stats.get("Ann").assists == 1
    assert stats.get("Cy").own_goals == 1
    assert stats.get("Ann").wins == 1
    assert stats.get("Cy").losses == 1
    assert stats.get("Bob").mvps == 1
    assert bot.state.last_match.red_goals == 2
    assert bot.state.phase == MatchPhase.IDLE
    assert bot.queue.failed == 0
    assert "📥 Player Joined" in bot.notifier.titles()
    assert "🛑 Game Stopped" in bot.notifier.titles()



async def test_repeated_stop_counts_match_once(bot):
    room = bot.room
    boss = room.add_player(1, "Boss", fingerprint="conn-1")
    ann = room.add_player(2, "Ann", team=Team.RED)
    room.add_player(3, "Cy", team=Team.BLUE)
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!owner secret")

    await say(bot, boss, "!start")
    room.touch_ball(ann.id)
    room.score_goal(Team.RED)
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!stop")
    await say(bot, boss, "!stop")

    ann_stats = bot.state.stats.get("Ann")
    assert (ann_stats.wins, ann_stats.games_played) == (1, 1)
    assert bot.state.stats.get("Cy").losses == 1
    assert bot.notifier.titles().count("🛑 Game Stopped") == 1


async def test_second_start_keeps_match_progress(bot):
    room = bot.room
    boss = room.add_player(1, "Boss", fingerprint="conn-1")
    ann = room.add_player(2, "Ann", team=Team.RED)
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!owner secret")

    await say(bot, boss, "!start")
    room.touch_ball(ann.id)
    room.score_goal(Team.RED)
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!start")

    assert bot.state.match.goal_scorers == ["Ann"]
    assert bot.state.match.red_goals == 1
    assert room.get_scores().red == 1


async def test_goal_follow_up_announcement(bot, monkeypatch):
    monkeypatch.setattr(match_engine, "CELEBRATION_DELAY_SECONDS", 0.01)
    room = bot.room
    ann = room.add_player(2, "Ann", team=Team.RED)
    await bot.queue.drain(bot.router)

    room.touch_ball(ann.id)
    room.score_goal(Team.RED)
    await bot.queue.drain(bot.router)
    await anyio.sleep(0.05)
    await bot.queue.drain(bot.router)

    assert room.messages_for(None)[-1] == "🔥 Ann is on fire! 🔥"

async def test_ready_countdown_starts_game(bot):
    room = bot.room
    ann = room.add_player(2, "Ann", team=Team.RED)
    bob = room.add_player(3, "Bob", team=Team.BLUE)
    await bot.queue.drain(bot.router)

    await say(bot, ann, "!ready")
    await say(bot, bob, "!ready")
    assert bot.state.ready_countdown_pending

    await anyio.sleep(0.05)
    await bot.queue.drain(bot.router)

    assert room.game_running
    assert bot.state.phase == MatchPhase.IN_PROGRESS
    assert not bot.state.ready_countdown_pending
    assert bot.state.ready_players == set()


async def test_liveness_failure_recreates_room(bot):
    old_room = bot.room
    boss = old_room.add_player(1, "Boss", fingerprint="conn-1")
    await bot.queue.drain(bot.router)
    await say(bot, boss, "!owner secret")
    await say(bot, boss, "!newclub Lions Leo")

    old_room.alive = False
    bot.submit(LivenessTick())
    await bot.queue.drain(bot.router)

    assert bot.restarts == 1
    assert bot.room is not old_room
    assert isinstance(bot.room, LocalRoom)
    assert bot.engine.room is bot.room
    assert bot.router.room is bot.room
    assert bot.state.authority.owner is None
    assert "Lions" in bot.state.clubs.clubs
    assert "⚠️ Room Offline" in bot.notifier.titles()

    returning = bot.room.add_player(7, "Boss", fingerprint="conn-1")
    await bot.queue.drain(bot.router)
    assert bot.state.authority.is_owner(returning)



async def test_restarted_room_from_factory_feeds_queue(settings):
    bot = RoomBot(settings, notifier=MockNotifier(), room_factory=LocalRoom)
    bot.restart_room()

    player = bot.room.add_player(5, "Ann")
    await bot.queue.drain(bot.router)

    assert bot.room.messages_for(player.id)[0].startswith("🎮 Welcome")
    assert "Ann" in bot.state.stats.players

async def test_start_and_stop(bot):
    await bot.start()
    assert bot.running
    assert bot.scheduler.running

    await bot.stop()

    assert not bot.running
    assert not bot.scheduler.running
    assert bot.notifier.titles()[0].endswith("Room Started")
    assert bot.room.messages_for(None)[-1] == "🛑 Server is restarting... Be back in a moment!"


def test_status_reports_players(bot):
    bot.room.add_player(1, "Ann", team=Team.BLUE)

    status = bot.status()

    assert status["players"] == 1
    assert status["player_list"] == [{"id": 1, "name": "Ann", "team": 2, "admin": False}]
    assert status["notifications"]["sent"] == 0
