"""Routes inbound room events to the component that owns them."""

import logging
import time
from collections.abc import Callable

from matchroom.config import Settings
from matchroom.models.authority import RestoredRole
from matchroom.models.events import (
    AdminChanged,
    AutoJoinTick,
    BallTouched,
    GamePaused,
    GameStarted,
    GameStopped,
    GameUnpaused,
    GoalCelebration,
    LivenessTick,
    PlayerChat,
    PlayerJoined,
    PlayerLeft,
    PlayerTeamChanged,
    ReadyCountdownElapsed,
    ReminderTick,
    RoomEvent,
    TeamGoal,
)
from matchroom.models.notification import Notification, NotificationField
from matchroom.models.session import Team
from matchroom.services.commands import CommandDispatcher
from matchroom.services.match_engine import MatchAttributionEngine
from matchroom.services.notifier import Notifier
from matchroom.services.room_gateway import RoomGateway
from matchroom.services.session_state import MatchPhase, SessionState
from matchroom.utils import colors

logger = logging.getLogger(__name__)

# Reminder ticks arriving this early still count as due
REMINDER_SLACK_SECONDS = 1.0

TEAM_COLORS = {
    Team.SPECTATORS: colors.GREY,
    Team.RED: colors.RED,
    Team.BLUE: colors.BLUE,
}


def _actor_name(player) -> str:
    return player.name if player is not None else "System"


class EventRouter:
    """Single entry point for platform and timer events.

    Each event runs to completion before the next one is dispatched, so
    handlers never need to lock the shared state.
    """

    def __init__(
        self,
        state: SessionState,
        room: RoomGateway,
        notifier: Notifier,
        engine: MatchAttributionEngine,
        dispatcher: CommandDispatcher,
        settings: Settings,
        on_room_lost: Callable[[], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state = state
        self.room = room
        self.notifier = notifier
        self.engine = engine
        self.dispatcher = dispatcher
        self.settings = settings
        self.on_room_lost = on_room_lost
        self.clock = clock
        self._handlers: dict[type, Callable] = {
            PlayerJoined: self._on_player_joined,
            PlayerLeft: self._on_player_left,
            PlayerChat: self._on_player_chat,
            PlayerTeamChanged: self._on_team_changed,
            TeamGoal: self._on_team_goal,
            GameStarted: self._on_game_started,
            GameStopped: self._on_game_stopped,
            GamePaused: self._on_game_paused,
            GameUnpaused: self._on_game_unpaused,
            BallTouched: self._on_ball_touched,
            AdminChanged: self._on_admin_changed,
            ReminderTick: self._on_reminder_tick,
            AutoJoinTick: self._on_auto_join_tick,
            LivenessTick: self._on_liveness_tick,
            ReadyCountdownElapsed: self._on_ready_countdown,
            GoalCelebration: self._on_goal_celebration,
        }

    def dispatch(self, event: RoomEvent) -> bool:
        """Handle one event. Returns True when a chat message was consumed as a command."""
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unhandled room event: {type(event).__name__}")
        return bool(handler(event))

    # Players

    def _on_player_joined(self, event: PlayerJoined) -> None:
        player = event.player
        logger.info(f"{player.name} joined (id={player.id}, conn={player.fingerprint})")

        restored = self.state.authority.try_restore(player)
        if restored == RestoredRole.OWNER:
            self.room.set_player_admin(player.id, True)
            self.room.send_announcement(
                f"👑 Welcome back, Owner {player.name}!", None, colors.GOLD, "bold"
            )
            self.notifier.send(Notification(
                title="👑 Owner Auto-Login",
                description=f"**{player.name}** automatically restored as owner",
                color=colors.GOLD,
            ))
        elif restored == RestoredRole.ADMIN:
            self.room.set_player_admin(player.id, True)
            self.room.send_announcement(
                f"🛡️ Welcome back, Admin {player.name}!", None, colors.GREEN, "bold"
            )
            self.notifier.send(Notification(
                title="🛡️ Admin Auto-Login",
                description=f"**{player.name}** automatically restored as admin",
                color=colors.GREEN,
            ))
        else:
            prefix = self.settings.command_prefix
            self.room.send_announcement(
                f"🎮 Welcome {self.state.format_player_name(player)}!\n"
                f"📋 Type {prefix}help for commands | "
                f"📢 Join Discord: {self.settings.discord_server_invite}\n"
                f"⚠️ Wait for admin to assign you to a team",
                player.id,
                colors.GREEN,
                "bold",
            )

        self.notifier.send(Notification(
            title="📥 Player Joined",
            description=f"**{player.name}** joined the room",
            color=colors.GREEN,
            fields=[
                NotificationField("Player ID", str(player.id)),
                NotificationField("Role", self.state.role_label(player)),
            ],
        ))
        self.state.stats.get(player.name)

    def _on_player_left(self, event: PlayerLeft) -> None:
        player = event.player
        logger.info(f"{player.name} left (id={player.id})")

        # Label before the active roles are dropped
        display_name = self.state.format_player_name(player)
        self.state.forget_session(player)

        self.notifier.send(Notification(
            title="📤 Player Left",
            description=f"**{player.name}** left the room",
            color=colors.ORANGE,
        ))
        self.room.send_announcement(f"👋 {display_name} left the room", None, colors.GREY)

    def _on_player_chat(self, event: PlayerChat) -> bool:
        player = event.player
        logger.debug(f"{player.name}: {event.message}")

        if self.dispatcher.dispatch(player, event.message):
            return True

        if self.settings.log_chat_to_discord:
            self.notifier.send(Notification(
                title="💬 Chat Message",
                description=f"**{player.name}**: {event.message}",
                color=colors.DISCORD_BLURPLE,
            ))
        return False

    def _on_team_changed(self, event: PlayerTeamChanged) -> None:
        player, by_player = event.player, event.by_player
        if by_player is None or not self.state.authority.is_admin(by_player):
            return

        self.state.mark_manually_moved(player.id)
        team = Team(player.team)
        self.room.send_announcement(
            f"🔄 {player.name} moved to {team.label} by {by_player.name}",
            None,
            TEAM_COLORS[team],
        )
        logger.info(f"{player.name} moved to {team.name.lower()} by {by_player.name}")

    def _on_admin_changed(self, event: AdminChanged) -> None:
        player = event.player
        if player.admin:
            logger.info(f"{player.name} given admin by {_actor_name(event.by_player)}")
        else:
            logger.info(f"{player.name} admin removed by {_actor_name(event.by_player)}")

    # Match

    def _on_ball_touched(self, event: BallTouched) -> None:
        self.state.touches.record_touch(event.player)

    def _on_team_goal(self, event: TeamGoal) -> None:
        self.engine.on_goal(event.team)

    def _on_goal_celebration(self, event: GoalCelebration) -> None:
        self.room.send_announcement(f"🔥 {event.scorer_name} is on fire! 🔥", None, colors.ORANGE, "bold", 1)

    def _on_game_started(self, event: GameStarted) -> None:
        self.engine.on_game_start(event.by_player)

    def _on_game_stopped(self, event: GameStopped) -> None:
        self.engine.on_game_stop(event.by_player)

    def _on_game_paused(self, event: GamePaused) -> None:
        name = _actor_name(event.by_player)
        logger.info(f"Game paused by {name}")
        self.room.send_announcement(f"⏸️ Game paused by {name}", None, colors.AMBER, "bold")

    def _on_game_unpaused(self, event: GameUnpaused) -> None:
        name = _actor_name(event.by_player)
        logger.info(f"Game unpaused by {name}")
        self.room.send_announcement(f"▶️ Game resumed by {name}", None, colors.GREEN, "bold")

    def _on_ready_countdown(self, event: ReadyCountdownElapsed) -> None:
        self.state.ready_countdown_pending = False
        self.state.ready_players.clear()
        if self.state.phase == MatchPhase.IN_PROGRESS:
            logger.info("Ready countdown elapsed but a match is already in progress")
            return
        logger.info("Ready countdown elapsed, starting game")
        self.room.start_game()

    # Timers

    def _on_reminder_tick(self, event: ReminderTick) -> None:
        now = self.clock()
        last = self.state.last_reminder_at
        due_after = self.settings.reminder_interval_seconds - REMINDER_SLACK_SECONDS
        if last is not None and now - last < due_after:
            return

        self.room.send_announcement(
            f"📢 Join our Discord server: {self.settings.discord_server_invite}",
            None,
            colors.DISCORD_BLURPLE,
            "bold",
        )
        self.state.last_reminder_at = now

    def _on_auto_join_tick(self, event: AutoJoinTick) -> None:
        """Send players who joined a team on their own back to spectators."""
        for player in self.room.get_player_list():
            if not player.on_team:
                continue
            if self.state.authority.is_admin(player) or player.id in self.state.manually_moved:
                continue

            self.room.set_player_team(player.id, Team.SPECTATORS)
            self.room.send_announcement(
                f"⚠️ {player.name} moved to spectators. Wait for admin to assign you to a team.",
                player.id,
                colors.ORANGE,
                "normal",
            )
            logger.info(f"Auto-join corrected for {player.name} (id={player.id})")

    def _on_liveness_tick(self, event: LivenessTick) -> None:
        if self.room.is_alive():
            return

        logger.warning("Room not active, attempting restart...")
        self.notifier.send(Notification(
            title="⚠️ Room Offline",
            description="The room stopped responding; restarting",
            color=colors.ORANGE,
        ))
        if self.on_room_lost is not None:
            self.on_room_lost()
