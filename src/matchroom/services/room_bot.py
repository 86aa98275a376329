"""Composition root wiring the room moderator together."""

import asyncio
import logging
import time
from collections.abc import Callable
from pathlib import Path

from matchroom.config import Settings
from matchroom.models.events import RoomEvent
from matchroom.models.notification import Notification, NotificationField
from matchroom.services.commands import CommandDispatcher, build_registry
from matchroom.services.event_queue import RoomEventQueue
from matchroom.services.event_router import EventRouter
from matchroom.services.match_engine import MatchAttributionEngine
from matchroom.services.match_logger import MatchLogger
from matchroom.services.notifier import Notifier, get_notifier
from matchroom.services.room_gateway import LocalRoom, RoomGateway
from matchroom.services.scheduler import BackgroundScheduler, default_jobs
from matchroom.services.session_state import SessionState
from matchroom.utils import colors

logger = logging.getLogger(__name__)


class RoomBot:
    """Owns the session state, the event pump and the background workers."""

    def __init__(
        self,
        settings: Settings,
        room: RoomGateway | None = None,
        notifier: Notifier | None = None,
        room_factory: Callable[[], RoomGateway] | None = None,
        on_room_lost: Callable[[], None] | None = None,
    ):
        self.settings = settings
        self.queue = RoomEventQueue()
        self.room_factory = room_factory or self._local_room
        self.room = self._attach(room or self.room_factory())

        self.notifier = notifier or get_notifier(
            settings.discord_webhook_url,
            cooldown_seconds=settings.webhook_cooldown_seconds,
            max_queue=settings.notification_queue_size,
            timeout=settings.webhook_timeout_seconds,
        )
        self.state = SessionState.create(settings)
        self.match_logger = MatchLogger(
            output_dir=Path(settings.match_log_dir),
            enabled=settings.match_diagnostics,
        )
        self.engine = MatchAttributionEngine(
            self.state,
            self.room,
            self.notifier,
            match_logger=self.match_logger,
            reset_touches_on_game_start=settings.reset_touches_on_game_start,
            schedule=self.queue.call_later,
        )
        self.registry = build_registry()
        self.dispatcher = CommandDispatcher(
            self.registry,
            self.state,
            self.room,
            self.notifier,
            settings,
            self.engine,
            schedule=self.queue.call_later,
        )
        self.router = EventRouter(
            self.state,
            self.room,
            self.notifier,
            self.engine,
            self.dispatcher,
            settings,
            on_room_lost=on_room_lost or self.restart_room,
        )
        self.scheduler = BackgroundScheduler(self.queue, default_jobs(settings))
        self.restarts = 0
        self._tasks: list[asyncio.Task] = []

    def _attach(self, room: RoomGateway) -> RoomGateway:
        if isinstance(room, LocalRoom) and room.event_sink is None:
            room.event_sink = self.queue.put
        return room

    def _local_room(self) -> LocalRoom:
        return LocalRoom(max_players=self.settings.max_players, event_sink=self.queue.put)

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    @property
    def uptime_seconds(self) -> float:
        return time.time() - self.state.started_at

    def submit(self, event: RoomEvent) -> None:
        """Entry point for host platform hooks."""
        self.queue.put(event)

    async def start(self) -> None:
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(self.queue.run(self.router), name="room-event-pump"),
            asyncio.create_task(self.notifier.run(), name="notification-worker"),
        ]
        self.scheduler.start()
        logger.info(f"{self.settings.room_name} is now live!")
        self.notifier.send(Notification(
            title=f"🎮 {self.settings.room_name} Room Started",
            description="Tournament room is now online and ready for players!",
            color=colors.GREEN,
            fields=[
                NotificationField("Room Name", self.settings.room_name),
                NotificationField("Max Players", str(self.room.get_max_players())),
            ],
        ))

    async def stop(self) -> None:
        self.room.send_announcement(
            "🛑 Server is restarting... Be back in a moment!", None, colors.ORANGE, "bold"
        )
        await self.scheduler.stop()
        self.queue.cancel_timers()
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks = []
        await self.notifier.close()
        logger.info("Room bot stopped")

    def restart_room(self) -> None:
        """Replace a dead room with a fresh one; saved roles, clubs and stats survive."""
        self.restarts += 1
        logger.warning(f"Recreating room (restart #{self.restarts})")
        self.state.reset_sessions()
        self._bind_room(self.room_factory())

    def _bind_room(self, room: RoomGateway) -> None:
        room = self._attach(room)
        self.room = room
        self.engine.room = room
        self.dispatcher.room = room
        self.router.room = room

    def status(self) -> dict:
        players = self.room.get_player_list()
        return {
            "room_name": self.settings.room_name,
            "players": len(players),
            "max_players": self.room.get_max_players(),
            "player_list": [
                {"id": p.id, "name": p.name, "team": int(p.team), "admin": self.state.authority.is_admin(p)}
                for p in players
            ],
            "restarts": self.restarts,
            "notifications": self.notifier.stats(),
        }
