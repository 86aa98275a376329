"""Periodic background timers.

Timers never touch room state themselves: each one only enqueues a tick
event, which the event pump handles like any other event.
"""

import asyncio
import logging
from dataclasses import dataclass

from matchroom.config import Settings
from matchroom.models.events import AutoJoinTick, LivenessTick, ReminderTick, RoomEvent
from matchroom.services.event_queue import RoomEventQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodicJob:
    name: str
    interval_seconds: float
    event: RoomEvent


def default_jobs(settings: Settings) -> list[PeriodicJob]:
    return [
        PeriodicJob("discord-reminder", settings.reminder_interval_seconds, ReminderTick()),
        PeriodicJob("auto-join-correction", settings.auto_join_interval_seconds, AutoJoinTick()),
        PeriodicJob("liveness-check", settings.liveness_interval_seconds, LivenessTick()),
    ]


class BackgroundScheduler:
    """Owns one asyncio task per periodic job."""

    def __init__(self, queue: RoomEventQueue, jobs: list[PeriodicJob]):
        self.queue = queue
        self.jobs = jobs
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks.values())

    def start(self) -> None:
        if self.running:
            return
        logger.info("Starting background tasks...")
        for job in self.jobs:
            self._tasks[job.name] = asyncio.create_task(self._run_job(job), name=job.name)
        logger.info(f"Background tasks started: {', '.join(self._tasks)}")

    async def _run_job(self, job: PeriodicJob) -> None:
        while True:
            await asyncio.sleep(job.interval_seconds)
            self.queue.put(job.event)

    async def stop(self) -> None:
        for task in self._tasks.values():
            task.cancel()
        for task in self._tasks.values():
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks.clear()
        logger.info("Background tasks stopped")
