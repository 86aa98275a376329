"""Cooperative event queue.

Platform events, timer ticks and delayed events all pass through one
asyncio.Queue drained by a single pump task, so at most one handler is ever
mutating room state.
"""

import asyncio
import logging
from typing import Protocol

from matchroom.models.events import RoomEvent

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def dispatch(self, event: RoomEvent) -> bool: ...


class RoomEventQueue:
    """Serializes room events through one consumer."""

    def __init__(self):
        self._queue: asyncio.Queue[RoomEvent] = asyncio.Queue()
        self._timers: set[asyncio.TimerHandle] = set()
        self.processed = 0
        self.failed = 0

    def put(self, event: RoomEvent) -> None:
        self._queue.put_nowait(event)

    def call_later(self, delay: float, event: RoomEvent) -> asyncio.TimerHandle:
        """Enqueue `event` after `delay` seconds."""
        loop = asyncio.get_running_loop()
        handle: asyncio.TimerHandle | None = None

        def fire() -> None:
            self._timers.discard(handle)
            self.put(event)

        handle = loop.call_later(delay, fire)
        self._timers.add(handle)
        return handle

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def scheduled(self) -> int:
        return len(self._timers)

    def process_one(self, sink: EventSink, event: RoomEvent) -> bool:
        """Dispatch a single event; a failing handler is logged, not raised."""
        try:
            return sink.dispatch(event)
        except Exception:
            self.failed += 1
            logger.exception(f"Error handling {type(event).__name__}")
            return False
        finally:
            self.processed += 1

    async def drain(self, sink: EventSink) -> int:
        """Process everything queued right now; returns the count handled."""
        handled = 0
        while not self._queue.empty():
            event = self._queue.get_nowait()
            try:
                self.process_one(sink, event)
                handled += 1
            finally:
                self._queue.task_done()
        return handled

    async def run(self, sink: EventSink) -> None:
        """Pump loop; runs until cancelled."""
        while True:
            event = await self._queue.get()
            try:
                self.process_one(sink, event)
            finally:
                self._queue.task_done()

    def cancel_timers(self) -> None:
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()
