"""Outbound Discord webhook notifications.

Provides both a real queued sender (using httpx) and a mock that records
notifications in memory for testing/development.

Callers only ever enqueue: `send()` never blocks, never raises and never
reports delivery. Ordering, rate limiting and delivery failures are the
worker's concern.
"""

import asyncio
import logging
import time
from typing import Optional

import httpx

from matchroom.models.notification import Notification

logger = logging.getLogger(__name__)

BOT_USERNAME = "RHL Tournament Bot"
BOT_AVATAR_URL = "https://www.haxball.com/favicon.ico"
FOOTER_TEXT = "🎮 RHL Tournament Bot"
FOOTER_ICON_URL = "https://cdn.discordapp.com/emojis/995388267645448303.png"


def is_webhook_configured(webhook_url: str | None) -> bool:
    """A usable URL is non-empty, points at Discord and is not a placeholder."""
    if not webhook_url:
        return False
    return "discord.com" in webhook_url and "PUT_YOUR" not in webhook_url


class MockNotifier:
    """Notifier that keeps every notification in `sent`.

    Use this for testing and development when no webhook is configured.
    """

    def __init__(self):
        self.sent: list[Notification] = []

    def send(self, notification: Notification) -> bool:
        logger.debug(f"MockNotifier: {notification.title}")
        self.sent.append(notification)
        return True

    def titles(self) -> list[str]:
        return [n.title for n in self.sent]

    async def run(self) -> None:
        """Nothing to deliver; returns immediately."""
        return None

    async def close(self) -> None:
        return None

    def stats(self) -> dict:
        return {
            "queue_length": 0,
            "is_processing": False,
            "last_sent": None,
            "sent": len(self.sent),
        }


class DiscordNotifier:
    """Queued, rate-limited Discord webhook sender."""

    def __init__(
        self,
        webhook_url: str,
        cooldown_seconds: float = 1.0,
        max_queue: int = 100,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the notifier.

        Args:
            webhook_url: Discord webhook URL
            cooldown_seconds: Minimum delay between two deliveries
            max_queue: Pending notifications kept before new ones are dropped
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.webhook_url = webhook_url
        self.cooldown_seconds = cooldown_seconds
        self.timeout = timeout
        self._transport = transport
        self._queue: asyncio.Queue[Notification] = asyncio.Queue(maxsize=max_queue)
        self._client: Optional[httpx.AsyncClient] = None
        self._last_sent: float | None = None
        self._processing = False
        self.delivered = 0
        self.failed = 0
        self.dropped = 0

    @property
    def enabled(self) -> bool:
        return is_webhook_configured(self.webhook_url)

    def send(self, notification: Notification) -> bool:
        """Enqueue a notification; False if it was dropped."""
        if not self.enabled:
            logger.debug(f"Discord webhook not configured, skipping: {notification.title}")
            return False
        try:
            self._queue.put_nowait(notification)
        except asyncio.QueueFull:
            self.dropped += 1
            logger.warning(f"Notification queue full, dropping: {notification.title}")
            return False
        return True

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def _payload(self, notification: Notification) -> dict:
        embed = notification.to_embed()
        embed["footer"] = {"text": FOOTER_TEXT, "icon_url": FOOTER_ICON_URL}
        embed.setdefault("thumbnail", {"url": BOT_AVATAR_URL})
        return {
            "embeds": [embed],
            "username": BOT_USERNAME,
            "avatar_url": BOT_AVATAR_URL,
        }

    async def _wait_for_cooldown(self) -> None:
        if self._last_sent is None:
            return
        elapsed = time.monotonic() - self._last_sent
        if elapsed < self.cooldown_seconds:
            await asyncio.sleep(self.cooldown_seconds - elapsed)

    async def _deliver(self, notification: Notification) -> bool:
        """POST one notification. Failures are logged, never raised."""
        await self._wait_for_cooldown()
        try:
            client = await self._get_client()
            response = await client.post(self.webhook_url, json=self._payload(notification))
            response.raise_for_status()
            self.delivered += 1
            logger.info(f"Discord webhook sent: {notification.title}")
            return True
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.failed += 1
            logger.error(f"Failed to send Discord webhook '{notification.title}': {e}")
            return False
        finally:
            self._last_sent = time.monotonic()

    async def flush(self) -> int:
        """Deliver everything currently queued; returns the number delivered."""
        delivered = 0
        self._processing = True
        try:
            while not self._queue.empty():
                notification = self._queue.get_nowait()
                try:
                    if await self._deliver(notification):
                        delivered += 1
                finally:
                    self._queue.task_done()
        finally:
            self._processing = False
        return delivered

    async def run(self) -> None:
        """Worker loop draining the queue until cancelled."""
        while True:
            notification = await self._queue.get()
            self._processing = True
            try:
                await self._deliver(notification)
            finally:
                self._processing = False
                self._queue.task_done()

    def stats(self) -> dict:
        return {
            "queue_length": self._queue.qsize(),
            "is_processing": self._processing,
            "last_sent": self._last_sent,
            "cooldown": self.cooldown_seconds,
            "delivered": self.delivered,
            "failed": self.failed,
            "dropped": self.dropped,
        }


Notifier = MockNotifier | DiscordNotifier


def get_notifier(
    webhook_url: Optional[str] = None,
    use_mock: bool = False,
    cooldown_seconds: float = 1.0,
    max_queue: int = 100,
    timeout: float = 10.0,
) -> MockNotifier | DiscordNotifier:
    """Factory function to get the appropriate notifier.

    Args:
        webhook_url: Discord webhook URL
        use_mock: Force use of the mock notifier

    Returns:
        DiscordNotifier or MockNotifier
    """
    if use_mock or not is_webhook_configured(webhook_url):
        logger.info("Using MockNotifier (Discord webhook not configured)")
        return MockNotifier()
    logger.info("Using DiscordNotifier")
    return DiscordNotifier(
        webhook_url,
        cooldown_seconds=cooldown_seconds,
        max_queue=max_queue,
        timeout=timeout,
    )
