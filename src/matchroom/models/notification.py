"""Outbound notification models (rendered as Discord embeds)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class NotificationField:
    name: str
    value: str
    inline: bool = True


@dataclass
class Notification:
    """A structured notification for the webhook sender."""

    title: str
    description: str
    color: int
    fields: list[NotificationField] = field(default_factory=list)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_embed(self) -> dict:
        """Render as a Discord embed payload."""
        embed = {
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.fields:
            embed["fields"] = [
                {"name": f.name, "value": f.value, "inline": f.inline}
                for f in self.fields
            ]
        return embed
