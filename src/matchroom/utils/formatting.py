"""String formatting and validation helpers."""

import re

CLUB_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s]+$")


def is_valid_club_name(name: str | None) -> bool:
    """Club names are 2-20 characters of letters, digits and spaces."""
    return bool(name) and 2 <= len(name) <= 20 and bool(CLUB_NAME_PATTERN.match(name))


def format_time(seconds: int) -> str:
    """Format seconds as M:SS.

    Examples:
        >>> format_time(75)
        '1:15'
    """
    minutes, remaining = divmod(int(seconds), 60)
    return f"{minutes}:{remaining:02d}"


def format_uptime(seconds: float) -> str:
    """Format an uptime as e.g. '2h 3m 4s', '3m 4s' or '4s'."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def join_names(names: list[str], empty: str = "None") -> str:
    return ", ".join(names) if names else empty
