"""Utility modules for matchroom."""

from matchroom.utils.formatting import (
    format_time,
    format_uptime,
    is_valid_club_name,
    join_names,
)
from matchroom.utils.roles import role_label

__all__ = [
    "format_time",
    "format_uptime",
    "is_valid_club_name",
    "join_names",
    "role_label",
]
