"""Lifetime player statistics."""

from matchroom.models.stats import PlayerStats

RANKABLE_STATS = ("goals", "assists", "own_goals", "wins", "losses", "mvps", "games_played")


class PlayerStatsStore:
    """Per-name lifetime counters, created on first reference."""

    def __init__(self):
        self.players: dict[str, PlayerStats] = {}

    def get(self, player_name: str) -> PlayerStats:
        stats = self.players.get(player_name)
        if stats is None:
            stats = PlayerStats()
            self.players[player_name] = stats
        return stats

    def top(self, stat: str = "goals", limit: int = 5) -> list[tuple[str, PlayerStats]]:
        """Highest `stat` first; ties keep first-seen order."""
        if stat not in RANKABLE_STATS:
            raise ValueError(f"Unknown stat: {stat}")
        ranked = sorted(
            self.players.items(),
            key=lambda item: getattr(item[1], stat),
            reverse=True,
        )
        return ranked[:limit]

    def to_dict(self) -> dict[str, dict]:
        return {name: stats.to_dict() for name, stats in self.players.items()}
