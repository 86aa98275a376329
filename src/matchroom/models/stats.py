"""Player and match statistics models."""

from dataclasses import asdict, dataclass, field


@dataclass
class PlayerStats:
    """Lifetime counters for a display name."""

    goals: int = 0
    assists: int = 0
    own_goals: int = 0
    wins: int = 0
    losses: int = 0
    mvps: int = 0
    games_played: int = 0

    @property
    def win_rate(self) -> float:
        """Win percentage over games played (0.0 when no games)."""
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played * 100

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MatchStats:
    """Running statistics of the match in progress."""

    red_goals: int = 0
    blue_goals: int = 0
    goal_scorers: list[str] = field(default_factory=list)
    assists: list[str] = field(default_factory=list)
    mvp: str | None = None

    def goals_by(self, player_name: str) -> int:
        return self.goal_scorers.count(player_name)

    def assists_by(self, player_name: str) -> int:
        return self.assists.count(player_name)

    def to_dict(self) -> dict:
        return asdict(self)
