"""Tests for lifetime player statistics."""

import pytest

from matchroom.models.stats import MatchStats, PlayerStats
from matchroom.services.stats_store import PlayerStatsStore


def test_get_creates_lazily():
    store = PlayerStatsStore()

    stats = store.get("Ann")

    assert stats == PlayerStats()
    assert store.get("Ann") is stats


def test_top_orders_by_stat_and_limits():
    store = PlayerStatsStore()
    for name, goals in [("A", 1), ("B", 5), ("C", 3), ("D", 0), ("E", 2), ("F", 4)]:
        store.get(name).goals = goals

    top = store.top("goals", limit=5)

    assert [name for name, _ in top] == ["B", "F", "C", "E", "A"]


def test_top_ties_keep_first_seen_order():
    store = PlayerStatsStore()
    store.get("First").assists = 2
    store.get("Second").assists = 2

    assert [name for name, _ in store.top("assists")] == ["First", "Second"]


def test_top_unknown_stat():
    with pytest.raises(ValueError):
        PlayerStatsStore().top("elo")


def test_win_rate():
    stats = PlayerStats(wins=3, games_played=4)

    assert stats.win_rate == 75.0
    assert PlayerStats().win_rate == 0.0


def test_match_stats_counts():
    match = MatchStats(goal_scorers=["X", "Y", "X"], assists=["Y"])

    assert match.goals_by("X") == 2
    assert match.assists_by("Y") == 1
    assert match.assists_by("X") == 0
