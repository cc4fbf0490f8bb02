"""
Leaderboard Ranking for Wordle Golf

Ranks every player in a snapshot by total strokes, golf style: the lowest
(most negative) total leads. Players on equal strokes are ordered by name so
repeated rankings of the same snapshot always come out identical.

Usage:
    from wordle_golf.golf.leaderboard import rank_players, leaderboard_frame
    entries = rank_players(snapshot)
"""

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from wordle_golf.config import FIELD_TIER, PODIUM_TIERS
from wordle_golf.golf.statistics import calculate_statistics, player_records
from wordle_golf.models import ScoreRecord

LEADERBOARD_COLUMNS = ['rank', 'player_name', 'total_strokes', 'total_games', 'tier']


@dataclass(frozen=True)
class LeaderboardEntry:
    """One player's standing."""

    player_name: str
    total_strokes: int
    total_games: int
    rank: int  # 1-based position

    @property
    def tier(self) -> str:
        return PODIUM_TIERS.get(self.rank, FIELD_TIER)


def distinct_players(snapshot: Iterable[ScoreRecord]) -> list[str]:
    """Player names in order of first appearance."""
    return list(dict.fromkeys(r.player_name for r in snapshot))


def rank_players(snapshot: Iterable[ScoreRecord]) -> list[LeaderboardEntry]:
    """
    Rank all players in the snapshot.

    Args:
        snapshot: All score records for all players

    Returns:
        LeaderboardEntry list sorted ascending by total_strokes, ties broken
        by player name; ranks are positional and start at 1
    """
    snapshot = list(snapshot)
    standings = []
    for player in distinct_players(snapshot):
        stats = calculate_statistics(player_records(snapshot, player))
        standings.append((player, stats.total_strokes, stats.total_games))

    standings.sort(key=lambda s: (s[1], s[0]))

    return [
        LeaderboardEntry(
            player_name=player,
            total_strokes=total_strokes,
            total_games=total_games,
            rank=position,
        )
        for position, (player, total_strokes, total_games) in enumerate(standings, start=1)
    ]


def leaderboard_frame(entries: Iterable[LeaderboardEntry]) -> pd.DataFrame:
    """Leaderboard entries as a DataFrame for display or export."""
    rows = [
        {
            'rank': e.rank,
            'player_name': e.player_name,
            'total_strokes': e.total_strokes,
            'total_games': e.total_games,
            'tier': e.tier,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)
