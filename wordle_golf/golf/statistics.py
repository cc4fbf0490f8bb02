"""
Player Statistics for Wordle Golf

Computes one player's aggregate statistics from their score history:
- Wins, losses and win rate
- Current and longest win streaks
- Guess distribution (1-6 plus failures)
- Average guesses over solved puzzles
- Total golf strokes

Statistics are always recomputed from the full record list; nothing is
cached or updated incrementally.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pandas as pd

from wordle_golf.config import FAILED_GUESSES, GUESS_BUCKETS
from wordle_golf.golf.strokes import format_strokes, result_label, strokes_for, term_for
from wordle_golf.models import ScoreRecord


@dataclass(frozen=True)
class PlayerStatistics:
    """Aggregate statistics for one player."""

    total_games: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: int = 0
    current_streak: int = 0
    max_streak: int = 0
    avg_guesses: float = 0.0
    guess_distribution: tuple = field(default_factory=lambda: (0,) * GUESS_BUCKETS)
    total_strokes: int = 0

    @property
    def has_data(self) -> bool:
        return self.total_games > 0


def calculate_win_rate(wins: int, total_games: int) -> int:
    """Integer percent of games won, rounded half up; 0 with no games."""
    if total_games == 0:
        return 0
    return math.floor(100 * wins / total_games + 0.5)


def calculate_current_streak(records: Sequence[ScoreRecord]) -> int:
    """Consecutive wins counted back from the most recent record."""
    streak = 0
    for record in reversed(records):
        if not record.solved:
            break
        streak += 1
    return streak


def calculate_max_streak(records: Sequence[ScoreRecord]) -> int:
    """Longest run of consecutive wins anywhere in the history."""
    max_streak = 0
    run = 0
    for record in records:
        if record.solved:
            run += 1
            max_streak = max(max_streak, run)
        else:
            run = 0
    return max_streak


def calculate_statistics(records: Sequence[ScoreRecord]) -> PlayerStatistics:
    """
    Compute statistics for one player.

    Args:
        records: The player's records in ascending puzzle order. The order
                 is used as-is for streaks and is never re-sorted here.

    Returns:
        PlayerStatistics (all zeros for an empty history)
    """
    records = list(records)
    if not records:
        return PlayerStatistics()

    wins = sum(1 for r in records if r.solved)
    losses = sum(1 for r in records if r.guesses == FAILED_GUESSES)
    total_games = wins + losses

    distribution = [0] * GUESS_BUCKETS
    for r in records:
        if 1 <= r.guesses <= GUESS_BUCKETS:
            distribution[r.guesses - 1] += 1

    solved_guesses = sum(r.guesses for r in records if r.solved)
    # Two places, half up: 25/8 -> 3.13
    avg_guesses = math.floor(100 * solved_guesses / wins + 0.5) / 100 if wins else 0.0

    return PlayerStatistics(
        total_games=total_games,
        wins=wins,
        losses=losses,
        win_rate=calculate_win_rate(wins, total_games),
        current_streak=calculate_current_streak(records),
        max_streak=calculate_max_streak(records),
        avg_guesses=avg_guesses,
        guess_distribution=tuple(distribution),
        total_strokes=sum(strokes_for(r.guesses) for r in records),
    )


def player_records(snapshot: Iterable[ScoreRecord], player_name: str) -> list[ScoreRecord]:
    """A player's records sorted ascending by puzzle number (stable)."""
    return sorted(
        (r for r in snapshot if r.player_name == player_name),
        key=lambda r: r.puzzle_number,
    )


def player_history(snapshot: Iterable[ScoreRecord], player_name: str) -> pd.DataFrame:
    """
    History view for one player, most recent puzzle first.

    Returns:
        DataFrame with columns: puzzle_number, date, result, strokes, term
    """
    rows = [
        {
            'puzzle_number': r.puzzle_number,
            'date': r.date,
            'result': result_label(r.guesses),
            'strokes': format_strokes(strokes_for(r.guesses)),
            'term': term_for(r.guesses),
        }
        for r in reversed(player_records(snapshot, player_name))
    ]
    return pd.DataFrame(rows, columns=['puzzle_number', 'date', 'result', 'strokes', 'term'])
