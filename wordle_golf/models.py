"""
Data model for Wordle Golf.

ScoreRecord is the only persisted shape. Everything else (statistics,
leaderboard entries, scorecard rows) is derived from a snapshot of
records and lives next to the code that computes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from typing import Optional, Tuple

from wordle_golf.config import MAX_GUESSES


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    """One completed puzzle attempt by one player."""

    puzzle_number: int
    guesses: int
    date: Optional[date_type]
    player_name: str

    @property
    def solved(self) -> bool:
        return self.guesses <= MAX_GUESSES

    def to_payload(self) -> dict:
        """Store append payload (field names follow the store's columns)."""
        return {
            'action': 'add',
            'puzzleNumber': self.puzzle_number,
            'guesses': self.guesses,
            'date': self.date.isoformat() if self.date else None,
            'playerName': self.player_name,
        }


@dataclass(frozen=True, slots=True)
class ScoreCandidate:
    """A parsed share result that has not been attributed to a player yet."""

    puzzle_number: int
    guesses: int
    date: date_type

    def for_player(self, player_name: str) -> ScoreRecord:
        return ScoreRecord(
            puzzle_number=self.puzzle_number,
            guesses=self.guesses,
            date=self.date,
            player_name=player_name,
        )


# Full collection of records as last fetched from the store
Snapshot = Tuple[ScoreRecord, ...]
