"""
Scorecard Grid for Wordle Golf

Lays the most recent puzzles out as golf holes (18 by default) with one row
per player. Each cell holds the strokes for that puzzle, or nothing when the
player has no result for it, and rows keep a running total from left to
right. Missing puzzles neither add nor subtract.

The row total only covers the window, so it can differ from the player's
leaderboard total when they have older results.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import pandas as pd

from wordle_golf.config import SCORECARD_HOLES
from wordle_golf.golf.leaderboard import distinct_players
from wordle_golf.golf.strokes import format_strokes, strokes_for
from wordle_golf.models import ScoreRecord

TOTAL_COLUMN = "TOTAL"


@dataclass(frozen=True)
class ScorecardCell:
    puzzle_number: int
    guesses: Optional[int]
    strokes: Optional[int]
    running_total: int

    @property
    def played(self) -> bool:
        return self.guesses is not None


@dataclass(frozen=True)
class ScorecardRow:
    player_name: str
    cells: tuple
    total: int


@dataclass(frozen=True)
class ScorecardGrid:
    puzzle_numbers: tuple
    rows: tuple

    @property
    def holes(self) -> list[int]:
        """Hole numbers 1..n matching puzzle_numbers."""
        return list(range(1, len(self.puzzle_numbers) + 1))


def recent_puzzles(snapshot: Iterable[ScoreRecord], holes: int = SCORECARD_HOLES) -> list[int]:
    """The last `holes` distinct puzzle numbers, ascending."""
    puzzles = sorted({r.puzzle_number for r in snapshot})
    return puzzles[-holes:] if holes > 0 else []


def build_row(player_name: str, records: Iterable[ScoreRecord], puzzle_numbers: Sequence[int]) -> ScorecardRow:
    """Build one player's row over the windowed puzzles."""
    by_puzzle = {}
    for r in records:
        if r.player_name == player_name:
            by_puzzle.setdefault(r.puzzle_number, r)

    running_total = 0
    cells = []
    for puzzle in puzzle_numbers:
        record = by_puzzle.get(puzzle)
        if record is None:
            cells.append(ScorecardCell(puzzle, None, None, running_total))
            continue
        strokes = strokes_for(record.guesses)
        running_total += strokes
        cells.append(ScorecardCell(puzzle, record.guesses, strokes, running_total))

    return ScorecardRow(player_name=player_name, cells=tuple(cells), total=running_total)


def build_scorecard(
    snapshot: Iterable[ScoreRecord],
    players: Optional[Sequence[str]] = None,
    holes: int = SCORECARD_HOLES,
) -> ScorecardGrid:
    """
    Build the scorecard grid.

    Args:
        snapshot: All score records for all players
        players: Row order (default: first appearance in the snapshot)
        holes: Window size in puzzles

    Returns:
        ScorecardGrid with at most `holes` columns
    """
    snapshot = list(snapshot)
    puzzle_numbers = recent_puzzles(snapshot, holes)
    if players is None:
        players = distinct_players(snapshot)

    # Records ordered by puzzle so a duplicate entry resolves to the first one
    ordered = sorted(snapshot, key=lambda r: r.puzzle_number)
    rows = tuple(build_row(player, ordered, puzzle_numbers) for player in players)

    return ScorecardGrid(puzzle_numbers=tuple(puzzle_numbers), rows=rows)


def scorecard_frame(grid: ScorecardGrid) -> pd.DataFrame:
    """
    Scorecard as a display DataFrame.

    Index is the player name; one column per hole labelled "<hole> (#<puzzle>)",
    cells formatted as signed strokes or "-" when not played, plus TOTAL.
    """
    columns = [f"{hole} (#{puzzle})" for hole, puzzle in zip(grid.holes, grid.puzzle_numbers)]
    data = []
    for row in grid.rows:
        cells = [format_strokes(c.strokes) if c.played else "-" for c in row.cells]
        data.append(cells + [format_strokes(row.total)])

    df = pd.DataFrame(data, columns=columns + [TOTAL_COLUMN], index=[r.player_name for r in grid.rows])
    df.index.name = 'player_name'
    return df
