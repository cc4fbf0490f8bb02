"""
Tests for leaderboard ranking.
"""

from datetime import date

from conftest import make_records
from wordle_golf.golf.leaderboard import (
    LEADERBOARD_COLUMNS,
    distinct_players,
    leaderboard_frame,
    rank_players,
)
from wordle_golf.models import ScoreRecord


def sample_snapshot():
    return (
        make_records("cara", [4, 4, 4])         # 0
        + make_records("amy", [2, 3])           # -3
        + make_records("bob", [7, 5])           # +5
        + make_records("dan", [1])              # -3
    )


class TestRankPlayers:
    """Tests for rank_players."""

    def test_empty_snapshot(self):
        assert rank_players([]) == []

    def test_sorted_ascending_by_strokes(self):
        entries = rank_players(sample_snapshot())
        strokes = [e.total_strokes for e in entries]
        assert strokes == sorted(strokes)
        assert [e.player_name for e in entries] == ["amy", "dan", "cara", "bob"]

    def test_ties_broken_by_name(self):
        entries = rank_players(sample_snapshot())
        assert entries[0].player_name == "amy"
        assert entries[1].player_name == "dan"
        assert entries[0].total_strokes == entries[1].total_strokes

    def test_ranks_are_positional_from_one(self):
        entries = rank_players(sample_snapshot())
        assert [e.rank for e in entries] == [1, 2, 3, 4]

    def test_tiers(self):
        entries = rank_players(sample_snapshot())
        assert [e.tier for e in entries] == ["gold", "silver", "bronze", "field"]

    def test_total_games(self):
        entries = {e.player_name: e for e in rank_players(sample_snapshot())}
        assert entries["cara"].total_games == 3
        assert entries["bob"].total_games == 2

    def test_deterministic_across_input_order(self):
        snapshot = sample_snapshot()
        first = rank_players(snapshot)
        again = rank_players(snapshot)
        shuffled = rank_players(list(reversed(snapshot)))
        assert first == again
        assert [e.player_name for e in first] == [e.player_name for e in shuffled]

    def test_player_records_ordered_before_statistics(self):
        snapshot = [
            ScoreRecord(3, 4, date(2025, 1, 3), "amy"),
            ScoreRecord(1, 2, date(2025, 1, 1), "amy"),
        ]
        entries = rank_players(snapshot)
        assert entries[0].total_strokes == -2


class TestLeaderboardHelpers:
    """Tests for distinct_players and leaderboard_frame."""

    def test_distinct_players_first_appearance(self):
        assert distinct_players(sample_snapshot()) == ["cara", "amy", "bob", "dan"]

    def test_frame_columns(self):
        df = leaderboard_frame(rank_players(sample_snapshot()))
        assert list(df.columns) == LEADERBOARD_COLUMNS
        assert df.iloc[0]['player_name'] == "amy"
        assert df.iloc[-1]['tier'] == "field"

    def test_empty_frame(self):
        df = leaderboard_frame([])
        assert df.empty
        assert list(df.columns) == LEADERBOARD_COLUMNS
