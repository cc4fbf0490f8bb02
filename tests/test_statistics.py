"""
Tests for player statistics.
"""

from datetime import date

from conftest import make_records
from wordle_golf.golf.statistics import (
    PlayerStatistics,
    calculate_current_streak,
    calculate_max_streak,
    calculate_statistics,
    calculate_win_rate,
    player_history,
    player_records,
)
from wordle_golf.golf.strokes import strokes_for
from wordle_golf.models import ScoreRecord


class TestCalculateStatistics:
    """Tests for calculate_statistics."""

    def test_empty_history_is_zeroed(self):
        stats = calculate_statistics([])
        assert stats == PlayerStatistics()
        assert not stats.has_data
        assert stats.win_rate == 0
        assert stats.avg_guesses == 0
        assert stats.guess_distribution == (0, 0, 0, 0, 0, 0, 0)

    def test_all_wins_example(self):
        stats = calculate_statistics(make_records("amy", [2, 3, 4]))
        assert stats.total_strokes == -3
        assert stats.avg_guesses == 3.0
        assert stats.win_rate == 100
        assert stats.wins == 3
        assert stats.losses == 0

    def test_streak_example(self):
        stats = calculate_statistics(make_records("amy", [3, 4, 7, 2, 1]))
        assert stats.current_streak == 2
        assert stats.max_streak == 2
        assert stats.total_games == 5
        assert stats.losses == 1

    def test_distribution_buckets(self):
        stats = calculate_statistics(make_records("amy", [1, 4, 4, 6, 7, 7]))
        assert stats.guess_distribution == (1, 0, 0, 2, 0, 1, 2)

    def test_average_ignores_losses(self):
        stats = calculate_statistics(make_records("amy", [3, 7, 4]))
        assert stats.avg_guesses == 3.5

    def test_average_rounded_to_two_places(self):
        stats = calculate_statistics(make_records("amy", [3, 3, 4]))
        assert stats.avg_guesses == 3.33

    def test_average_ties_round_half_up(self):
        assert calculate_statistics(make_records("amy", [3] * 7 + [4])).avg_guesses == 3.13
        assert calculate_statistics(make_records("amy", [3, 3, 3, 3, 3, 2, 2, 2])).avg_guesses == 2.63

    def test_only_losses(self):
        stats = calculate_statistics(make_records("amy", [7, 7]))
        assert stats.wins == 0
        assert stats.avg_guesses == 0
        assert stats.win_rate == 0
        assert stats.current_streak == 0
        assert stats.max_streak == 0
        assert stats.total_strokes == 8

    def test_total_strokes_includes_losses(self):
        guesses = [1, 5, 7, 6, 2]
        stats = calculate_statistics(make_records("amy", guesses))
        assert stats.total_strokes == sum(strokes_for(g) for g in guesses)

    def test_order_is_not_resorted(self):
        records = make_records("amy", [7, 4, 4])
        stats = calculate_statistics(list(reversed(records)))
        # Newest-last order given is [4, 4, 7]: the trailing loss ends the streak
        assert stats.current_streak == 0
        assert stats.max_streak == 2


class TestStreaks:
    """Tests for streak helpers."""

    def test_loss_at_most_recent_position(self):
        assert calculate_current_streak(make_records("amy", [2, 3, 7])) == 0

    def test_current_never_exceeds_max(self):
        sequences = [[], [7], [1], [1, 7, 1, 1, 1], [2, 2, 7, 3], [7, 7, 4, 4, 4, 4]]
        for seq in sequences:
            records = make_records("amy", seq)
            assert calculate_current_streak(records) <= calculate_max_streak(records)

    def test_max_streak_in_middle(self):
        assert calculate_max_streak(make_records("amy", [7, 1, 2, 3, 7, 4])) == 3


class TestWinRate:
    """Tests for calculate_win_rate."""

    def test_no_games(self):
        assert calculate_win_rate(0, 0) == 0

    def test_rounds_half_up(self):
        assert calculate_win_rate(1, 8) == 13

    def test_rounds_down(self):
        assert calculate_win_rate(2, 3) == 67
        assert calculate_win_rate(1, 3) == 33


class TestPlayerRecords:
    """Tests for per-player selection and history view."""

    def test_filters_and_sorts(self):
        snapshot = [
            ScoreRecord(12, 4, date(2025, 1, 3), "amy"),
            ScoreRecord(10, 3, date(2025, 1, 1), "bob"),
            ScoreRecord(10, 5, date(2025, 1, 1), "amy"),
        ]
        assert [r.puzzle_number for r in player_records(snapshot, "amy")] == [10, 12]

    def test_unknown_player(self):
        assert player_records(make_records("amy", [3]), "zed") == []

    def test_history_newest_first(self):
        df = player_history(make_records("amy", [1, 7]), "amy")
        assert list(df['puzzle_number']) == [101, 100]
        assert list(df['result']) == ["X/6", "1/6"]
        assert list(df['strokes']) == ["+4", "-3"]
        assert list(df['term']) == ["No Submission", "Hole in One"]

    def test_history_empty(self):
        df = player_history([], "amy")
        assert df.empty
        assert list(df.columns) == ['puzzle_number', 'date', 'result', 'strokes', 'term']
