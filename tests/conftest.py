"""
Shared fixtures for Wordle Golf tests.
"""

from datetime import date

import pytest

from wordle_golf.exceptions import RemoteSyncError
from wordle_golf.models import ScoreRecord


def make_records(player, guesses_list, start=100):
    """Records for one player on consecutive puzzles starting at `start`."""
    return [
        ScoreRecord(puzzle_number=start + i, guesses=g, date=date(2025, 1, 1), player_name=player)
        for i, g in enumerate(guesses_list)
    ]


class FakeStore:
    """In-memory stand-in for ScoreStoreClient."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.appended = []
        self.fail_fetch = False
        self.fail_append = False
        self.calls = []

    def fetch_records(self):
        self.calls.append("fetch")
        if self.fail_fetch:
            raise RemoteSyncError("Failed to load scores from the score store")
        return list(self.records)

    def append_record(self, record):
        self.calls.append("append")
        if self.fail_append:
            raise RemoteSyncError("Failed to save score to the score store")
        self.appended.append(record)
        self.records.append(record)


@pytest.fixture
def fake_store():
    return FakeStore()
