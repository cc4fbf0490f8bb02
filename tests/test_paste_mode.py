"""
Tests for paste-mode ingestion.
"""

from datetime import date

import pytest

from conftest import FakeStore, make_records
from wordle_golf.exceptions import DuplicateEntryError, ParseError
from wordle_golf.ingestion.paste_mode import check_duplicate_entry, ingest_share_text
from wordle_golf.session import ScoreBoardSession

TODAY = date(2025, 3, 14)
SHARE = "Wordle 1,234 4/6\n\n⬜🟨⬜⬜🟩\n🟩🟩🟩🟩🟩"


def make_session(records=()):
    store = FakeStore(records)
    session = ScoreBoardSession(store, "amy")
    session.reload()
    store.calls.clear()
    return store, session


class TestCheckDuplicateEntry:
    """Tests for check_duplicate_entry."""

    def test_existing_pair_raises(self):
        with pytest.raises(DuplicateEntryError, match="already added"):
            check_duplicate_entry(make_records("amy", [3], start=7), "amy", 7)

    def test_other_player_ok(self):
        check_duplicate_entry(make_records("bob", [3], start=7), "amy", 7)

    def test_empty_snapshot_ok(self):
        check_duplicate_entry([], "amy", 7)


class TestIngestShareText:
    """Tests for ingest_share_text."""

    def test_submits_and_reloads(self):
        store, session = make_session()
        result = ingest_share_text(session, SHARE, today=TODAY)
        assert result['success']
        assert result['reloaded']
        record = result['record']
        assert (record.puzzle_number, record.guesses, record.date, record.player_name) == (1234, 4, TODAY, "amy")
        assert store.appended == [record]
        assert session.snapshot == (record,)

    def test_dry_run_does_not_save(self):
        store, session = make_session()
        result = ingest_share_text(session, SHARE, dry_run=True, today=TODAY)
        assert result['success']
        assert store.calls == []

    def test_parse_error_before_network(self):
        store, session = make_session()
        with pytest.raises(ParseError):
            ingest_share_text(session, "I got it in four!")
        assert store.calls == []

    def test_empty_input(self):
        store, session = make_session()
        with pytest.raises(ParseError):
            ingest_share_text(session, "")
        assert store.calls == []

    def test_duplicate_before_network(self):
        store, session = make_session(make_records("amy", [5], start=1234))
        with pytest.raises(DuplicateEntryError):
            ingest_share_text(session, SHARE, today=TODAY)
        assert store.calls == []

    def test_failed_puzzle_submission(self):
        store, session = make_session()
        result = ingest_share_text(session, "Wordle 987 X/6", today=TODAY)
        assert result['record'].guesses == 7
        assert session.my_statistics().total_strokes == 4
