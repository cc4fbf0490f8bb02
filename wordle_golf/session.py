"""
Score Board Session

Owns the in-memory snapshot of all score records and its lifecycle:
fetch -> replace -> recompute. The snapshot is an immutable tuple that is
swapped wholesale after every successful fetch; a failed fetch leaves the
previous snapshot in place.

Store calls are serialized by one re-entrant lock. An append and the reload
that follows it run in the same critical section, so a reload requested
meanwhile waits for the append to finish instead of racing it.

Usage:
    from wordle_golf.session import ScoreBoardSession
    session = ScoreBoardSession(ScoreStoreClient(), player_name="Alex")
    session.reload()
    session.leaderboard()
"""

import threading
from datetime import datetime
from typing import Optional

from wordle_golf.exceptions import RemoteSyncError
from wordle_golf.golf.leaderboard import LeaderboardEntry, rank_players
from wordle_golf.golf.scorecard import ScorecardGrid, build_scorecard
from wordle_golf.golf.statistics import PlayerStatistics, calculate_statistics, player_history, player_records
from wordle_golf.ingestion.paste_mode import check_duplicate_entry
from wordle_golf.models import ScoreRecord, Snapshot
from wordle_golf.utils import normalize_player_name, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class ScoreBoardSession:
    """Snapshot owner for one local player."""

    def __init__(self, store, player_name: str):
        """
        Args:
            store: Object with fetch_records() and append_record(record)
            player_name: Identity used for submissions and "my" views
        """
        player_name = normalize_player_name(player_name)
        if not player_name:
            raise ValueError("Player name is not configured (set WORDLE_GOLF_PLAYER_NAME)")
        self.store = store
        self.player_name = player_name
        self.last_synced: Optional[datetime] = None
        self._snapshot: Snapshot = ()
        self._lock = threading.RLock()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def reload(self) -> Snapshot:
        """
        Fetch all records and replace the snapshot.

        Raises:
            RemoteSyncError: If the fetch fails (snapshot is left unchanged)
        """
        with self._lock:
            records = tuple(self.store.fetch_records())
            self._snapshot = records
            self.last_synced = datetime.now()
            logger.info(f"Snapshot reloaded: {len(records)} records")
            return records

    def submit(self, record: ScoreRecord) -> dict:
        """
        Append a record for this session's player and reload.

        Args:
            record: Record to append (player_name must match the session)

        Returns:
            Dictionary with:
                - success: bool
                - record: the appended ScoreRecord
                - reloaded: whether the follow-up reload succeeded
                - warnings: list of warning messages

        Raises:
            DuplicateEntryError: If the puzzle is already in the snapshot
            RemoteSyncError: If the append fails
        """
        if record.player_name != self.player_name:
            raise ValueError(
                f"Record belongs to '{record.player_name}', session plays as '{self.player_name}'"
            )

        result = {'success': False, 'record': record, 'reloaded': False, 'warnings': []}

        with self._lock:
            check_duplicate_entry(self._snapshot, record.player_name, record.puzzle_number)
            self.store.append_record(record)
            result['success'] = True

            try:
                self.reload()
                result['reloaded'] = True
            except RemoteSyncError as e:
                # Append succeeded; keep the stale snapshot until the next refresh
                logger.warning(f"Score saved but reload failed: {e}")
                result['warnings'].append("Score saved, but refreshing the scores failed. Refresh to see it.")

        return result

    # --- Derived views (recomputed from the current snapshot on every call) ---
    def my_records(self) -> list[ScoreRecord]:
        return player_records(self._snapshot, self.player_name)

    def my_statistics(self) -> PlayerStatistics:
        return calculate_statistics(self.my_records())

    def my_history(self):
        return player_history(self._snapshot, self.player_name)

    def leaderboard(self) -> list[LeaderboardEntry]:
        return rank_players(self._snapshot)

    def scorecard(self) -> ScorecardGrid:
        return build_scorecard(self._snapshot)
