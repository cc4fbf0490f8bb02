"""
Remote Score Store Client

Talks to the shared score sheet's web endpoint over HTTP:
- GET returns every record as a JSON list of text fields
- POST with {"action": "add", ...} appends one record

Every failure (network, HTTP status, bad JSON, falsy success flag) is raised
as RemoteSyncError. There is no retry; callers re-trigger a fetch manually.
"""

from typing import List, Optional

import pandas as pd
import requests

from wordle_golf.config import FAILED_GUESSES, REQUEST_TIMEOUT, STORE_URL
from wordle_golf.exceptions import RemoteSyncError
from wordle_golf.models import ScoreRecord
from wordle_golf.utils import normalize_player_name, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

STORE_COLUMNS = ['puzzleNumber', 'guesses', 'date', 'playerName']


def records_from_payload(payload) -> List[ScoreRecord]:
    """
    Convert a fetched payload into ScoreRecords.

    Numbers arrive as text and are parsed here. Rows without a usable
    puzzle number, guess count (1-7) or player name are dropped with a
    warning. Dates keep their ISO YYYY-MM-DD prefix; unreadable dates
    become None.

    Args:
        payload: Decoded JSON (list of dicts)

    Returns:
        List of ScoreRecord in payload order

    Raises:
        RemoteSyncError: If the payload is not a list of records
    """
    if not isinstance(payload, list):
        raise RemoteSyncError(f"Unexpected store response: expected a list, got {type(payload).__name__}")
    if not payload:
        return []
    if not all(isinstance(row, dict) for row in payload):
        raise RemoteSyncError("Unexpected store response: every record must be an object")

    df = pd.DataFrame(payload)
    for col in STORE_COLUMNS:
        if col not in df.columns:
            df[col] = None

    df['puzzleNumber'] = pd.to_numeric(df['puzzleNumber'], errors='coerce')
    df['guesses'] = pd.to_numeric(df['guesses'], errors='coerce')
    df['playerName'] = df['playerName'].map(lambda n: normalize_player_name(n) if pd.notna(n) else "")
    df['date'] = pd.to_datetime(
        df['date'].map(lambda d: str(d)[:10] if pd.notna(d) else None),
        format='%Y-%m-%d',
        errors='coerce',
    )

    valid = (
        df['puzzleNumber'].notna()
        & df['guesses'].notna()
        & (df['puzzleNumber'] > 0)
        & (df['puzzleNumber'] % 1 == 0)
        & df['guesses'].between(1, FAILED_GUESSES)
        & (df['guesses'] % 1 == 0)
        & (df['playerName'] != "")
    )
    dropped = int((~valid).sum())
    if dropped:
        logger.warning(f"Dropped {dropped} malformed record(s) from store response")

    records = []
    for row in df.loc[valid, STORE_COLUMNS].itertuples(index=False):
        records.append(ScoreRecord(
            puzzle_number=int(row.puzzleNumber),
            guesses=int(row.guesses),
            date=row.date.date() if pd.notna(row.date) else None,
            player_name=row.playerName,
        ))
    return records


class ScoreStoreClient:
    """HTTP client for the remote score store"""

    def __init__(self, url: str = STORE_URL, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """
        Initialize the store client.

        Args:
            url: Store endpoint URL
            timeout: Request timeout in seconds
            session: Optional requests session (a new one is created if omitted)
        """
        if not url:
            raise ValueError("Score store URL is not configured (set WORDLE_GOLF_STORE_URL)")
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_records(self) -> List[ScoreRecord]:
        """
        Fetch every record from the store.

        Raises:
            RemoteSyncError: If the request or response decoding fails
        """
        try:
            logger.debug(f"Fetching records from {self.url}")
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to load scores from store: {e}")
            raise RemoteSyncError("Failed to load scores from the score store") from e
        except ValueError as e:
            logger.error(f"Store returned invalid JSON: {e}")
            raise RemoteSyncError("Score store returned an invalid response") from e

        records = records_from_payload(payload)
        logger.info(f"Fetched {len(records)} records from store")
        return records

    def append_record(self, record: ScoreRecord) -> None:
        """
        Append one record to the store.

        Raises:
            RemoteSyncError: If the request fails or the store does not
                             report success
        """
        try:
            logger.info(f"Appending puzzle {record.puzzle_number} for {record.player_name}")
            response = self.session.post(self.url, json=record.to_payload(), timeout=self.timeout)
            response.raise_for_status()
            result = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to save score to store: {e}")
            raise RemoteSyncError("Failed to save score to the score store") from e
        except ValueError as e:
            logger.error(f"Store returned invalid JSON: {e}")
            raise RemoteSyncError("Score store returned an invalid response") from e

        if not isinstance(result, dict) or not result.get('success'):
            logger.error(f"Store rejected append: {result!r}")
            raise RemoteSyncError("Score store did not confirm the save")
