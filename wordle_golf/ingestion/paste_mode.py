"""
Paste-Mode Score Ingestion

This module handles submitting a Wordle result by pasting the puzzle's
share text. It parses the first line, rejects a puzzle the player already
recorded, appends the score to the remote store and reloads the snapshot.

Usage:
    python -m wordle_golf.ingestion.paste_mode

    Programmatic usage:
        from wordle_golf.ingestion.paste_mode import ingest_share_text
        result = ingest_share_text(session, text)
"""

from datetime import date
from typing import Iterable, Optional

from wordle_golf.exceptions import DuplicateEntryError, ParseError, RemoteSyncError
from wordle_golf.ingestion.share_parser import parse_share_text
from wordle_golf.models import ScoreRecord
from wordle_golf.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def check_duplicate_entry(snapshot: Iterable[ScoreRecord], player_name: str, puzzle_number: int) -> None:
    """
    Check if a player already has a score for a puzzle.

    Args:
        snapshot: Last-known records
        player_name: Player submitting
        puzzle_number: Puzzle being submitted

    Raises:
        DuplicateEntryError: If the (player, puzzle) pair already exists
    """
    for r in snapshot:
        if r.player_name == player_name and r.puzzle_number == puzzle_number:
            raise DuplicateEntryError(f"You already added puzzle {puzzle_number}!")


def ingest_share_text(session, text: str, dry_run: bool = False, today: Optional[date] = None) -> dict:
    """
    Main entry point for paste-mode ingestion.

    Args:
        session: ScoreBoardSession holding the snapshot and store
        text: Raw share text (copy-pasted)
        dry_run: If True, validate only without saving
        today: Date to record (default: today)

    Returns:
        Dictionary with:
            - success: bool
            - record: parsed ScoreRecord
            - reloaded: whether the snapshot was reloaded after saving
            - warnings: list of warning messages

    Raises:
        ParseError: If the share text is empty or malformed
        DuplicateEntryError: If the puzzle was already recorded
        RemoteSyncError: If saving to the store fails
    """
    result = {
        'success': False,
        'record': None,
        'reloaded': False,
        'warnings': [],
    }

    # Step 1: Parse the text
    logger.info("Parsing share text...")
    candidate = parse_share_text(text, today=today).unwrap()
    record = candidate.for_player(session.player_name)
    result['record'] = record
    logger.info(f"  Parsed puzzle {record.puzzle_number} with {record.guesses} guesses")

    # Step 2: Check for duplicate puzzle
    logger.info(f"Checking for duplicate puzzle for {record.player_name}...")
    check_duplicate_entry(session.snapshot, record.player_name, record.puzzle_number)
    logger.info("  No duplicate found")

    if dry_run:
        logger.info("[DRY RUN] Validation complete. No data was saved.")
        result['success'] = True
        return result

    # Step 3: Append and reload
    logger.info("Saving score to store...")
    submitted = session.submit(record)
    result.update(submitted)
    for w in result['warnings']:
        logger.warning(f"  Warning: {w}")

    logger.info(f"Ingestion complete for puzzle {record.puzzle_number}")
    return result


def main():
    """CLI interface for paste-mode ingestion."""
    import sys

    from wordle_golf.config import PLAYER_NAME
    from wordle_golf.golf.leaderboard import leaderboard_frame
    from wordle_golf.golf.strokes import format_strokes, strokes_for, term_for
    from wordle_golf.session import ScoreBoardSession
    from wordle_golf.store import ScoreStoreClient

    print("=" * 60)
    print("Wordle Golf Paste-Mode Ingestion")
    print("=" * 60)

    player_name = PLAYER_NAME or input("Player name: ").strip()

    try:
        session = ScoreBoardSession(ScoreStoreClient(), player_name)
        print("\nLoading scores...")
        session.reload()
    except ValueError as e:
        print(f"\nCONFIGURATION ERROR: {e}")
        sys.exit(1)
    except RemoteSyncError as e:
        print(f"\nSYNC ERROR: {e}")
        sys.exit(1)

    print(f"Playing as: {session.player_name}")
    print("\nPaste your Wordle share result below.")
    print("When finished, press Enter twice (empty line) to process.\n")
    print("-" * 60)

    lines = []
    empty_count = 0

    try:
        while True:
            line = input()
            if line == "":
                empty_count += 1
                if empty_count >= 2:
                    break
                lines.append(line)
            else:
                empty_count = 0
                lines.append(line)
    except EOFError:
        pass

    text = "\n".join(lines)

    if not text.strip():
        print("\nNo input received. Exiting.")
        sys.exit(1)

    print("-" * 60)
    print("\nProcessing input...\n")

    try:
        # First do a dry run to validate
        print("Step 1: Validation (dry run)")
        result = ingest_share_text(session, text, dry_run=True)
        record = result['record']
        strokes = strokes_for(record.guesses)

        # Ask for confirmation
        print(f"\nReady to add puzzle {record.puzzle_number}: "
              f"{term_for(record.guesses)} ({format_strokes(strokes)}).")
        confirm = input("Proceed? [y/N]: ").strip().lower()

        if confirm != 'y':
            print("Submission cancelled.")
            sys.exit(0)

        # Do the actual ingestion
        print("\nStep 2: Submission")
        result = ingest_share_text(session, text, dry_run=False)

        print("\n" + "=" * 60)
        print("SUCCESS!")
        print(f"  Puzzle: {record.puzzle_number}")
        print(f"  Strokes: {format_strokes(strokes)}")
        if result['warnings']:
            print(f"  Warnings: {len(result['warnings'])}")
        print("=" * 60)
        print("\n" + leaderboard_frame(session.leaderboard()).to_string(index=False))

    except ParseError as e:
        print(f"\nPARSE ERROR: {e}")
        sys.exit(1)
    except DuplicateEntryError as e:
        print(f"\nDUPLICATE ERROR: {e}")
        sys.exit(1)
    except RemoteSyncError as e:
        print(f"\nSYNC ERROR: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nUNEXPECTED ERROR: {e}")
        raise


if __name__ == "__main__":
    main()
