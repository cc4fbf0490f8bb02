"""
Share Text Parsing

Turns the text a player copies from the puzzle's "Share" button into a
candidate score. Only the first line is read:

    Wordle 1,234 4/6
    (emoji grid, ignored)

Parsing never raises on bad input. parse_share_text() returns a ParseResult
tagged "empty", "invalid" or "ok"; callers that want exception flow use
ParseResult.unwrap(), which raises ParseError.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from wordle_golf.config import FAILED_GUESSES, MAX_INPUT_SIZE
from wordle_golf.exceptions import ParseError
from wordle_golf.models import ScoreCandidate
from wordle_golf.utils import validate_input_size

# Result line: Wordle <number> <1-6|X>/6 (number may be grouped: 1,234 or 1.234).
# Digits are ASCII only.
SHARE_LINE_RE = re.compile(
    r"\bWordle\s+(\d{1,3}(?:[,.]\d{3})+|\d+)\s+([1-6X])/6(?!\d)",
    re.IGNORECASE | re.ASCII,
)
GROUPING_RE = re.compile(r"[,.]")

STATUS_EMPTY = "empty"
STATUS_INVALID = "invalid"
STATUS_OK = "ok"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing share text."""

    status: str
    candidate: Optional[ScoreCandidate] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def unwrap(self) -> ScoreCandidate:
        """Return the candidate or raise ParseError."""
        if self.status != STATUS_OK:
            raise ParseError(self.error)
        return self.candidate


def parse_puzzle_number(raw: str) -> int:
    """Drop grouping separators and parse: "1,234" -> 1234."""
    return int(GROUPING_RE.sub("", raw))


def parse_result_token(token: str) -> int:
    """Guess count for a result token; "X" is a failed puzzle."""
    if token.upper() == "X":
        return FAILED_GUESSES
    return int(token)


def parse_share_text(text: Optional[str], today: Optional[date] = None) -> ParseResult:
    """
    Parse pasted share text into a candidate score.

    Args:
        text: Raw pasted text (may be multi-line)
        today: Date to stamp on the candidate (default: date.today())

    Returns:
        ParseResult with status "empty", "invalid" or "ok"
    """
    if text is None or not text.strip():
        return ParseResult(STATUS_EMPTY, error="Paste your Wordle share result first")

    try:
        validate_input_size(text, MAX_INPUT_SIZE)
    except ValueError as e:
        return ParseResult(STATUS_INVALID, error=str(e))

    first_line = text.strip().splitlines()[0]
    match = SHARE_LINE_RE.search(first_line)
    if not match:
        return ParseResult(STATUS_INVALID, error="Invalid Wordle share format")

    number_raw, token = match.groups()
    puzzle_number = parse_puzzle_number(number_raw)
    if puzzle_number <= 0:
        return ParseResult(STATUS_INVALID, error=f"Invalid puzzle number: {number_raw}")

    candidate = ScoreCandidate(
        puzzle_number=puzzle_number,
        guesses=parse_result_token(token),
        date=today or date.today(),
    )
    return ParseResult(STATUS_OK, candidate=candidate)
