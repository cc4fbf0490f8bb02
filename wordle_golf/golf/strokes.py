"""
Golf score lookups.

Guess counts map onto a par-4 hole: four guesses is par, each guess fewer
is a stroke under, each guess more is a stroke over. A failed puzzle
(stored as 7 guesses) costs more than any solved one.
"""

from wordle_golf.config import FAILED_GUESSES

STROKES_BY_GUESSES = {
    1: -3,
    2: -2,
    3: -1,
    4: 0,
    5: 1,
    6: 2,
    7: 4,
}

TERMS_BY_GUESSES = {
    1: "Hole in One",
    2: "Eagle",
    3: "Birdie",
    4: "Par",
    5: "Bogey",
    6: "Double Bogey",
    7: "No Submission",
}

UNKNOWN_TERM = "Unknown"


def strokes_for(guesses) -> int:
    """Strokes for a guess count; anything outside 1..7 scores 0."""
    return STROKES_BY_GUESSES.get(guesses, 0)


def term_for(guesses) -> str:
    """Golf term for a guess count, or "Unknown"."""
    return TERMS_BY_GUESSES.get(guesses, UNKNOWN_TERM)


def format_strokes(strokes: int) -> str:
    """Signed display form: +2, 0, -3."""
    return f"+{strokes}" if strokes > 0 else str(strokes)


def result_label(guesses: int) -> str:
    """Share-style result label, e.g. 4/6 or X/6."""
    if guesses == FAILED_GUESSES:
        return "X/6"
    return f"{guesses}/6"


def scoring_guide() -> list[dict]:
    """
    Legend rows for the scoring guide, best result first.

    Returns:
        List of dicts with keys: guesses, term, strokes, result
    """
    return [
        {
            'guesses': guesses,
            'term': term_for(guesses),
            'strokes': format_strokes(strokes),
            'result': result_label(guesses),
        }
        for guesses, strokes in sorted(STROKES_BY_GUESSES.items())
    ]
