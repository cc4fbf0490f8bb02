"""
Golf Scoring

Modules:
- strokes: Guess count to stroke and golf term lookups
- statistics: Per-player performance statistics
- leaderboard: Players ranked by total strokes
- scorecard: Last-18-holes grid with running totals
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "strokes_for":
        from wordle_golf.golf.strokes import strokes_for
        return strokes_for
    if name == "calculate_statistics":
        from wordle_golf.golf.statistics import calculate_statistics
        return calculate_statistics
    if name == "rank_players":
        from wordle_golf.golf.leaderboard import rank_players
        return rank_players
    if name == "build_scorecard":
        from wordle_golf.golf.scorecard import build_scorecard
        return build_scorecard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
