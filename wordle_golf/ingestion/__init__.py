"""
Data Ingestion

Modules:
- share_parser: Parse pasted Wordle share text
- paste_mode: Paste-mode score submission
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_share_text":
        from wordle_golf.ingestion.share_parser import parse_share_text
        return parse_share_text
    if name == "ingest_share_text":
        from wordle_golf.ingestion.paste_mode import ingest_share_text
        return ingest_share_text
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
