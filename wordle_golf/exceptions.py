"""
Error taxonomy for the Wordle Golf Score System.

ParseError and DuplicateEntryError are local guards raised before any
network call. RemoteSyncError wraps failures talking to the score store.
"""


class WordleGolfError(Exception):
    """Base exception for all Wordle Golf errors"""
    pass


class ParseError(WordleGolfError):
    """Raised when share text does not match the result-line grammar"""
    pass


class DuplicateEntryError(WordleGolfError):
    """Raised when a player already has a score for a puzzle"""
    pass


class RemoteSyncError(WordleGolfError):
    """Raised when fetching from or appending to the score store fails"""
    pass
