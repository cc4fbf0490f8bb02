"""
Shared utilities for the Wordle Golf Score System.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Validation ---
def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in characters

    Raises:
        ValueError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} characters. "
            f"Maximum allowed: {max_size:,} characters"
        )


def normalize_player_name(name) -> str:
    """Collapse internal whitespace and trim a player name."""
    if name is None:
        return ""
    return re.sub(r"\s+", " ", str(name)).strip()


__all__ = [
    # Logging
    'setup_logging',
    # Validation
    'validate_input_size',
    'normalize_player_name',
]
