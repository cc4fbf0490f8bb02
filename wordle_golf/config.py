"""
Central configuration for the Wordle Golf Score System.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
Deployment-specific values are read from environment variables.
"""

import os

# --- Remote Score Store ---
# Web endpoint that returns all records on GET and appends one on POST
STORE_URL = os.environ.get("WORDLE_GOLF_STORE_URL", "")
REQUEST_TIMEOUT = float(os.environ.get("WORDLE_GOLF_REQUEST_TIMEOUT", "15"))

# --- Identity ---
# Name recorded on every score submitted from this installation
PLAYER_NAME = os.environ.get("WORDLE_GOLF_PLAYER_NAME", "").strip()

# --- Puzzle Rules ---
MAX_GUESSES = 6  # Guesses allowed by the puzzle
FAILED_GUESSES = 7  # Sentinel stored for an unsolved puzzle ("X/6")
GUESS_BUCKETS = FAILED_GUESSES  # Distribution buckets: 1..6 plus failure

# --- Scorecard ---
SCORECARD_HOLES = 18  # Most recent puzzles shown on the scorecard

# --- Leaderboard Tiers ---
# Ranks 1-3 get their own tier, everyone else is "field"
PODIUM_TIERS = {1: "gold", 2: "silver", 3: "bronze"}
FIELD_TIER = "field"

# --- Input Validation ---
MAX_INPUT_SIZE = 5_000  # Maximum pasted share text size in characters
