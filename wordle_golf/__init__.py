"""
Wordle Golf Score System - Core Package

This package contains the core modules for:
- Golf scoring, statistics, leaderboard and scorecard (wordle_golf.golf)
- Share-text ingestion (wordle_golf.ingestion)
- Remote score store client and snapshot session
- Shared configuration and utilities
"""

from wordle_golf.config import *
