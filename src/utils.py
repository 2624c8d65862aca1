"""
Shared utilities for the TFT Roster Leaderboard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import sys
from pathlib import Path

# Enable both `python src/utils.py` and `python -m src.utils` execution modes.
# This ensures src.config imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging
import re

from src.config import ALLOWED_ROSTERS

# --- Shared Regex Patterns for Profile Parsing ---
# Each field has an ordered tuple of patterns; the first one that matches wins.

# Display name: everything up to "#" plus the tag, stopping at the region suffix
USER_RE = re.compile(r"^([^#]+#[^N]+)")
# Known limitation: names that contain "NA" are truncated by this fallback
USER_FALLBACK_SEPARATOR = "NA"

# Tier block, e.g. "Diamond II 1,026 LP" or "Challenger 500 LP"
TIER_PATTERNS = (
    re.compile(r"\b([A-Za-z]+)\s+(IV|III|II|I)(?![A-Za-z])"),
    re.compile(r"\b(Grandmaster|Master|Challenger)\b"),
    re.compile(r"^\s*([A-Za-z]+)"),
)

LP_PATTERNS = (
    re.compile(r"(\d{1,3}(?:[,.]\d{3})+)\s*LP"),
    re.compile(r"(\d+)\s*LP"),
    re.compile(r"LP\s*(\d{1,3}(?:[,.]\d{3})+)"),
    re.compile(r"LP\s*(\d+)"),
)

# Labels block. Korean labels first, English second.
# 승리 = wins, 승률 = win rate, 비율 = rate, 게임 수 = games, 평균 등수 = average placement
WINS_PATTERNS = (
    re.compile(r"승리\s*(\d[\d,]*)"),
    re.compile(r"\bWins\s*(\d[\d,]*)"),
)
WIN_RATE_PATTERNS = (
    re.compile(r"승률\s*(\d+(?:\.\d+)?)\s*%"),
    re.compile(r"Win\s*Rate\s*(\d+(?:\.\d+)?)\s*%"),
)
TOP4_COUNT_PATTERNS = (
    re.compile(r"Top4\s*(\d[\d,]*)"),
    re.compile(r"Top\s4\s*(\d[\d,]*)"),
)
TOP4_RATE_PATTERNS = (
    re.compile(r"Top\s?4\s*비율\s*(\d+(?:\.\d+)?)\s*%"),
    re.compile(r"Top\s?4\s*Rate\s*(\d+(?:\.\d+)?)\s*%"),
)
GAMES_PATTERNS = (
    re.compile(r"게임\s*수\s*(\d[\d,]*)"),
    re.compile(r"\b(?:Played|Games)\s*(\d[\d,]*)"),
)
AVG_RANK_PATTERNS = (
    re.compile(r"평균\s*등수\s*#?\s*(\d+(?:\.\d+)?)"),
    re.compile(r"Avg\.?\s*(?:Place|Rank)\s*#?\s*(\d+(?:\.\d+)?)"),
)


def first_match(patterns, text: str) -> re.Match | None:
    """Return the match of the first pattern in `patterns` that hits `text`."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match
    return None


def parse_int(value: str) -> int:
    """Parse an integer that may contain grouping separators ("1,026")."""
    return int(re.sub(r"[,.\s]", "", value), 10)


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
def validate_roster_name(roster: str) -> None:
    """
    Validate that a roster name is configured.

    Args:
        roster: Roster name to validate

    Raises:
        ValueError: If roster name is not in ALLOWED_ROSTERS
    """
    if roster not in ALLOWED_ROSTERS:
        raise ValueError(
            f"Invalid roster: '{roster}'. "
            f"Allowed values: {', '.join(sorted(ALLOWED_ROSTERS))}"
        )


__all__ = [
    # Logging
    'setup_logging',
    # Validation
    'validate_roster_name',
    # Profile parsing
    'USER_RE',
    'USER_FALLBACK_SEPARATOR',
    'TIER_PATTERNS',
    'LP_PATTERNS',
    'WINS_PATTERNS',
    'WIN_RATE_PATTERNS',
    'TOP4_COUNT_PATTERNS',
    'TOP4_RATE_PATTERNS',
    'GAMES_PATTERNS',
    'AVG_RANK_PATTERNS',
    'first_match',
    'parse_int',
]
