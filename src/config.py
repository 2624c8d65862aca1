"""
Central configuration for the TFT Roster Leaderboard.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import os
from pathlib import Path

from src.models import RosterEntry

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
STATIC_FOLDER = PROJECT_ROOT / "public"

# --- Server Configuration ---
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))

# --- Upstream Configuration ---
UPSTREAM_HOST = "lolchess.gg"
SET_VERSION = "set15"  # Path segment for the current TFT set
DEFAULT_REGION = "na"
REQUEST_TIMEOUT = 10  # Seconds per profile retrieval
MAX_WORKERS = 4  # Concurrent profile retrievals per leaderboard
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

# CSS selectors for the profile page elements
SELECTORS = {
    "name": ".name",
    "avatar": ".avatar img",
    "tier": ".tier",
    "rank_image": ".tier img",
    "labels": ".labels",
}

# --- Rank Ordering ---
# Diamond sits above Emerald. Earlier revisions of the service had these two
# swapped (Diamond=6, Emerald=7); see DESIGN.md.
TIER_ORDINALS = {
    "Iron": 1,
    "Bronze": 2,
    "Silver": 3,
    "Gold": 4,
    "Platinum": 5,
    "Emerald": 6,
    "Diamond": 7,
    "Master": 8,
    "Grandmaster": 9,
    "Challenger": 10,
}

# Tiers at or above this ordinal have no divisions
APEX_TIER_THRESHOLD = 8

DIVISION_ADDENDS = {
    "IV": 0.25,
    "III": 0.5,
    "II": 0.75,
    "I": 1.0,
}

# --- Rosters ---
ROSTERS = {
    "main": (
        RosterEntry(identifier="bird-biird", region="na"),
        RosterEntry(identifier="Monoceros-atlas", region="na"),
        RosterEntry(identifier="babyyccee-ttv", region="na"),
        RosterEntry(identifier="ashwu-0321", region="na"),
    ),
    "secondary": (
        RosterEntry(identifier="Dishsoap-NA2", region="na"),
        RosterEntry(identifier="k3soju-000", region="na"),
        RosterEntry(identifier="Mortdog-TFT", region="na"),
        RosterEntry(identifier="Setsuko-NA1", region="na"),
    ),
}
ALLOWED_ROSTERS = frozenset(ROSTERS)

# --- Error Messages ---
EMPTY_LEADERBOARD_MESSAGE = "Failed to fetch any player data"
