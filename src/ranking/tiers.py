"""
Rank ordering.

A rank string such as "Diamond II" maps to a composite value: the tier
ordinal plus a fractional addend for the division. Apex tiers (Master and
above) have no divisions, so any division text on them is ignored. Players
are ordered by composite value descending, then LP descending.
"""

from functools import cmp_to_key

from src.config import APEX_TIER_THRESHOLD, DIVISION_ADDENDS, TIER_ORDINALS
from src.models import PlayerStats


def split_rank(rank: str) -> tuple[str, str]:
    """Split "Diamond II" into ("Diamond", "II"); missing division is ""."""
    parts = rank.split()
    if not parts:
        return "", ""
    division = parts[1] if len(parts) > 1 else ""
    return parts[0], division


def tier_ordinal(tier: str) -> int:
    """Ordinal of a tier name (case-insensitive), 0 for unknown tiers."""
    return TIER_ORDINALS.get(tier.strip().capitalize(), 0)


def rank_value(tier: str, division: str = "") -> float:
    """
    Composite rank value of a tier and division.

    Below the apex threshold the division adds 0.25 (IV) up to 1.0 (I);
    unknown or missing divisions add nothing. Apex tiers return their
    ordinal unchanged.
    """
    ordinal = tier_ordinal(tier)
    if ordinal >= APEX_TIER_THRESHOLD:
        return float(ordinal)
    return ordinal + DIVISION_ADDENDS.get(division.strip().upper(), 0.0)


def composite_rank_value(rank: str) -> float:
    return rank_value(*split_rank(rank))


def compare_players(a: PlayerStats, b: PlayerStats) -> int:
    """
    Comparator for leaderboard order.

    Returns a negative number when `a` ranks above `b`, positive when below,
    0 when rank value and LP are both equal.
    """
    value_a = composite_rank_value(a.rank)
    value_b = composite_rank_value(b.rank)
    if value_a != value_b:
        return -1 if value_a > value_b else 1
    return b.lp - a.lp


def sort_players(players: list[PlayerStats]) -> list[PlayerStats]:
    """Return players in leaderboard order; full ties keep their input order."""
    return sorted(players, key=cmp_to_key(compare_players))
