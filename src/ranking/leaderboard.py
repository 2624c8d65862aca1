"""
Leaderboard Aggregation

Scrapes every player on a roster, drops the ones that failed, and returns
the rest in rank order (composite rank value, then LP, both descending).
Profiles are fetched concurrently; completion order never affects the result.

Usage:
    python -m src.ranking.leaderboard [main|secondary]
    OR
    from src.ranking.leaderboard import build_leaderboard
"""

import sys
from pathlib import Path

# Enable both `python src/ranking/leaderboard.py` and `python -m src.ranking.leaderboard` execution.
# Required for src.config/src.utils imports to resolve correctly.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional, Sequence

import pandas as pd

from src.config import EMPTY_LEADERBOARD_MESSAGE, MAX_WORKERS, ROSTERS
from src.models import PLAYER_STATS_COLUMNS, PlayerStats, RosterEntry
from src.ranking.tiers import composite_rank_value, sort_players
from src.scraping.errors import EmptyLeaderboardError
from src.scraping.fetcher import Fetch, scrape_player
from src.utils import setup_logging, validate_roster_name

# --- Module Logger ---
logger = setup_logging(__name__)


def build_leaderboard(
    roster: Sequence[RosterEntry],
    fetch: Optional[Fetch] = None,
    max_workers: int = MAX_WORKERS,
) -> list[PlayerStats]:
    """
    Scrape a roster and return its players in leaderboard order.

    Args:
        roster: Players to include
        fetch: Callable returning the page body for a URL (default: HTTP GET)
        max_workers: Maximum number of concurrent profile retrievals

    Returns:
        List of PlayerStats sorted by rank value then LP, both descending

    Raises:
        EmptyLeaderboardError: If no roster entry produced player data
    """
    logger.info(f"Fetching leaderboard data for {len(roster)} players...")

    scrape = partial(scrape_player, fetch=fetch)
    if len(roster) > 1 and max_workers > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(roster))) as executor:
            # map() yields in roster order regardless of completion order
            results = list(executor.map(scrape, roster))
    else:
        results = [scrape(entry) for entry in roster]

    players = [stats for stats in results if stats is not None]
    dropped = len(roster) - len(players)
    if dropped:
        logger.warning(f"  Dropped {dropped} of {len(roster)} players")

    if not players:
        raise EmptyLeaderboardError(EMPTY_LEADERBOARD_MESSAGE)

    logger.info(f"  Ranked {len(players)} players")
    return sort_players(players)


def leaderboard_to_frame(players: list[PlayerStats]) -> pd.DataFrame:
    """
    Tabulate a sorted leaderboard.

    Returns:
        DataFrame with a 1-based 'position' column, the PlayerStats JSON
        columns and the composite 'rankValue' used for ordering
    """
    df = pd.DataFrame([p.to_json_dict() for p in players], columns=PLAYER_STATS_COLUMNS)
    df.insert(0, 'position', range(1, len(df) + 1))
    df['rankValue'] = df['rank'].map(composite_rank_value)
    return df


def main(argv: Optional[list[str]] = None) -> int:
    """CLI interface: print one roster's leaderboard."""
    argv = sys.argv[1:] if argv is None else argv
    roster_name = argv[0] if argv else "main"

    try:
        validate_roster_name(roster_name)
        players = build_leaderboard(ROSTERS[roster_name])
    except ValueError as e:
        print(f"\nINPUT ERROR: {e}")
        return 1
    except EmptyLeaderboardError as e:
        print(f"\nLEADERBOARD ERROR: {e}")
        return 1

    df = leaderboard_to_frame(players)
    print("=" * 60)
    print(f"Leaderboard: {roster_name}")
    print("=" * 60)
    print(df[['position', 'user', 'rank', 'LP', 'games', 'winRate', 'avgRank']].to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
