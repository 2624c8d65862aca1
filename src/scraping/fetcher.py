"""
Profile Fetcher

Retrieves lolchess.gg profile pages and hands them to the profile parser.
The fetch callable is injectable so the leaderboard code and the tests can
swap the network out.

Usage:
    from src.scraping.fetcher import scrape_player
    stats = scrape_player(RosterEntry(identifier="bird-biird"))
"""

import sys
from pathlib import Path

# Enable both `python src/scraping/fetcher.py` and `python -m src.scraping.fetcher` execution.
# Required for src.config/src.utils imports to resolve correctly.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from typing import Callable, Optional
from urllib.parse import quote

import requests

from src.config import (
    UPSTREAM_HOST,
    SET_VERSION,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from src.models import PlayerStats, RosterEntry
from src.scraping.errors import ProfileParseError, RetrievalError
from src.scraping.profile_parser import parse_profile_html
from src.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# A fetch takes a URL and returns the response body, raising RetrievalError on failure
Fetch = Callable[[str], str]


def build_profile_url(identifier: str, region: str, set_version: str = SET_VERSION) -> str:
    """Build the upstream profile URL for one player."""
    if not identifier:
        raise ValueError("Player identifier must not be empty")
    return f"https://{UPSTREAM_HOST}/profile/{region.lower()}/{quote(identifier, safe='-_.')}/{set_version}"


def fetch_profile_html(url: str, timeout: float = REQUEST_TIMEOUT, session: Optional[requests.Session] = None) -> str:
    """
    Retrieve a profile page.

    Args:
        url: Profile page URL
        timeout: Seconds before the request is abandoned
        session: Optional requests session to reuse

    Returns:
        Response body text

    Raises:
        RetrievalError: On timeout, transport failure or a non-2xx response
    """
    client = session or requests
    try:
        response = client.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as e:
        raise RetrievalError(f"Failed to retrieve {url}: {e}") from e
    return response.text


def scrape_player(entry: RosterEntry, fetch: Optional[Fetch] = None) -> Optional[PlayerStats]:
    """
    Fetch and parse one roster entry.

    Retrieval and parse failures are logged and reported as None so the
    caller can drop the player from this leaderboard.

    Args:
        entry: Roster entry to scrape
        fetch: Callable returning the page body for a URL (default: HTTP GET)

    Returns:
        PlayerStats, or None if the profile could not be retrieved or parsed
    """
    fetch = fetch or fetch_profile_html
    url = build_profile_url(entry.identifier, entry.region)

    logger.info(f"Scraping data for {entry.identifier} ({entry.region.upper()})...")
    try:
        html = fetch(url)
        stats, warnings = parse_profile_html(html, entry.region, profile_url=url)
    except (RetrievalError, ProfileParseError, OSError) as e:
        # OSError covers builtin transport errors (ConnectionError, TimeoutError) from injected fetchers
        logger.warning(f"  Skipping {entry.identifier}: {e}")
        return None

    for w in warnings:
        logger.warning(f"  {entry.identifier}: {w}")
    logger.info(f"  {stats.user or entry.identifier}: {stats.rank or 'Unranked'} {stats.lp} LP")
    return stats
