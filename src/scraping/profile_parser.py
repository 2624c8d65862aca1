"""
Profile Page Parser

Turns the HTML of one lolchess.gg profile page into a PlayerStats record.
Every field is extracted independently: a field whose pattern does not match
keeps its default and adds a warning, the rest of the record is still built.

Usage:
    from src.scraping.profile_parser import parse_profile_html
    stats, warnings = parse_profile_html(html, region="na", profile_url=url)
"""

import sys
from pathlib import Path

# Enable both `python src/scraping/profile_parser.py` and `python -m src.scraping.profile_parser` execution.
# Required for src.config/src.utils imports to resolve correctly.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from bs4 import BeautifulSoup

from src.config import SELECTORS
from src.models import PlayerStats
from src.scraping.errors import ProfileParseError
from src.utils import (
    USER_RE,
    USER_FALLBACK_SEPARATOR,
    TIER_PATTERNS,
    LP_PATTERNS,
    WINS_PATTERNS,
    WIN_RATE_PATTERNS,
    TOP4_COUNT_PATTERNS,
    TOP4_RATE_PATTERNS,
    GAMES_PATTERNS,
    AVG_RANK_PATTERNS,
    first_match,
    parse_int,
)

# Elements whose complete absence means the document is not a profile page
REQUIRED_ANY = ("name", "tier", "labels")


def extract_user(name_text: str) -> str:
    """Display name with its "#tag" discriminator, minus the region suffix."""
    name_text = name_text.strip()
    match = USER_RE.match(name_text)
    if match:
        return match.group(1).strip()
    return name_text.split(USER_FALLBACK_SEPARATOR)[0].strip()


def extract_rank(tier_text: str) -> str:
    """
    Extract the tier name, with its division when one is shown.

    Returns "" when the tier block holds no letters at all.
    """
    match = first_match(TIER_PATTERNS, tier_text)
    if not match:
        return ""
    # Only the tier+division pattern captures two groups
    return " ".join(group for group in match.groups() if group)


def extract_int(patterns, text: str) -> int | None:
    match = first_match(patterns, text)
    return parse_int(match.group(1)) if match else None


def extract_float(patterns, text: str) -> float | None:
    match = first_match(patterns, text)
    return float(match.group(1)) if match else None


def extract_percentage(patterns, text: str) -> float | None:
    """Like extract_float, but values outside 0-100 count as no match."""
    value = extract_float(patterns, text)
    if value is None or not 0 <= value <= 100:
        return None
    return value


def _select_text(soup: BeautifulSoup, key: str) -> str:
    element = soup.select_one(SELECTORS[key])
    return element.get_text() if element else ""


def _select_src(soup: BeautifulSoup, key: str) -> str:
    element = soup.select_one(SELECTORS[key])
    if element is None:
        return ""
    return element.get("src") or ""


def parse_profile_html(html: str, region: str, profile_url: str = "") -> tuple[PlayerStats, list[str]]:
    """
    Parse a profile page into a PlayerStats record.

    Args:
        html: Raw profile page markup
        region: Region the profile was requested for
        profile_url: Location the markup was retrieved from

    Returns:
        Tuple of (PlayerStats, list of warning messages for fields that
        fell back to their default)

    Raises:
        ProfileParseError: If the document is empty or holds none of the
            profile elements
    """
    if not html or not html.strip():
        raise ProfileParseError(f"Empty document for {profile_url or region}")

    soup = BeautifulSoup(html, "html.parser")
    if not any(soup.select_one(SELECTORS[key]) for key in REQUIRED_ANY):
        raise ProfileParseError(f"No profile elements found in document for {profile_url or region}")

    warnings = []

    name_text = _select_text(soup, "name")
    tier_text = _select_text(soup, "tier")
    labels_text = _select_text(soup, "labels")

    user = extract_user(name_text)
    if not user:
        warnings.append("No user name found")

    rank = extract_rank(tier_text)
    if not rank:
        warnings.append("No rank found in tier block")

    lp = extract_int(LP_PATTERNS, tier_text)
    if lp is None:
        warnings.append(f"No LP found in tier block {tier_text.strip()!r}")

    fields = {
        "wins": extract_int(WINS_PATTERNS, labels_text),
        "win_rate": extract_percentage(WIN_RATE_PATTERNS, labels_text),
        "top4_count": extract_int(TOP4_COUNT_PATTERNS, labels_text),
        "top4_rate": extract_percentage(TOP4_RATE_PATTERNS, labels_text),
        "games": extract_int(GAMES_PATTERNS, labels_text),
        "avg_rank": extract_float(AVG_RANK_PATTERNS, labels_text),
    }
    missing = [field for field, value in fields.items() if value is None]
    if missing:
        warnings.append(f"Missing stats: {', '.join(missing)}")

    stats = PlayerStats(
        user=user,
        region=region.upper(),
        avatar=_select_src(soup, "avatar"),
        rank_image=_select_src(soup, "rank_image"),
        rank=rank,
        lp=lp or 0,
        profile_url=profile_url,
        **{field: value for field, value in fields.items() if value is not None},
    )
    return stats, warnings
