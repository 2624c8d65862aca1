"""
Profile Scraping

Modules:
- profile_parser: Extract PlayerStats from a profile page
- fetcher: Retrieve profile pages from the upstream site
- errors: Scraping exception hierarchy
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_profile_html":
        from src.scraping.profile_parser import parse_profile_html
        return parse_profile_html
    if name == "scrape_player":
        from src.scraping.fetcher import scrape_player
        return scrape_player
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
