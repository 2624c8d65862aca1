"""Exceptions raised while scraping profiles and building leaderboards."""


class ScrapeError(Exception):
    """Base exception for scraping errors"""
    pass


class RetrievalError(ScrapeError):
    """Raised when a profile page could not be retrieved (timeout, transport, non-2xx)"""
    pass


class ProfileParseError(ScrapeError):
    """Raised when a retrieved document is empty or is not a profile page"""
    pass


class EmptyLeaderboardError(ScrapeError):
    """Raised when no roster entry produced player data"""
    pass
