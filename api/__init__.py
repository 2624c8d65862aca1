"""
TFT Roster Leaderboard API Package.

This package contains the HTTP boundary:
- server: FastAPI application serving the leaderboards and static pages
"""

__version__ = "1.0.0"
