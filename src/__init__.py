"""
TFT Roster Leaderboard - Core Package

This package contains the core modules for:
- Profile scraping and parsing (src.scraping)
- Rank ordering and leaderboard aggregation (src.ranking)
- Shared configuration, models and utilities
"""

from src.config import *
