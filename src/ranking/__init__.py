"""
Leaderboard Ranking

Modules:
- tiers: Tier/division rank values and the player comparator
- leaderboard: Roster aggregation and sorting
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "sort_players":
        from src.ranking.tiers import sort_players
        return sort_players
    if name == "build_leaderboard":
        from src.ranking.leaderboard import build_leaderboard
        return build_leaderboard
    if name == "run_leaderboard":
        from src.ranking.leaderboard import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
