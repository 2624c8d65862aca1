"""
HTTP API for the TFT Roster Leaderboard.

Routes:
    GET /api/leaderboard    Main roster, JSON array of players in rank order
    GET /api/leaderboard2   Secondary roster, same contract
    GET /                   Main leaderboard page
    GET /leaderboard2       Secondary leaderboard page

Usage:
    python -m api.server
    OR
    uvicorn api.server:app --port 3000
"""

import sys
from pathlib import Path

# Add project root to path for direct script execution
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from typing import Mapping, Optional, Sequence

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse

from src.config import HOST, PORT, ROSTERS, STATIC_FOLDER
from src.models import PlayerStats, RosterEntry
from src.ranking.leaderboard import build_leaderboard
from src.scraping.errors import EmptyLeaderboardError
from src.scraping.fetcher import Fetch
from src.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def create_app(
    rosters: Mapping[str, Sequence[RosterEntry]] = ROSTERS,
    fetch: Optional[Fetch] = None,
    static_folder: Path = STATIC_FOLDER,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        rosters: Mapping with "main" and "secondary" rosters
        fetch: Callable returning the page body for a URL (default: HTTP GET)
        static_folder: Folder holding index.html and leaderboard2.html
    """
    app = FastAPI(title="TFT Roster Leaderboard", version="1.0.0")

    def leaderboard_response(roster_name: str):
        try:
            players = build_leaderboard(rosters[roster_name], fetch=fetch)
        except EmptyLeaderboardError as e:
            logger.error(f"Leaderboard '{roster_name}' is empty: {e}")
            return JSONResponse(status_code=500, content={"error": str(e)})
        return players

    @app.get("/api/leaderboard", response_model=list[PlayerStats])
    def leaderboard():
        return leaderboard_response("main")

    @app.get("/api/leaderboard2", response_model=list[PlayerStats])
    def leaderboard2():
        return leaderboard_response("secondary")

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(static_folder / "index.html")

    @app.get("/leaderboard2", include_in_schema=False)
    def index2():
        return FileResponse(static_folder / "leaderboard2.html")

    return app


app = create_app()


def main():
    """Run the API server."""
    logger.info(f"Server running at http://localhost:{PORT}")
    for name, roster in ROSTERS.items():
        logger.info(f"  Roster '{name}': {', '.join(entry.identifier for entry in roster)}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
