"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from api.server import create_app
from src.models import RosterEntry

from conftest import FakeFetch, render_profile

ROSTERS = {
    "main": (
        RosterEntry(identifier="low"),
        RosterEntry(identifier="high"),
        RosterEntry(identifier="missing"),
    ),
    "secondary": (
        RosterEntry(identifier="gone-1"),
        RosterEntry(identifier="gone-2"),
    ),
}

PAGES = {
    "low": render_profile(name="low#1NA", tier="Silver III 40 LP"),
    "high": render_profile(name="high#2NA", tier="Grandmaster 650 LP"),
}


@pytest.fixture
def client():
    return TestClient(create_app(rosters=ROSTERS, fetch=FakeFetch(PAGES)))


class TestLeaderboardEndpoints:
    """Tests for /api/leaderboard and /api/leaderboard2."""

    def test_sorted_players(self, client):
        response = client.get("/api/leaderboard")

        assert response.status_code == 200
        body = response.json()
        assert [p["user"] for p in body] == ["high#2", "low#1"]

    def test_camel_case_keys(self, client):
        body = client.get("/api/leaderboard").json()
        assert set(body[0]) == {
            "user", "region", "avatar", "rankImage", "rank", "LP", "wins", "winRate",
            "top4Count", "top4Rate", "games", "avgRank", "profileUrl",
        }
        assert body[0]["LP"] == 650
        assert body[0]["region"] == "NA"

    def test_empty_leaderboard_is_500(self, client):
        response = client.get("/api/leaderboard2")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch any player data"}

    def test_failure_does_not_break_next_request(self, client):
        assert client.get("/api/leaderboard2").status_code == 500
        assert client.get("/api/leaderboard").status_code == 200


class TestStaticPages:
    """Tests for the static pages."""

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "/api/leaderboard" in response.text

    def test_leaderboard2(self, client):
        response = client.get("/leaderboard2")
        assert response.status_code == 200
        assert "/api/leaderboard2" in response.text

    @pytest.mark.parametrize("path", ["/", "/leaderboard2"])
    def test_rows_built_without_html_injection(self, client, path):
        text = client.get(path).text
        assert "innerHTML" not in text
        assert "textContent" in text
