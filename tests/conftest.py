"""
Shared fixtures: profile page markup and fake fetchers.
"""

import pytest

from src.scraping.errors import RetrievalError

KOREAN_LABELS = "승리42승률21.5%Top4110Top4 비율56.1%게임 수196평균 등수#4.12"
ENGLISH_LABELS = "Wins 42 Win Rate 21.5% Top 4 110 Top 4 Rate 56.1% Played 196 Avg. Place #4.12"


def render_profile(
    name="bird#biirdNA",
    tier="Diamond II 1,026 LP",
    labels=KOREAN_LABELS,
    avatar="https://cdn.lolchess.gg/avatar/bird.png",
    rank_image="https://cdn.lolchess.gg/tiers/diamond.png",
):
    """Render a minimal profile page; pass None to leave an element out."""
    parts = ['<html><body><div class="profile">']
    if avatar is not None:
        parts.append(f'<div class="avatar"><img src="{avatar}"></div>')
    if name is not None:
        parts.append(f'<div class="name">{name}</div>')
    if tier is not None:
        img = f'<img src="{rank_image}">' if rank_image is not None else ""
        parts.append(f'<div class="tier">{img}{tier}</div>')
    if labels is not None:
        parts.append(f'<div class="labels">{labels}</div>')
    parts.append("</div></body></html>")
    return "".join(parts)


@pytest.fixture
def profile_html():
    """Factory fixture for profile page markup."""
    return render_profile


class FakeFetch:
    """Serves canned pages keyed by player identifier; unknown players fail."""

    def __init__(self, pages):
        self.pages = pages
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        identifier = url.rstrip("/").split("/")[-2]
        if identifier not in self.pages:
            raise RetrievalError(f"404 for {url}")
        return self.pages[identifier]


@pytest.fixture
def fake_fetch():
    """Factory fixture building a FakeFetch from {identifier: html}."""
    return FakeFetch
