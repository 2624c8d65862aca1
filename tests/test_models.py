"""
Tests for the shared data models.
"""

import pytest
from pydantic import ValidationError

from src.models import PLAYER_STATS_COLUMNS, PlayerStats, RosterEntry


class TestPlayerStats:
    """Tests for PlayerStats serialisation."""

    def test_defaults(self):
        stats = PlayerStats()
        assert stats.user == ""
        assert stats.lp == 0
        assert stats.win_rate == 0.0

    def test_json_round_trip(self):
        stats = PlayerStats(
            user="bird#biird",
            region="NA",
            avatar="https://cdn/a.png",
            rank_image="https://cdn/d.png",
            rank="Diamond II",
            lp=1026,
            wins=42,
            win_rate=21.5,
            top4_count=110,
            top4_rate=56.1,
            games=196,
            avg_rank=4.12,
            profile_url="https://lolchess.gg/profile/na/bird-biird/set15",
        )
        restored = PlayerStats.model_validate_json(stats.model_dump_json(by_alias=True))

        assert restored == stats
        assert isinstance(restored.lp, int)
        assert isinstance(restored.win_rate, float)

    def test_accepts_json_keys(self):
        stats = PlayerStats.model_validate({"LP": 12, "winRate": 50, "profileUrl": "u"})
        assert stats.lp == 12
        assert stats.win_rate == 50.0
        assert stats.profile_url == "u"

    def test_negative_lp_rejected(self):
        with pytest.raises(ValidationError):
            PlayerStats(lp=-1)

    @pytest.mark.parametrize("rate", [-0.1, 100.5])
    def test_rates_outside_percentage_range_rejected(self, rate):
        with pytest.raises(ValidationError):
            PlayerStats(win_rate=rate)
        with pytest.raises(ValidationError):
            PlayerStats(top4_rate=rate)

    def test_columns_follow_json_keys(self):
        assert PLAYER_STATS_COLUMNS[:3] == ["user", "region", "avatar"]
        assert "LP" in PLAYER_STATS_COLUMNS
        assert list(PlayerStats().to_json_dict()) == PLAYER_STATS_COLUMNS


class TestRosterEntry:
    """Tests for RosterEntry."""

    def test_default_region(self):
        assert RosterEntry(identifier="bird-biird").region == "na"

    def test_frozen(self):
        entry = RosterEntry(identifier="bird-biird")
        with pytest.raises(ValidationError):
            entry.identifier = "other"

    def test_empty_identifier_rejected(self):
        with pytest.raises(ValidationError):
            RosterEntry(identifier="")
