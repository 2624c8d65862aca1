"""
Data models shared by the scraper, the ranking code and the HTTP API.

PlayerStats serialises with the camelCase keys the front-end pages read
(``rankImage``, ``LP``, ``winRate``...). Python code uses the snake_case
attribute names; both are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field


class RosterEntry(BaseModel):
    """One configured player on a leaderboard roster."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(min_length=1)
    region: str = "na"


class PlayerStats(BaseModel):
    """Ranking data extracted from one player's profile page."""

    model_config = ConfigDict(populate_by_name=True)

    user: str = ""
    region: str = ""
    avatar: str = ""
    rank_image: str = Field(default="", alias="rankImage")
    rank: str = ""
    lp: int = Field(default=0, ge=0, alias="LP")
    wins: int = Field(default=0, ge=0)
    win_rate: float = Field(default=0.0, ge=0, le=100, alias="winRate")
    top4_count: int = Field(default=0, ge=0, alias="top4Count")
    top4_rate: float = Field(default=0.0, ge=0, le=100, alias="top4Rate")
    games: int = Field(default=0, ge=0)
    avg_rank: float = Field(default=0.0, alias="avgRank")
    profile_url: str = Field(default="", alias="profileUrl")

    def to_json_dict(self) -> dict:
        """Return the record keyed the way the API serves it."""
        return self.model_dump(by_alias=True)


# JSON keys of PlayerStats in declaration order
PLAYER_STATS_COLUMNS = [field.alias or name for name, field in PlayerStats.model_fields.items()]
