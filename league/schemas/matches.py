"""Schemas for matches."""

from datetime import datetime

from pydantic import BaseModel, Field


class MatchWrite(BaseModel):
    """Create/update payload. Both teams and date_played are required; checked by the service."""

    home_team_id: int | None = Field(default=None, examples=[1])
    away_team_id: int | None = Field(default=None, examples=[2])
    date_played: datetime | None = Field(default=None, examples=["2025-05-15T15:00:00"])
    score_home: int | None = Field(default=None, examples=[2])
    score_away: int | None = Field(default=None, examples=[1])


class MatchRead(BaseModel):
    model_config = {"from_attributes": True}

    match_id: int
    home_team_id: int
    away_team_id: int
    date_played: datetime
    score_home: int | None = None
    score_away: int | None = None
    home_team_name: str | None = None
    away_team_name: str | None = None
