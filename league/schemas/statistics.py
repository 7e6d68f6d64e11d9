"""Schemas for match statistics (events) and derived rankings."""

from datetime import datetime

from pydantic import BaseModel, Field


class StatisticWrite(BaseModel):
    """
    Create/update payload.

    minute is accepted as a string or number so a non-numeric value reaches the
    service and is reported as a bad request.
    """

    match_id: int | None = Field(default=None, examples=[1])
    player_id: int | None = Field(default=None, examples=[1])
    event_type: str | None = Field(default=None, examples=["goal"])
    minute: int | float | str | None = Field(default=None, examples=[75])


class StatisticRead(BaseModel):
    """Event with the player's name and the match it belongs to."""

    stat_id: int
    match_id: int
    player_id: int
    event_type: str
    minute: int
    first_name: str | None = None
    last_name: str | None = None
    position: str | None = None
    team_id: int | None = None
    team_name: str | None = None
    date_played: datetime | None = None
    home_team_id: int | None = None
    away_team_id: int | None = None
    home_team_name: str | None = None
    away_team_name: str | None = None


class TopScorer(BaseModel):
    player_id: int
    first_name: str
    last_name: str
    position: str | None = None
    team_id: int
    team_name: str | None = None
    goals: int
