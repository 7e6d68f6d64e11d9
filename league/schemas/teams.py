"""Schemas for teams and team rosters."""

from pydantic import BaseModel, Field


class TeamWrite(BaseModel):
    """Create/update payload. team_name is required; presence is checked by the service."""

    team_name: str | None = Field(default=None, examples=["FC Barcelona"])
    city: str | None = Field(default=None, examples=["Barcelona"])
    coach_id: int | None = Field(default=None, description="User id of the coach")


class TeamRead(BaseModel):
    model_config = {"from_attributes": True}

    team_id: int
    team_name: str
    city: str | None = None
    coach_id: int | None = None
    coach_name: str | None = None


class RosterEntry(BaseModel):
    """Player as listed on a team roster."""

    model_config = {"from_attributes": True}

    player_id: int
    first_name: str
    last_name: str
    position: str | None = None
