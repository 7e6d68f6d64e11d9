"""Schemas for players."""

from pydantic import BaseModel, Field


class PlayerWrite(BaseModel):
    """Create/update payload. Names and team_id are required; checked by the service."""

    first_name: str | None = Field(default=None, examples=["Lionel"])
    last_name: str | None = Field(default=None, examples=["Messi"])
    position: str | None = Field(default=None, examples=["Forward"])
    team_id: int | None = Field(default=None, examples=[1])


class PlayerRead(BaseModel):
    model_config = {"from_attributes": True}

    player_id: int
    first_name: str
    last_name: str
    position: str | None = None
    team_id: int
    team_name: str | None = None
