"""Schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, deployment environment, and database reachability."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    version: str = Field(description="API version reported in the OpenAPI document")
    environment: str = Field(description="APP_ENV of this deployment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether the database answered SELECT 1",
    )
