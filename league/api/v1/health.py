"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from league.core.config import settings
from league.core.database import check_db_connected, get_db
from league.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(request: Request, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report service status and whether the database answers a trivial query."""
    return HealthResponse(
        version=request.app.version,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
