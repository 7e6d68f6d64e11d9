"""Match CRUD, upcoming fixtures, and per-match statistics."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from league.core.database import get_db
from league.schemas.common import MessageResponse
from league.schemas.matches import MatchRead, MatchWrite
from league.schemas.statistics import StatisticRead
from league.services import matches as match_service

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]


@router.get("", response_model=list[MatchRead])
def list_matches(db: DB) -> list[MatchRead]:
    """List all matches, most recent first."""
    return [MatchRead.model_validate(m) for m in match_service.list_matches(db)]


# Fixed paths are registered before /{match_id} so they are not read as ids.
@router.get("/upcoming", response_model=list[MatchRead])
def list_upcoming_matches(db: DB) -> list[MatchRead]:
    """Matches scheduled after the current time, soonest first."""
    return [MatchRead.model_validate(m) for m in match_service.list_upcoming_matches(db)]


@router.get("/team/{team_id}", response_model=list[MatchRead])
def list_matches_for_team(team_id: int, db: DB) -> list[MatchRead]:
    """Home and away matches of a team."""
    return [MatchRead.model_validate(m) for m in match_service.list_matches_for_team(db, team_id)]


@router.get("/{match_id}", response_model=MatchRead)
def get_match(match_id: int, db: DB) -> MatchRead:
    return MatchRead.model_validate(match_service.get_match(db, match_id))


@router.post("", response_model=MatchRead, status_code=status.HTTP_201_CREATED)
def create_match(body: MatchWrite, db: DB) -> MatchRead:
    """Create a match. home_team_id, away_team_id and date_played are required."""
    return MatchRead.model_validate(match_service.create_match(db, body))


@router.put("/{match_id}", response_model=MatchRead)
def update_match(match_id: int, body: MatchWrite, db: DB) -> MatchRead:
    return MatchRead.model_validate(match_service.update_match(db, match_id, body))


@router.delete("/{match_id}", response_model=MessageResponse)
def delete_match(match_id: int, db: DB) -> MessageResponse:
    return MessageResponse(**match_service.delete_match(db, match_id))


@router.get("/{match_id}/stats", response_model=list[StatisticRead])
def get_match_stats(match_id: int, db: DB) -> list[StatisticRead]:
    """Events of a match ordered by minute."""
    return match_service.get_match_stats(db, match_id)
