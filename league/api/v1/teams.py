"""Team CRUD and team roster."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from league.core.database import get_db
from league.schemas.common import MessageResponse
from league.schemas.teams import RosterEntry, TeamRead, TeamWrite
from league.services import teams as team_service

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]


@router.get("", response_model=list[TeamRead])
def list_teams(db: DB) -> list[TeamRead]:
    """List all teams ordered by name, with the coach's username."""
    return [TeamRead.model_validate(t) for t in team_service.list_teams(db)]


@router.get("/{team_id}", response_model=TeamRead)
def get_team(team_id: int, db: DB) -> TeamRead:
    return TeamRead.model_validate(team_service.get_team(db, team_id))


@router.post("", response_model=TeamRead, status_code=status.HTTP_201_CREATED)
def create_team(body: TeamWrite, db: DB) -> TeamRead:
    return TeamRead.model_validate(team_service.create_team(db, body))


@router.put("/{team_id}", response_model=TeamRead)
def update_team(team_id: int, body: TeamWrite, db: DB) -> TeamRead:
    return TeamRead.model_validate(team_service.update_team(db, team_id, body))


@router.delete("/{team_id}", response_model=MessageResponse)
def delete_team(team_id: int, db: DB) -> MessageResponse:
    return MessageResponse(**team_service.delete_team(db, team_id))


@router.get("/{team_id}/players", response_model=list[RosterEntry])
def get_team_players(team_id: int, db: DB) -> list[RosterEntry]:
    """Players of a team ordered by last name, then first name."""
    return [RosterEntry.model_validate(p) for p in team_service.get_team_players(db, team_id)]
