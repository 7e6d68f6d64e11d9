"""Player CRUD and per-player statistics."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from league.core.database import get_db
from league.schemas.common import MessageResponse
from league.schemas.players import PlayerRead, PlayerWrite
from league.schemas.statistics import StatisticRead
from league.services import players as player_service

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]


@router.get("", response_model=list[PlayerRead])
def list_players(db: DB) -> list[PlayerRead]:
    return [PlayerRead.model_validate(p) for p in player_service.list_players(db)]


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, db: DB) -> PlayerRead:
    return PlayerRead.model_validate(player_service.get_player(db, player_id))


@router.post("", response_model=PlayerRead, status_code=status.HTTP_201_CREATED)
def create_player(body: PlayerWrite, db: DB) -> PlayerRead:
    """Create a player. first_name, last_name and team_id are required."""
    return PlayerRead.model_validate(player_service.create_player(db, body))


@router.put("/{player_id}", response_model=PlayerRead)
def update_player(player_id: int, body: PlayerWrite, db: DB) -> PlayerRead:
    return PlayerRead.model_validate(player_service.update_player(db, player_id, body))


@router.delete("/{player_id}", response_model=MessageResponse)
def delete_player(player_id: int, db: DB) -> MessageResponse:
    return MessageResponse(**player_service.delete_player(db, player_id))


@router.get("/{player_id}/stats", response_model=list[StatisticRead])
def get_player_stats(player_id: int, db: DB) -> list[StatisticRead]:
    """Events recorded for a player, most recent match first."""
    return player_service.get_player_stats(db, player_id)
