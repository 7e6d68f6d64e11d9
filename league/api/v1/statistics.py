"""Statistic (match event) CRUD, filtered listings, and top scorers."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from league.core.database import get_db
from league.schemas.common import MessageResponse
from league.schemas.statistics import StatisticRead, StatisticWrite, TopScorer
from league.services import statistics as statistic_service

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]


@router.get("", response_model=list[StatisticRead])
def list_statistics(db: DB) -> list[StatisticRead]:
    return statistic_service.list_statistics(db)


@router.get("/top-scorers", response_model=list[TopScorer])
def get_top_scorers(
    db: DB,
    limit: Annotated[int, Query(ge=1, le=100, description="Number of top scorers")] = (
        statistic_service.DEFAULT_TOP_SCORERS_LIMIT
    ),
) -> list[TopScorer]:
    """Players ranked by goals scored."""
    return statistic_service.top_scorers(db, limit)


@router.get("/match/{match_id}", response_model=list[StatisticRead])
def list_statistics_for_match(match_id: int, db: DB) -> list[StatisticRead]:
    return statistic_service.statistics_for_match(db, match_id)


@router.get("/player/{player_id}", response_model=list[StatisticRead])
def list_statistics_for_player(player_id: int, db: DB) -> list[StatisticRead]:
    return statistic_service.statistics_for_player(db, player_id)


@router.get("/{stat_id}", response_model=StatisticRead)
def get_statistic(stat_id: int, db: DB) -> StatisticRead:
    return statistic_service.get_statistic(db, stat_id)


@router.post("", response_model=StatisticRead, status_code=status.HTTP_201_CREATED)
def create_statistic(body: StatisticWrite, db: DB) -> StatisticRead:
    """Record an event. match_id, player_id and event_type are required; minute must be numeric."""
    return statistic_service.create_statistic(db, body)


@router.put("/{stat_id}", response_model=StatisticRead)
def update_statistic(stat_id: int, body: StatisticWrite, db: DB) -> StatisticRead:
    return statistic_service.update_statistic(db, stat_id, body)


@router.delete("/{stat_id}", response_model=MessageResponse)
def delete_statistic(stat_id: int, db: DB) -> MessageResponse:
    return MessageResponse(**statistic_service.delete_statistic(db, stat_id))
