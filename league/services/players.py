"""Player CRUD and per-player event history."""

import logging

from sqlalchemy.orm import Session

from league.core.database import commit_or_raise
from league.core.errors import NotFoundError, ValidationError
from league.models import Player
from league.schemas.players import PlayerWrite
from league.schemas.statistics import StatisticRead
from league.services.statistics import statistics_for_player

logger = logging.getLogger(__name__)


def list_players(db: Session) -> list[Player]:
    return db.query(Player).order_by(Player.last_name, Player.first_name).all()


def get_player(db: Session, player_id: int) -> Player:
    player = db.get(Player, player_id)
    if player is None:
        raise NotFoundError("Player not found")
    return player


def _validate(data: PlayerWrite) -> None:
    if not data.first_name or not data.last_name:
        raise ValidationError("First name and last name are required")
    if not data.team_id:
        raise ValidationError("Team ID is required")


def create_player(db: Session, data: PlayerWrite) -> Player:
    _validate(data)
    player = Player(
        first_name=data.first_name,
        last_name=data.last_name,
        position=data.position,
        team_id=data.team_id,
    )
    db.add(player)
    commit_or_raise(db, "create player")
    db.refresh(player)
    logger.info("Created player: player_id=%s team_id=%s", player.player_id, player.team_id)
    return player


def update_player(db: Session, player_id: int, data: PlayerWrite) -> Player:
    player = get_player(db, player_id)
    _validate(data)
    player.first_name = data.first_name
    player.last_name = data.last_name
    player.position = data.position
    player.team_id = data.team_id
    commit_or_raise(db, "update player")
    db.refresh(player)
    return player


def delete_player(db: Session, player_id: int) -> dict[str, str]:
    player = get_player(db, player_id)
    db.delete(player)
    commit_or_raise(db, "delete player")
    logger.info("Deleted player: player_id=%s", player_id)
    return {"message": "Player deleted successfully"}


def get_player_stats(db: Session, player_id: int) -> list[StatisticRead]:
    """Events for a player, newest match first. Raises NotFoundError for an unknown player."""
    get_player(db, player_id)
    return statistics_for_player(db, player_id)
