"""Team CRUD and roster lookup."""

import logging

from sqlalchemy.orm import Session

from league.core.database import commit_or_raise
from league.core.errors import NotFoundError, ValidationError
from league.models import Player, Team
from league.schemas.teams import TeamWrite

logger = logging.getLogger(__name__)


def list_teams(db: Session) -> list[Team]:
    return db.query(Team).order_by(Team.team_name).all()


def get_team(db: Session, team_id: int) -> Team:
    team = db.get(Team, team_id)
    if team is None:
        raise NotFoundError("Team not found")
    return team


def _validate(data: TeamWrite) -> None:
    if not data.team_name:
        raise ValidationError("Team name is required")


def create_team(db: Session, data: TeamWrite) -> Team:
    _validate(data)
    team = Team(team_name=data.team_name, city=data.city, coach_id=data.coach_id)
    db.add(team)
    commit_or_raise(db, "create team")
    db.refresh(team)
    logger.info("Created team: team_id=%s", team.team_id)
    return team


def update_team(db: Session, team_id: int, data: TeamWrite) -> Team:
    team = get_team(db, team_id)
    _validate(data)
    team.team_name = data.team_name
    team.city = data.city
    team.coach_id = data.coach_id
    commit_or_raise(db, "update team")
    db.refresh(team)
    return team


def delete_team(db: Session, team_id: int) -> dict[str, str]:
    team = get_team(db, team_id)
    db.delete(team)
    commit_or_raise(db, "delete team")
    logger.info("Deleted team: team_id=%s", team_id)
    return {"message": "Team deleted successfully"}


def get_team_players(db: Session, team_id: int) -> list[Player]:
    """Roster ordered by last name, then first name. Raises NotFoundError for an unknown team."""
    get_team(db, team_id)
    return (
        db.query(Player)
        .filter(Player.team_id == team_id)
        .order_by(Player.last_name, Player.first_name)
        .all()
    )
