"""Match CRUD, fixture queries, and per-match event listing."""

import logging
from datetime import UTC, datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from league.core.database import commit_or_raise
from league.core.errors import NotFoundError, ValidationError
from league.models import Match
from league.schemas.matches import MatchWrite
from league.schemas.statistics import StatisticRead
from league.services.statistics import statistics_for_match

logger = logging.getLogger(__name__)


def list_matches(db: Session) -> list[Match]:
    """All matches, most recent first."""
    return db.query(Match).order_by(Match.date_played.desc()).all()


def get_match(db: Session, match_id: int) -> Match:
    match = db.get(Match, match_id)
    if match is None:
        raise NotFoundError("Match not found")
    return match


def list_upcoming_matches(db: Session, now: datetime | None = None) -> list[Match]:
    """Matches dated after now, soonest first."""
    now = now or datetime.now(UTC)
    return (
        db.query(Match)
        .filter(Match.date_played > now)
        .order_by(Match.date_played.asc())
        .all()
    )


def list_matches_for_team(db: Session, team_id: int) -> list[Match]:
    """Home and away matches of a team, most recent first."""
    return (
        db.query(Match)
        .filter(or_(Match.home_team_id == team_id, Match.away_team_id == team_id))
        .order_by(Match.date_played.desc())
        .all()
    )


def _validate(data: MatchWrite) -> None:
    if not data.home_team_id or not data.away_team_id:
        raise ValidationError("Home team and away team are required")
    if not data.date_played:
        raise ValidationError("Match date is required")


def create_match(db: Session, data: MatchWrite) -> Match:
    _validate(data)
    match = Match(
        home_team_id=data.home_team_id,
        away_team_id=data.away_team_id,
        date_played=data.date_played,
        score_home=data.score_home,
        score_away=data.score_away,
    )
    db.add(match)
    commit_or_raise(db, "create match")
    db.refresh(match)
    logger.info("Created match: match_id=%s", match.match_id)
    return match


def update_match(db: Session, match_id: int, data: MatchWrite) -> Match:
    match = get_match(db, match_id)
    _validate(data)
    match.home_team_id = data.home_team_id
    match.away_team_id = data.away_team_id
    match.date_played = data.date_played
    match.score_home = data.score_home
    match.score_away = data.score_away
    commit_or_raise(db, "update match")
    db.refresh(match)
    return match


def delete_match(db: Session, match_id: int) -> dict[str, str]:
    match = get_match(db, match_id)
    db.delete(match)
    commit_or_raise(db, "delete match")
    logger.info("Deleted match: match_id=%s", match_id)
    return {"message": "Match deleted successfully"}


def get_match_stats(db: Session, match_id: int) -> list[StatisticRead]:
    """Events of a match ordered by minute. Raises NotFoundError for an unknown match."""
    get_match(db, match_id)
    return statistics_for_match(db, match_id)
