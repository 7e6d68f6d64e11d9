"""Match events (goals, cards, ...) and the top-scorer ranking."""

import logging
import math

from sqlalchemy import func
from sqlalchemy.orm import Session

from league.core.database import commit_or_raise
from league.core.errors import NotFoundError, ValidationError
from league.models import Match, Player, Statistic
from league.models.statistic import GOAL_EVENT
from league.schemas.statistics import StatisticRead, StatisticWrite, TopScorer

logger = logging.getLogger(__name__)

DEFAULT_TOP_SCORERS_LIMIT = 10

# Accepted range for an event minute, extra time included.
MIN_MINUTE = 0
MAX_MINUTE = 200


def to_statistic_read(stat: Statistic) -> StatisticRead:
    """Flatten an event with its player and match into the API shape."""
    player = stat.player
    match = stat.match
    return StatisticRead(
        stat_id=stat.stat_id,
        match_id=stat.match_id,
        player_id=stat.player_id,
        event_type=stat.event_type,
        minute=stat.minute,
        first_name=player.first_name if player else None,
        last_name=player.last_name if player else None,
        position=player.position if player else None,
        team_id=player.team_id if player else None,
        team_name=player.team_name if player else None,
        date_played=match.date_played if match else None,
        home_team_id=match.home_team_id if match else None,
        away_team_id=match.away_team_id if match else None,
        home_team_name=match.home_team_name if match else None,
        away_team_name=match.away_team_name if match else None,
    )


def list_statistics(db: Session) -> list[StatisticRead]:
    stats = (
        db.query(Statistic)
        .join(Match, Statistic.match_id == Match.match_id)
        .order_by(Match.date_played.desc(), Statistic.minute)
        .all()
    )
    return [to_statistic_read(s) for s in stats]


def _get(db: Session, stat_id: int) -> Statistic:
    stat = db.get(Statistic, stat_id)
    if stat is None:
        raise NotFoundError("Statistic not found")
    return stat


def get_statistic(db: Session, stat_id: int) -> StatisticRead:
    return to_statistic_read(_get(db, stat_id))


def statistics_for_match(db: Session, match_id: int) -> list[StatisticRead]:
    """Events of one match ordered by minute."""
    stats = (
        db.query(Statistic)
        .filter(Statistic.match_id == match_id)
        .order_by(Statistic.minute, Statistic.stat_id)
        .all()
    )
    return [to_statistic_read(s) for s in stats]


def statistics_for_player(db: Session, player_id: int) -> list[StatisticRead]:
    """Events of one player, newest match first, then by minute."""
    stats = (
        db.query(Statistic)
        .join(Match, Statistic.match_id == Match.match_id)
        .filter(Statistic.player_id == player_id)
        .order_by(Match.date_played.desc(), Statistic.minute)
        .all()
    )
    return [to_statistic_read(s) for s in stats]


def top_scorers(db: Session, limit: int = DEFAULT_TOP_SCORERS_LIMIT) -> list[TopScorer]:
    """Players ranked by number of goal events, highest first."""
    goals = func.count(Statistic.stat_id).label("goals")
    rows = (
        db.query(Statistic.player_id, goals)
        .filter(Statistic.event_type == GOAL_EVENT)
        .group_by(Statistic.player_id)
        .order_by(goals.desc(), Statistic.player_id)
        .limit(limit)
        .all()
    )
    if not rows:
        return []
    players = {
        p.player_id: p
        for p in db.query(Player).filter(Player.player_id.in_([r.player_id for r in rows]))
    }
    scorers: list[TopScorer] = []
    for row in rows:
        player = players.get(row.player_id)
        if player is None:
            continue
        scorers.append(
            TopScorer(
                player_id=player.player_id,
                first_name=player.first_name,
                last_name=player.last_name,
                position=player.position,
                team_id=player.team_id,
                team_name=player.team_name,
                goals=row.goals,
            )
        )
    return scorers


def _parse_minute(value: int | float | str | None) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError("Minute must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("Minute must be a number")
    if not math.isfinite(number):
        raise ValidationError("Minute must be a number")
    if not MIN_MINUTE <= number <= MAX_MINUTE:
        raise ValidationError(f"Minute must be between {MIN_MINUTE} and {MAX_MINUTE}")
    return int(number)


def _validate(data: StatisticWrite) -> int:
    if not data.match_id:
        raise ValidationError("Match ID is required")
    if not data.player_id:
        raise ValidationError("Player ID is required")
    if not data.event_type:
        raise ValidationError("Event type is required")
    return _parse_minute(data.minute)


def create_statistic(db: Session, data: StatisticWrite) -> StatisticRead:
    minute = _validate(data)
    stat = Statistic(
        match_id=data.match_id,
        player_id=data.player_id,
        event_type=data.event_type,
        minute=minute,
    )
    db.add(stat)
    commit_or_raise(db, "create statistic")
    db.refresh(stat)
    logger.info(
        "Recorded event: stat_id=%s match_id=%s event_type=%s",
        stat.stat_id,
        stat.match_id,
        stat.event_type,
    )
    return to_statistic_read(stat)


def update_statistic(db: Session, stat_id: int, data: StatisticWrite) -> StatisticRead:
    stat = _get(db, stat_id)
    minute = _validate(data)
    stat.match_id = data.match_id
    stat.player_id = data.player_id
    stat.event_type = data.event_type
    stat.minute = minute
    commit_or_raise(db, "update statistic")
    db.refresh(stat)
    return to_statistic_read(stat)


def delete_statistic(db: Session, stat_id: int) -> dict[str, str]:
    stat = _get(db, stat_id)
    db.delete(stat)
    commit_or_raise(db, "delete statistic")
    logger.info("Deleted statistic: stat_id=%s", stat_id)
    return {"message": "Statistic deleted successfully"}
