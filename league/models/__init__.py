"""SQLAlchemy ORM models."""

from league.models.base import Base
from league.models.match import Match
from league.models.player import Player
from league.models.statistic import Statistic
from league.models.team import Team
from league.models.user import User

__all__ = ["Base", "Match", "Player", "Statistic", "Team", "User"]
