"""ORM model for matches between two teams."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from league.models.base import Base


class Match(Base):
    """A fixture; scores stay null until the match is played."""

    __tablename__ = "matches"

    match_id = Column(Integer, primary_key=True, autoincrement=True)
    home_team_id = Column(Integer, ForeignKey("teams.team_id"), nullable=False, index=True)
    away_team_id = Column(Integer, ForeignKey("teams.team_id"), nullable=False, index=True)
    date_played = Column(DateTime(timezone=True), nullable=False, index=True)
    score_home = Column(Integer, nullable=True)
    score_away = Column(Integer, nullable=True)

    home_team = relationship("Team", foreign_keys=[home_team_id], lazy="joined")
    away_team = relationship("Team", foreign_keys=[away_team_id], lazy="joined")

    @property
    def home_team_name(self) -> str | None:
        return self.home_team.team_name if self.home_team is not None else None

    @property
    def away_team_name(self) -> str | None:
        return self.away_team.team_name if self.away_team is not None else None
