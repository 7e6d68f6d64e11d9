"""ORM model for match events recorded against a player (goals, cards, ...)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from league.models.base import Base

GOAL_EVENT = "goal"


class Statistic(Base):
    """One event in a match: who, what, and at which minute."""

    __tablename__ = "statistics"

    stat_id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(Integer, ForeignKey("matches.match_id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.player_id"), nullable=False, index=True)
    event_type = Column(String(64), nullable=False, index=True)
    minute = Column(Integer, nullable=False)

    match = relationship("Match", lazy="joined")
    player = relationship("Player", lazy="joined")
