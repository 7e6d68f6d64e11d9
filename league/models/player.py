"""ORM model for players."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from league.models.base import Base


class Player(Base):
    """A player registered with one team."""

    __tablename__ = "players"

    player_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False, index=True)
    position = Column(String(64), nullable=True)
    team_id = Column(Integer, ForeignKey("teams.team_id"), nullable=False, index=True)

    team = relationship("Team", lazy="joined")

    @property
    def team_name(self) -> str | None:
        return self.team.team_name if self.team is not None else None
