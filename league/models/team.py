"""ORM model for teams."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from league.models.base import Base


class Team(Base):
    """A team, optionally coached by a user account."""

    __tablename__ = "teams"

    team_id = Column(Integer, primary_key=True, autoincrement=True)
    team_name = Column(String(255), nullable=False, index=True)
    city = Column(String(255), nullable=True)
    coach_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="SET NULL"),
        nullable=True,
    )

    coach = relationship("User", lazy="joined")

    @property
    def coach_name(self) -> str | None:
        return self.coach.username if self.coach is not None else None
