"""ORM model for user accounts (login credentials and role claim)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from league.models.base import Base


class User(Base):
    """
    User account. username is unique and compared case-sensitively.

    role: 'user', 'admin' or 'coach'. password_hash is a bcrypt string and is
    never returned by the API; read paths go through schemas.auth.UserRead.
    """

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
