"""Credential store: persistence of user accounts and their password hashes."""

import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from league.core.database import commit_or_raise
from league.core.errors import DependencyError, ValidationError
from league.core.security import hash_password
from league.models import User

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Lookup the login flow depends on."""

    def find_by_username(self, username: str) -> User | None: ...


class SqlCredentialStore:
    """
    CredentialStore backed by the users table.

    Username uniqueness is checked here on create and update, in addition to the
    unique index. Every read or write failure surfaces as DependencyError.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _lookup(self, statement, what: str):
        try:
            return self.db.execute(statement).scalars()
        except SQLAlchemyError as e:
            logger.error("User lookup failed: by=%s error=%s", what, e)
            raise DependencyError("User lookup failed", cause=e) from e

    def find_by_username(self, username: str) -> User | None:
        """Exact, case-sensitive match on username."""
        return self._lookup(select(User).where(User.username == username), "username").first()

    def get(self, user_id: int) -> User | None:
        return self._lookup(select(User).where(User.user_id == user_id), "id").first()

    def list_all(self) -> list[User]:
        """All users, newest first."""
        statement = select(User).order_by(User.created_at.desc(), User.user_id.desc())
        return list(self._lookup(statement, "all").all())

    def _ensure_username_free(self, username: str, user_id: int | None = None) -> None:
        existing = self.find_by_username(username)
        if existing is not None and existing.user_id != user_id:
            raise ValidationError("Username already exists")

    def create(self, username: str, password: str, email: str, role: str) -> User:
        self._ensure_username_free(username)
        user = User(
            username=username,
            password_hash=hash_password(password),
            email=email,
            role=role,
        )
        self.db.add(user)
        commit_or_raise(self.db, "create user")
        self.db.refresh(user)
        logger.info("Created user: user_id=%s role=%s", user.user_id, user.role)
        return user

    def update(
        self,
        user: User,
        username: str,
        email: str,
        role: str,
        password: str | None = None,
    ) -> User:
        self._ensure_username_free(username, user_id=user.user_id)
        user.username = username
        user.email = email
        user.role = role
        if password:
            user.password_hash = hash_password(password)
        commit_or_raise(self.db, "update user")
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        user_id = user.user_id
        self.db.delete(user)
        commit_or_raise(self.db, "delete user")
        logger.info("Deleted user: user_id=%s", user_id)
