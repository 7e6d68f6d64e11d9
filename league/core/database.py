"""Database engine, session management, and commit helpers shared by services."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from league.core.config import settings
from league.core.errors import DependencyError, ValidationError

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict[str, object]:
    # SQLite connections are shared across the threadpool FastAPI runs sync routes on.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
    connect_args=_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def commit_or_raise(db: Session, action: str) -> None:
    """
    Commit the session; on failure roll back and raise a classified error.

    Constraint violations (unknown foreign key, duplicate unique value, row still
    referenced) are the caller's fault and raise ValidationError; anything else
    raises DependencyError. action is a short verb phrase, e.g. "create team".
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Constraint violation: action=%s error=%s", action, e.orig)
        raise ValidationError(
            f"Failed to {action}: a referenced record is missing or a value conflicts",
            cause=e,
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database commit failed: action=%s error=%s", action, e)
        raise DependencyError(f"Failed to {action}", cause=e) from e
