"""Core app configuration, database, and security primitives."""

from league.core.config import get_settings, settings
from league.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
