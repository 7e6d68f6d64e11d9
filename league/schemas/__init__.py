"""Pydantic request/response schemas."""

from league.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
    TokenSubject,
    UserCreate,
    UserRead,
    UserUpdate,
)
from league.schemas.common import MessageResponse
from league.schemas.health import HealthResponse
from league.schemas.matches import MatchRead, MatchWrite
from league.schemas.players import PlayerRead, PlayerWrite
from league.schemas.statistics import StatisticRead, StatisticWrite, TopScorer
from league.schemas.teams import RosterEntry, TeamRead, TeamWrite

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MatchRead",
    "MatchWrite",
    "MessageResponse",
    "PlayerRead",
    "PlayerWrite",
    "RegisterRequest",
    "RosterEntry",
    "StatisticRead",
    "StatisticWrite",
    "TeamRead",
    "TeamWrite",
    "TokenClaims",
    "TokenSubject",
    "TopScorer",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
