"""API v1 routes."""

from fastapi import APIRouter

from league.api.v1 import auth, health, matches, players, statistics, teams, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(players.router, prefix="/players", tags=["players"])
router.include_router(matches.router, prefix="/matches", tags=["matches"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
