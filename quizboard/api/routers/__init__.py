"""Aggregate API routers."""

from fastapi import APIRouter

from .debug import router as debug_router
from .leaderboard import router as leaderboard_router
from .results import router as results_router
from .system import router as system_router
from .tournament import router as tournament_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    results_router,
    leaderboard_router,
    tournament_router,
    debug_router,
)

__all__ = ["ALL_ROUTERS"]
