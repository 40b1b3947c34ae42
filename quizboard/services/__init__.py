"""Service layer helpers."""

from .history import reset_history
from .leaderboard import LEADERBOARD_LIMIT, TIMEFRAMES, get_leaderboard
from .submissions import submit_result
from .tournament import (
    TournamentWindow,
    check_participation,
    get_tournament_status,
    submit_tournament_result,
)

__all__ = [
    "LEADERBOARD_LIMIT",
    "TIMEFRAMES",
    "TournamentWindow",
    "check_participation",
    "get_leaderboard",
    "get_tournament_status",
    "reset_history",
    "submit_result",
    "submit_tournament_result",
]
