"""Database model exports."""

from .leaderboard import BestScoreRecord
from .results import ScoreRecord
from .tournament import TournamentEntry

__all__ = [
    "BestScoreRecord",
    "ScoreRecord",
    "TournamentEntry",
]
