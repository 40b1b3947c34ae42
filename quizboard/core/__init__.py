"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    best_score_timestamp_policy,
    database_url,
    tournament_bounds_raw,
)
from .database import dispose_engine, get_engine, get_session
from .errors import (
    AlreadyParticipatedError,
    ConfigurationError,
    QuizboardError,
    StoreOperationError,
    StoreUnavailableError,
    ValidationError,
)
from .log import configure_logging
from .time import isoformat_z, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "AlreadyParticipatedError",
    "ConfigurationError",
    "DB_RESET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "QuizboardError",
    "StoreOperationError",
    "StoreUnavailableError",
    "ValidationError",
    "best_score_timestamp_policy",
    "configure_logging",
    "database_url",
    "dispose_engine",
    "get_engine",
    "get_session",
    "isoformat_z",
    "tournament_bounds_raw",
    "utcnow",
]
