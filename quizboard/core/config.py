"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Database -------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATABASE_URL = f"sqlite:///{_PROJECT_ROOT / 'data' / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)


def database_url() -> str:
    """Return the configured SQLAlchemy URL, read at engine creation time."""

    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL


# Tournament -----------------------------------------------------------------
# Read fresh each request so a new start instant opens a new tournament.
def tournament_bounds_raw() -> tuple[str | None, str | None]:
    start = (os.getenv("TOURNAMENT_START_UTC") or "").strip() or None
    end = (os.getenv("TOURNAMENT_END_UTC") or "").strip() or None
    return start, end


BEST_SCORE_POLICIES = ("high_score", "always")


def best_score_timestamp_policy() -> str:
    policy = (os.getenv("BEST_SCORE_TIMESTAMP_POLICY") or "high_score").strip().lower()
    if policy not in BEST_SCORE_POLICIES:
        raise ConfigurationError(
            "BEST_SCORE_TIMESTAMP_POLICY must be one of: " + ", ".join(BEST_SCORE_POLICIES)
        )
    return policy


# HTTP -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

ALLOWED_CORS_ORIGINS = _unique([*_frontend_origins, *_additional_origins]) or ["*"]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 10000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "BEST_SCORE_POLICIES",
    "DB_RESET",
    "DEFAULT_DATABASE_URL",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "best_score_timestamp_policy",
    "database_url",
    "tournament_bounds_raw",
]
