"""Time helpers shared by models and services."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and convert aware ones."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(raw: str) -> datetime:
    """Parse an ISO 8601 instant; naive values are taken as UTC.

    Raises ``ValueError`` for malformed input.
    """

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))


def isoformat_z(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat().replace("+00:00", "Z")


def start_of_utc_day(now: datetime) -> datetime:
    return as_utc(now).replace(hour=0, minute=0, second=0, microsecond=0)


def days_before(now: datetime, days: int) -> datetime:
    return as_utc(now) - timedelta(days=days)


__all__ = [
    "as_utc",
    "days_before",
    "isoformat_z",
    "parse_instant",
    "start_of_utc_day",
    "utcnow",
]
