"""Tournament window, session id derivation and single-attempt gating."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..core.config import tournament_bounds_raw
from ..core.errors import AlreadyParticipatedError, ConfigurationError, StoreOperationError
from ..core.time import as_utc, isoformat_z, parse_instant, utcnow
from ..models import TournamentEntry
from .payloads import (
    first_present,
    normalize_username,
    optional_int,
    optional_number,
    require_username,
)

logger = logging.getLogger(__name__)

DEFAULT_TOURNAMENT_ID = "default_tournament"
TOURNAMENT_ID_PREFIX = "tournament_"
DEFAULT_DURATION = timedelta(days=7)


@dataclass(frozen=True)
class TournamentWindow:
    """Configured tournament bounds; an unset start means "always open"."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def from_strings(cls, start: Optional[str], end: Optional[str] = None) -> "TournamentWindow":
        try:
            start_at = parse_instant(start) if start else None
            end_at = parse_instant(end) if end else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid tournament instant: {exc}") from exc
        return cls(start=start_at, end=end_at)

    @classmethod
    def from_env(cls) -> "TournamentWindow":
        return cls.from_strings(*tournament_bounds_raw())

    @property
    def session_id(self) -> str:
        if self.start is None:
            return DEFAULT_TOURNAMENT_ID
        return f"{TOURNAMENT_ID_PREFIX}{isoformat_z(self.start)}"

    @property
    def end_or_default(self) -> Optional[datetime]:
        if self.start is None:
            return None
        return self.end or self.start + DEFAULT_DURATION


def get_tournament_status(
    window: TournamentWindow, now: Optional[datetime] = None
) -> Dict[str, Any]:
    """Report whether the configured tournament is upcoming, active or ended."""

    if window.start is None:
        return {"status": "active", "startTime": None, "endTime": None}

    now = as_utc(now) if now else utcnow()
    end = window.end_or_default
    status = "active"
    if now < window.start:
        status = "upcoming"
    elif end is not None and now > end:
        status = "ended"

    return {
        "status": status,
        "startTime": isoformat_z(window.start),
        "endTime": isoformat_z(end),
    }


def check_participation(
    session: Session, username: Optional[str], window: TournamentWindow
) -> bool:
    """True when ``username`` already has an entry in the current session."""

    name = normalize_username(username, "Username required")
    try:
        existing = session.exec(
            select(TournamentEntry).where(
                TournamentEntry.username == name,
                TournamentEntry.tournament_id == window.session_id,
            )
        ).first()
    except SQLAlchemyError as exc:
        logger.exception("Error checking tournament participation for %s", name)
        raise StoreOperationError("Internal server error") from exc
    return existing is not None


def submit_tournament_result(
    session: Session,
    body: Dict[str, Any],
    window: TournamentWindow,
    *,
    now: Optional[datetime] = None,
) -> TournamentEntry:
    """Store the user's one attempt for the current session.

    The (username, session) unique constraint decides; a duplicate insert is
    reported as ``AlreadyParticipatedError``.
    """

    username = require_username(body)
    entry = TournamentEntry(
        username=username,
        tournament_id=window.session_id,
        score=optional_number(body.get("score")),
        correct_count=optional_int(first_present(body, "correctCount", "correct")),
        total_questions=optional_int(body.get("totalQuestions")),
        time_spent_seconds=optional_number(first_present(body, "timeSpentSeconds", "timeSpent")),
        submitted_at=as_utc(now) if now else utcnow(),
    )
    try:
        session.add(entry)
        session.commit()
        session.refresh(entry)
    except IntegrityError as exc:
        session.rollback()
        logger.info("Rejected repeat tournament entry for %s in %s", username, window.session_id)
        raise AlreadyParticipatedError() from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error submitting tournament result for %s", username)
        raise StoreOperationError("Internal server error") from exc

    logger.info("Saved tournament result for %s in %s", username, entry.tournament_id)
    return entry


__all__ = [
    "DEFAULT_TOURNAMENT_ID",
    "TournamentWindow",
    "check_participation",
    "get_tournament_status",
    "submit_tournament_result",
]
