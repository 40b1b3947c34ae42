"""Ranked leaderboard views."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StoreOperationError, ValidationError
from ..core.time import days_before, isoformat_z, start_of_utc_day, utcnow
from ..models import BestScoreRecord, ScoreRecord, TournamentEntry
from .tournament import TournamentWindow

logger = logging.getLogger(__name__)

LEADERBOARD_LIMIT = 50
TIMEFRAMES = ("all", "daily", "weekly", "monthly", "tournament")
WINDOW_DAYS = {"weekly": 7, "monthly": 30}


def window_start(timeframe: str, now: datetime) -> datetime:
    """Earliest ``submitted_at`` counted by a windowed timeframe."""

    if timeframe == "daily":
        return start_of_utc_day(now)
    return days_before(now, WINDOW_DAYS[timeframe])


def _entry(
    username: str,
    score: Optional[float],
    correct_count: Optional[int],
    total_questions: Optional[int],
    created_at: Optional[datetime],
) -> Dict[str, Any]:
    return {
        "username": username,
        "score": score,
        "correctCount": correct_count,
        "totalQuestions": total_questions,
        "createdAt": isoformat_z(created_at),
    }


def _all_time(session: Session, limit: int) -> List[Dict[str, Any]]:
    rows = session.exec(
        select(BestScoreRecord)
        .order_by(BestScoreRecord.score.desc(), BestScoreRecord.updated_at.asc())
        .limit(limit)
    ).all()
    return [
        _entry(row.username, row.score, row.correct_count, row.total_questions, row.updated_at)
        for row in rows
    ]


def _windowed(session: Session, start: datetime, limit: int) -> List[Dict[str, Any]]:
    # Each user's best attempt in the window, earliest one on equal scores.
    ranked = (
        select(
            ScoreRecord.username,
            ScoreRecord.score,
            ScoreRecord.correct_count,
            ScoreRecord.total_questions,
            ScoreRecord.submitted_at,
            func.row_number()
            .over(
                partition_by=ScoreRecord.username,
                order_by=(ScoreRecord.score.desc(), ScoreRecord.submitted_at.asc()),
            )
            .label("position"),
        )
        .where(ScoreRecord.submitted_at >= start)
        .subquery()
    )
    rows = session.exec(
        select(
            ranked.c.username,
            ranked.c.score,
            ranked.c.correct_count,
            ranked.c.total_questions,
            ranked.c.submitted_at,
        )
        .where(ranked.c.position == 1)
        .order_by(ranked.c.score.desc(), ranked.c.submitted_at.asc())
        .limit(limit)
    ).all()
    return [_entry(*row) for row in rows]


def tournament_query(window: TournamentWindow, limit: int = LEADERBOARD_LIMIT):
    # Entries without a score rank last on every backend.
    return (
        select(TournamentEntry)
        .where(TournamentEntry.tournament_id == window.session_id)
        .order_by(TournamentEntry.score.desc().nulls_last(), TournamentEntry.submitted_at.asc())
        .limit(limit)
    )


def _tournament(session: Session, window: TournamentWindow, limit: int) -> List[Dict[str, Any]]:
    rows = session.exec(tournament_query(window, limit)).all()
    results = []
    for row in rows:
        item = _entry(
            row.username, row.score, row.correct_count, row.total_questions, row.submitted_at
        )
        item["timeSpentSeconds"] = row.time_spent_seconds
        item["isTournament"] = True
        results.append(item)
    return results


def get_leaderboard(
    session: Session,
    timeframe: Optional[str] = "all",
    *,
    now: Optional[datetime] = None,
    tournament: Optional[TournamentWindow] = None,
    limit: int = LEADERBOARD_LIMIT,
) -> List[Dict[str, Any]]:
    """Return up to ``limit`` ranked entries for ``timeframe``."""

    timeframe = (timeframe or "all").strip().lower()
    if timeframe not in TIMEFRAMES:
        raise ValidationError(f"Unknown timeframe: {timeframe}")
    limit = min(limit, LEADERBOARD_LIMIT)

    try:
        if timeframe == "all":
            results = _all_time(session, limit)
        elif timeframe == "tournament":
            results = _tournament(session, tournament or TournamentWindow.from_env(), limit)
        else:
            results = _windowed(session, window_start(timeframe, now or utcnow()), limit)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching leaderboard for timeframe %s", timeframe)
        raise StoreOperationError("Internal server error") from exc

    logger.debug("Leaderboard %s returned %d entries", timeframe, len(results))
    return results


__all__ = ["LEADERBOARD_LIMIT", "TIMEFRAMES", "get_leaderboard", "window_start"]
