"""Quiz result submission: history insert plus personal-best upsert."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import case
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.config import best_score_timestamp_policy
from ..core.errors import StoreOperationError
from ..core.time import as_utc, utcnow
from ..models import BestScoreRecord, ScoreRecord
from .payloads import first_present, optional_int, require_number, require_username
from .upserts import conflict_insert

logger = logging.getLogger(__name__)


def _best_score_statement(dialect_name: str, values: Dict[str, Any], policy: str):
    """Build the atomic upsert for ``best_scores``.

    ``high_score`` rewrites the row only when the new score is strictly higher.
    ``always`` refreshes ``updated_at`` on every submission and still keeps the
    highest score fields.
    """

    insert = conflict_insert(dialect_name)
    table = BestScoreRecord.__table__  # type: ignore[attr-defined]
    stmt = insert(table).values(**values)
    current = table.c
    incoming = stmt.excluded
    higher = incoming.score > current.score

    if policy == "always":
        return stmt.on_conflict_do_update(
            index_elements=["username"],
            set_={
                "score": case((higher, incoming.score), else_=current.score),
                "correct_count": case(
                    (higher, incoming.correct_count), else_=current.correct_count
                ),
                "total_questions": case(
                    (higher, incoming.total_questions), else_=current.total_questions
                ),
                "updated_at": incoming.updated_at,
            },
        )

    return stmt.on_conflict_do_update(
        index_elements=["username"],
        set_={
            "score": incoming.score,
            "correct_count": incoming.correct_count,
            "total_questions": incoming.total_questions,
            "updated_at": incoming.updated_at,
        },
        where=higher,
    )


def submit_result(
    session: Session,
    body: Dict[str, Any],
    *,
    now: Optional[datetime] = None,
    policy: Optional[str] = None,
) -> ScoreRecord:
    """Record a quiz attempt and update the submitter's personal best."""

    username = require_username(body)
    score = require_number(first_present(body, "score", "IQ"))
    correct_count = optional_int(first_present(body, "correctCount", "correct"))
    total_questions = optional_int(body.get("totalQuestions"))
    now = as_utc(now) if now else utcnow()
    policy = policy or best_score_timestamp_policy()
    statement = _best_score_statement(
        session.get_bind().dialect.name,
        {
            "username": username,
            "score": score,
            "correct_count": correct_count,
            "total_questions": total_questions,
            "updated_at": now,
        },
        policy,
    )

    record = ScoreRecord(
        username=username,
        score=score,
        correct_count=correct_count,
        total_questions=total_questions,
        submitted_at=now,
    )
    try:
        session.add(record)
        session.commit()
        session.refresh(record)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to save result for %s", username)
        raise StoreOperationError("Internal server error") from exc

    record_id = record.id
    try:
        session.execute(statement)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Partial failure: history record %s saved but best score for %s not updated",
            record_id,
            username,
        )
        raise StoreOperationError("Internal server error") from exc

    logger.info("Saved result for %s (score=%s)", username, score)
    return record


__all__ = ["submit_result"]
