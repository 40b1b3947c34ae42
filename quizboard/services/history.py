"""Administrative maintenance of the attempt history."""

from __future__ import annotations

import logging
from typing import Dict

from sqlalchemy import delete, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.errors import StoreOperationError
from ..models import ScoreRecord

logger = logging.getLogger(__name__)

CLEARED_MESSAGE = "History (results) cleared. All-Time (leaderboard) preserved."
ALREADY_EMPTY_MESSAGE = "History already empty."


def reset_history(session: Session) -> Dict[str, str]:
    """Delete every attempt record; personal bests are left alone."""

    table_name = ScoreRecord.__tablename__
    try:
        if not inspect(session.get_bind()).has_table(table_name):
            return {"message": ALREADY_EMPTY_MESSAGE}
        result = session.execute(delete(ScoreRecord))
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to reset history")
        raise StoreOperationError("Internal server error") from exc

    if not result.rowcount:
        return {"message": ALREADY_EMPTY_MESSAGE}
    logger.warning("History reset: %d records deleted", result.rowcount)
    return {"message": CLEARED_MESSAGE}


__all__ = ["ALREADY_EMPTY_MESSAGE", "CLEARED_MESSAGE", "reset_history"]
