"""Database model for the append-only quiz attempt history."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ScoreRecord(SQLModel, table=True):
    """One submitted quiz attempt."""

    __tablename__ = "score_records"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True, max_length=40)
    score: float
    correct_count: Optional[int] = None
    total_questions: Optional[int] = None
    submitted_at: datetime = ORMField(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), index=True, nullable=False),
    )


__all__ = ["ScoreRecord"]
