"""Database model for all-time personal bests."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class BestScoreRecord(SQLModel, table=True):
    """Highest score a username has ever submitted."""

    __tablename__ = "best_scores"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True, unique=True, max_length=40)
    score: float
    correct_count: Optional[int] = None
    total_questions: Optional[int] = None
    updated_at: datetime = ORMField(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


__all__ = ["BestScoreRecord"]
