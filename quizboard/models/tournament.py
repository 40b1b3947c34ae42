"""Database model for tournament attempts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class TournamentEntry(SQLModel, table=True):
    """The single allowed attempt of a user in one tournament session."""

    __tablename__ = "tournament_entries"
    __table_args__ = (
        UniqueConstraint("username", "tournament_id", name="uq_tournament_entry_user"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(max_length=40)
    tournament_id: str = ORMField(index=True)
    score: Optional[float] = None
    correct_count: Optional[int] = None
    total_questions: Optional[int] = None
    time_spent_seconds: Optional[float] = None
    submitted_at: datetime = ORMField(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


__all__ = ["TournamentEntry"]
