"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import get_leaderboard

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def leaderboard(
    timeframe: str = "all", session: Session = Depends(get_session)
) -> List[Dict[str, Any]]:
    """Ranked entries for all-time, daily, weekly, monthly or tournament views."""

    return get_leaderboard(session, timeframe)


__all__ = ["router"]
