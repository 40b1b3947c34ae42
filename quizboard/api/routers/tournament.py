"""Tournament endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import (
    TournamentWindow,
    check_participation,
    get_tournament_status,
    submit_tournament_result,
)

router = APIRouter(tags=["tournament"])


@router.get("/tournament-status")
def tournament_status() -> Dict[str, Any]:
    return get_tournament_status(TournamentWindow.from_env())


@router.post("/tournament-check")
def tournament_check(
    body: Dict[str, Any], session: Session = Depends(get_session)
) -> Dict[str, bool]:
    """Whether the user already played the current tournament."""

    has_played = check_participation(session, body.get("username"), TournamentWindow.from_env())
    return {"hasPlayed": has_played}


@router.post("/submit-tournament-result")
def submit_tournament(
    body: Dict[str, Any], session: Session = Depends(get_session)
) -> Dict[str, str]:
    submit_tournament_result(session, body, TournamentWindow.from_env())
    return {"message": "Tournament result saved!"}


__all__ = ["router"]
