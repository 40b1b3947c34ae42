"""Administrative maintenance endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import reset_history

router = APIRouter(prefix="/debug", tags=["debug"])


@router.post("/reset-history")
def reset(session: Session = Depends(get_session)) -> Dict[str, str]:
    """Clear attempt history while keeping all-time bests."""

    return reset_history(session)


__all__ = ["router"]
