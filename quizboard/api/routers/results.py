"""Quiz result submission endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import submit_result

logger = logging.getLogger(__name__)

router = APIRouter(tags=["results"])


@router.post("/submit-result")
def submit(body: Dict[str, Any], session: Session = Depends(get_session)) -> Dict[str, str]:
    """Save a quiz attempt and update the all-time leaderboard."""

    logger.info("Incoming result: %s", body)
    submit_result(session, body)
    return {"message": "Result saved successfully"}


__all__ = ["router"]
