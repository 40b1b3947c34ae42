"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])

LIVENESS_TEXT = "Quiz leaderboard API is running..."


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Liveness text."""

    return LIVENESS_TEXT


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


__all__ = ["router"]
