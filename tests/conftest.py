"""
Shared fixtures for the quizboard test suite.

Every test gets its own SQLite database file, wired in through
``DATABASE_URL`` so the lazily created engine is rebuilt per test.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from quizboard.core import dispose_engine, get_engine


# ============================================================================
# ENVIRONMENT
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch) -> Iterator[None]:
    """Point the app at a throwaway database and clear tournament config."""

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.delenv("TOURNAMENT_START_UTC", raising=False)
    monkeypatch.delenv("TOURNAMENT_END_UTC", raising=False)
    monkeypatch.delenv("BEST_SCORE_TIMESTAMP_POLICY", raising=False)
    dispose_engine()
    yield
    dispose_engine()


# ============================================================================
# DATABASE
# ============================================================================


@pytest.fixture
def session() -> Iterator[Session]:
    with Session(get_engine()) as db_session:
        yield db_session


# ============================================================================
# HTTP
# ============================================================================


@pytest.fixture
def client() -> Iterator[TestClient]:
    from quizboard.app import app

    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# TIME
# ============================================================================


@pytest.fixture
def now() -> datetime:
    """A fixed mid-day instant so daily windows have room on both sides."""

    return datetime(2026, 3, 15, 12, 0, 0, tzinfo=timezone.utc)
