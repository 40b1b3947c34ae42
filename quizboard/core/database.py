"""Database engine lifecycle and session helpers."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from .config import DB_RESET, database_url
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def _build_engine(url: str) -> Engine:
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


def _prepare(engine: Engine) -> None:
    from .. import models  # noqa: F401 - ensure models are registered with SQLModel

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    if DB_RESET:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def get_engine() -> Engine:
    """Return the shared engine, creating it on first use.

    Only one thread builds the engine. It is published after the schema is in
    place; a failed attempt leaves nothing behind so the next call retries.
    """

    global _engine
    engine = _engine
    if engine is not None:
        return engine

    with _engine_lock:
        if _engine is not None:
            return _engine

        url = database_url()
        candidate: Optional[Engine] = None
        try:
            candidate = _build_engine(url)
            _prepare(candidate)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Database initialization failed for %s", _safe_url(url))
            if candidate is not None:
                candidate.dispose()
            raise StoreUnavailableError("Database unavailable") from exc

        _engine = candidate
        logger.info("Connected to database %s", _safe_url(url))
        return candidate


def dispose_engine() -> None:
    """Release the shared engine; the next ``get_engine`` call rebuilds it."""

    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None


def _safe_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except SQLAlchemyError:
        return "<invalid url>"


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(get_engine()) as session:
        yield session


__all__ = ["dispose_engine", "get_engine", "get_session"]
