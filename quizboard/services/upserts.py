"""Dialect-specific ``INSERT ... ON CONFLICT`` support."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.dialects import postgresql, sqlite

from ..core.errors import ConfigurationError

_INSERTS: dict[str, Callable[..., Any]] = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def conflict_insert(dialect_name: str) -> Callable[..., Any]:
    """Return the ``insert`` construct that supports ``on_conflict_do_update``."""

    try:
        return _INSERTS[dialect_name]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported database backend for upserts: {dialect_name}"
        ) from None


__all__ = ["conflict_insert"]
