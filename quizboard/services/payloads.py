"""Helpers for reading loosely typed JSON request bodies."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from ..core.errors import ValidationError

USERNAME_MAX_LENGTH = 40


def first_present(body: Dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key that is present and not null."""

    for key in keys:
        value = body.get(key)
        if value is not None:
            return value
    return None


def normalize_username(raw: Any, message: str = "Missing fields") -> str:
    """Strip and truncate a username; blank or non-string values are rejected."""

    username = raw.strip() if isinstance(raw, str) else ""
    if not username:
        raise ValidationError(message)
    return username[:USERNAME_MAX_LENGTH]


def require_username(body: Dict[str, Any], message: str = "Missing fields") -> str:
    return normalize_username(body.get("username"), message)


def require_number(value: Any, message: str = "Missing fields") -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message) from exc
    if not math.isfinite(number):
        raise ValidationError("score must be a finite number")
    return number


def optional_number(value: Any) -> Optional[float]:
    """Lenient parse; junk and non-finite values become ``None``."""

    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def optional_int(value: Any) -> Optional[int]:
    number = optional_number(value)
    return None if number is None else int(number)


__all__ = [
    "USERNAME_MAX_LENGTH",
    "first_present",
    "normalize_username",
    "optional_int",
    "optional_number",
    "require_number",
    "require_username",
]
