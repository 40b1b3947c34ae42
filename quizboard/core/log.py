"""Console logging setup."""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Install a single console handler on the root logger.

    Safe to call more than once; an existing handler is reused.
    """

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers:
        if getattr(handler, "_quizboard", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    handler._quizboard = True  # type: ignore[attr-defined]
    root.addHandler(handler)


__all__ = ["configure_logging"]
