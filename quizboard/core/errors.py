"""Domain exceptions translated into HTTP responses by the app."""

from __future__ import annotations


class QuizboardError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuizboardError):
    """A required field is missing or unusable."""

    status_code = 400


class AlreadyParticipatedError(QuizboardError):
    """The user already has an entry in the current tournament session."""

    status_code = 403

    def __init__(self, message: str = "You have already participated in this tournament.") -> None:
        super().__init__(message)


class StoreUnavailableError(QuizboardError):
    """The database engine could not be initialized."""


class StoreOperationError(QuizboardError):
    """A database statement failed."""


class ConfigurationError(QuizboardError):
    """A configured value could not be interpreted."""


__all__ = [
    "AlreadyParticipatedError",
    "ConfigurationError",
    "QuizboardError",
    "StoreOperationError",
    "StoreUnavailableError",
    "ValidationError",
]
