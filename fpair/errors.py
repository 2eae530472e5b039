"""
Exception hierarchy for fpair.

Every failure raised by the library is a programmer error (a value that does
not provide the capability an operation needs) or a bad configuration value.
Both are raised immediately; nothing is retried.
"""

from datetime import UTC, datetime
from typing import TypeAlias

ErrorContextData: TypeAlias = str | int | float | bool | None
ErrorContextDict: TypeAlias = dict[str, ErrorContextData]


class FpairError(Exception):
    """
    Base exception for all fpair errors.

    Carries a structured context so callers can log the failure without
    parsing the message.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "timestamp": self.timestamp.isoformat(),
        }


class TypeConstraintError(FpairError, TypeError):
    """A value did not satisfy the type-class constraint of an operation."""

    def __init__(
        self,
        operation: str,
        requirement: str,
        received: object = None,
        **kwargs: ErrorContextData,
    ):
        super().__init__(f"{operation}: {requirement}", **kwargs)
        self.operation = operation
        self.requirement = requirement
        self.received = type(received).__name__

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update(
            {
                "operation": self.operation,
                "requirement": self.requirement,
                "received": self.received,
            }
        )
        return context


class ConfigurationError(FpairError, ValueError):
    """Invalid settings read from the environment."""


__all__ = ["ConfigurationError", "FpairError", "TypeConstraintError"]
