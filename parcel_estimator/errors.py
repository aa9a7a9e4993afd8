"""
Errors and Results

A single error type covers every validation failure in the estimator.
Core functions raise InvalidArgument; the try_* wrappers return a Result
so callers can branch on success or failure instead of catching.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """What an InvalidArgument was raised for."""
    NON_POSITIVE = "non_positive"
    OVERSIZE_DIMENSION = "oversize_dimension"
    OVERWEIGHT = "overweight"
    INVALID_ZONE = "invalid_zone"
    INVALID_SPEED = "invalid_speed"


class InvalidArgument(ValueError):
    """Raised when a parcel, zone or speed input is not acceptable."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class Result:
    """Outcome of a fallible operation: a value or an InvalidArgument."""
    value: Any = None
    error: InvalidArgument | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InvalidArgument) -> "Result":
        return cls(error=error)

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


__all__ = ["ErrorKind", "InvalidArgument", "Result"]
