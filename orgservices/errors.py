"""
Error kinds and lookup results shared by every service.

Direct-id lookups return a ``Result`` instead of raising, so routes
branch on ``result.ok`` and translate the error kind into an HTTP
status with ``error_response()``.  Callers outside a request (CLI,
scripts) can call ``Result.unwrap()`` to get the value or a
``NotFoundError``.
"""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(enum.Enum):
    """The documented failure kinds a service operation can report."""

    NOT_FOUND = "not_found"


# HTTP status for each error kind.
HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
}


class NotFoundError(LookupError):
    """Raised by ``Result.unwrap()`` when a lookup found nothing."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a direct-id lookup: a value or an error kind."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls(error=ErrorKind.NOT_FOUND, message=message)

    def unwrap(self) -> T:
        """
        Return the value, or raise for a failed lookup.

        Raises:
            NotFoundError: If the result carries ``ErrorKind.NOT_FOUND``.
        """
        if self.error is ErrorKind.NOT_FOUND:
            raise NotFoundError(self.message)
        return self.value


def error_body(kind: str, message: str, **extra) -> dict:
    """Build the JSON body shared by every error response."""
    body = {"error": kind, "message": message}
    body.update(extra)
    return body


def error_response(result: Result) -> tuple[dict, int]:
    """Translate a failed ``Result`` into a Flask ``(body, status)`` pair."""
    return error_body(result.error.value, result.message), HTTP_STATUS[result.error]
