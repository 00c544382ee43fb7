"""Errors raised by WorkOS API operations.

Every operation either returns its typed result or raises exactly one of:

- ``UnauthorizedError`` when the credential is rejected.
- An ``OperationError`` subclass that the operation declares for itself.
- ``UnknownError`` for any other non-success status, carrying the body.
- ``UrlConstructionError`` when the request URL cannot be built.
- ``NetworkError`` for transport failures and undecodable success bodies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class JsonBody:
    """An error body that decoded as JSON."""

    value: Any


@dataclass(frozen=True)
class TextBody:
    """An error body that could only be read as text."""

    text: str


JsonOrText = Union[JsonBody, TextBody]


class WorkOSError(Exception):
    """Base error for WorkOS API failures."""


class ConfigurationError(WorkOSError):
    """Raised when the client is missing required settings."""


class UnauthorizedError(WorkOSError):
    """Raised when WorkOS rejects the credential."""

    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(message)


class OperationError(WorkOSError):
    """Base class for errors specific to a single operation."""


class UnknownError(WorkOSError):
    """Raised for unclassified error responses."""

    def __init__(self, status: int, body: JsonOrText) -> None:
        super().__init__(f"workos_error_{status}")
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if isinstance(self.body, JsonBody):
            detail = self.body.value
        else:
            detail = self.body.text
        return f"workos_error_{self.status}: {detail!r}"


class UrlConstructionError(WorkOSError):
    """Raised when a request URL cannot be built."""


class NetworkError(WorkOSError):
    """Raised when the exchange fails before a usable response is decoded."""
