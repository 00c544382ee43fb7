"""Async client for the WorkOS REST API."""

from .client import WorkOS
from .config import Settings
from .errors import (
    ConfigurationError,
    JsonBody,
    JsonOrText,
    NetworkError,
    OperationError,
    TextBody,
    UnauthorizedError,
    UnknownError,
    UrlConstructionError,
    WorkOSError,
)
from .known_or_unknown import KnownOrUnknown, is_known
from .pagination import (
    ListMetadata,
    PaginatedList,
    PaginationParams,
    iterate_items,
    iterate_pages,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "JsonBody",
    "JsonOrText",
    "KnownOrUnknown",
    "ListMetadata",
    "NetworkError",
    "OperationError",
    "PaginatedList",
    "PaginationParams",
    "Settings",
    "TextBody",
    "UnauthorizedError",
    "UnknownError",
    "UrlConstructionError",
    "WorkOS",
    "WorkOSError",
    "is_known",
    "iterate_items",
    "iterate_pages",
]
