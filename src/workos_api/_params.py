"""Serialization helpers for request parameters."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel


def request_body(params: BaseModel) -> dict[str, Any]:
    """JSON body for ``params``, with aliases applied and ``None`` fields dropped."""
    return params.model_dump(mode="json", by_alias=True, exclude_none=True)


def path_segment(value: str) -> str:
    return quote(str(value), safe="")


def require_exactly_one(params: BaseModel, *names: str) -> None:
    """Raise ``ValueError`` unless exactly one of ``names`` is set on ``params``."""
    provided = [name for name in names if getattr(params, name) is not None]
    if len(provided) != 1:
        raise ValueError(f"exactly one of {', '.join(names)} is required")
