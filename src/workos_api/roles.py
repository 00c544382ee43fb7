"""Role references embedded in other resources."""

from __future__ import annotations

from pydantic import BaseModel


class RoleSlug(BaseModel):
    slug: str
