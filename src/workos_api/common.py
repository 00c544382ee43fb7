"""Models shared across WorkOS resources."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

Metadata = dict[str, str]


class Timestamps(BaseModel):
    created_at: datetime
    updated_at: datetime
