"""WorkOS widget token operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from ._params import request_body

if TYPE_CHECKING:
    from .client import WorkOS


class WidgetTokenScope(str, Enum):
    MANAGE_USERS = "widgets:users-table:manage"
    MANAGE_SSO = "widgets:sso:manage"
    MANAGE_DOMAIN_VERIFICATION = "widgets:domain-verification:manage"


class GenerateTokenParams(BaseModel):
    organization_id: str
    user_id: Optional[str] = None
    scopes: Optional[list[WidgetTokenScope]] = None


class WidgetToken(BaseModel):
    token: str


class Widgets:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def generate_token(self, params: GenerateTokenParams) -> WidgetToken:
        """Mint an ephemeral token for the embeddable widgets."""
        return await self.workos.call(
            "POST", "/widgets/token", WidgetToken, json=request_body(params)
        )
