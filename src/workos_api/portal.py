"""WorkOS Admin Portal operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

from ._params import request_body

if TYPE_CHECKING:
    from .client import WorkOS


class PortalIntent(str, Enum):
    SSO = "sso"
    DIRECTORY_SYNC = "dsync"
    AUDIT_LOGS = "audit_logs"
    LOG_STREAMS = "log_streams"
    DOMAIN_VERIFICATION = "domain_verification"
    CERTIFICATE_RENEWAL = "certificate_renewal"


class GeneratePortalLinkParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    organization_id: str = Field(serialization_alias="organization")
    intent: PortalIntent
    return_url: Optional[str] = None
    success_url: Optional[str] = None


class PortalLink(BaseModel):
    link: str


class Portal:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def generate_portal_link(self, params: GeneratePortalLinkParams) -> PortalLink:
        """Create a short-lived Admin Portal link for an organization."""
        return await self.workos.call(
            "POST", "/portal/generate_link", PortalLink, json=request_body(params)
        )
