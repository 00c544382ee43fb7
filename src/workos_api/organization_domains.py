"""WorkOS organization domain operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from ._params import path_segment, request_body
from .common import Timestamps
from .known_or_unknown import KnownOrUnknown

if TYPE_CHECKING:
    from .client import WorkOS


class OrganizationDomainState(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    LEGACY_VERIFIED = "legacy_verified"


class VerificationStrategy(str, Enum):
    DNS = "dns"
    MANUAL = "manual"


class OrganizationDomain(Timestamps):
    """A domain claimed by an organization."""

    id: str
    organization_id: str
    domain: str
    state: Optional[KnownOrUnknown[OrganizationDomainState]] = None
    verification_strategy: Optional[KnownOrUnknown[VerificationStrategy]] = None
    verification_token: Optional[str] = None


class CreateOrganizationDomainParams(BaseModel):
    organization_id: str
    domain: str


class OrganizationDomains:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def create_organization_domain(
        self, params: CreateOrganizationDomainParams
    ) -> OrganizationDomain:
        return await self.workos.call(
            "POST", "/organization_domains", OrganizationDomain, json=request_body(params)
        )

    async def get_organization_domain(self, organization_domain_id: str) -> OrganizationDomain:
        return await self.workos.call(
            "GET",
            f"/organization_domains/{path_segment(organization_domain_id)}",
            OrganizationDomain,
        )

    async def verify_organization_domain(self, organization_domain_id: str) -> OrganizationDomain:
        """Start verification of a pending domain."""
        return await self.workos.call(
            "POST",
            f"/organization_domains/{path_segment(organization_domain_id)}/verify",
            OrganizationDomain,
        )

    async def delete_organization_domain(self, organization_domain_id: str) -> None:
        await self.workos.call(
            "DELETE", f"/organization_domains/{path_segment(organization_domain_id)}"
        )
