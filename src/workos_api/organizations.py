"""WorkOS organization operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from ._params import path_segment
from .common import Metadata, Timestamps
from .organization_domains import OrganizationDomain
from .pagination import PaginatedList, PaginationParams

if TYPE_CHECKING:
    from .client import WorkOS


class Organization(Timestamps):
    id: str
    name: str
    allow_profiles_outside_organization: bool = False
    domains: list[OrganizationDomain] = Field(default_factory=list)
    stripe_customer_id: Optional[str] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class ListOrganizationsParams(PaginationParams):
    domains: Optional[list[str]] = None


class Organizations:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def get_organization(self, organization_id: str) -> Organization:
        return await self.workos.call(
            "GET", f"/organizations/{path_segment(organization_id)}", Organization
        )

    async def get_organization_by_external_id(self, external_id: str) -> Organization:
        """Look up an organization by the id your application assigned it."""
        return await self.workos.call(
            "GET", f"/organizations/external_id/{path_segment(external_id)}", Organization
        )

    async def list_organizations(
        self, params: ListOrganizationsParams | None = None
    ) -> PaginatedList[Organization]:
        params = params or ListOrganizationsParams()
        return await self.workos.call(
            "GET", "/organizations", PaginatedList[Organization], params=params.to_query()
        )
