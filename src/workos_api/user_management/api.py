"""WorkOS user-management operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._params import path_segment, request_body
from ..errors import ConfigurationError
from ..pagination import PaginatedList
from ..response import decode_response
from .errors import DEVICE_CODE_ERRORS, classify_authenticate_response
from .models import (
    AuthenticateWithDeviceCodeParams,
    AuthenticationResponse,
    DeviceAuthorization,
    ListOrganizationMembershipsParams,
    OrganizationMembership,
    UpdateOrganizationMembershipParams,
)

if TYPE_CHECKING:
    from ..client import WorkOS

MEMBERSHIPS_PATH = "/user_management/organization_memberships"


class UserManagement:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    def _client_id(self, client_id: str | None) -> str:
        resolved = client_id or self.workos.settings.client_id
        if not resolved:
            raise ConfigurationError("workos_client_id_missing")
        return resolved

    # Device authorization (CLI auth)

    async def get_device_authorization_url(
        self, client_id: str | None = None
    ) -> DeviceAuthorization:
        """Start a device authorization and return the codes to display."""
        return await self.workos.call(
            "POST",
            "/user_management/authorize/device",
            DeviceAuthorization,
            data={"client_id": self._client_id(client_id)},
        )

    async def authenticate_with_device_code(
        self, params: AuthenticateWithDeviceCodeParams
    ) -> AuthenticationResponse:
        """Exchange a device code for tokens.

        Makes exactly one attempt. While the user has not finished, this raises
        ``AuthorizationPendingError`` (or ``SlowDownError``); the caller owns
        the polling loop and the wait between attempts.
        """
        response = await self.workos.send(
            "POST",
            "/user_management/authenticate",
            json=params.to_body(),
            authenticated=False,
        )
        response = classify_authenticate_response(response, DEVICE_CODE_ERRORS)
        return decode_response(response, AuthenticationResponse)

    # Organization memberships

    async def get_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self.workos.call(
            "GET",
            f"{MEMBERSHIPS_PATH}/{path_segment(organization_membership_id)}",
            OrganizationMembership,
        )

    async def list_organization_memberships(
        self, params: ListOrganizationMembershipsParams
    ) -> PaginatedList[OrganizationMembership]:
        return await self.workos.call(
            "GET",
            MEMBERSHIPS_PATH,
            PaginatedList[OrganizationMembership],
            params=params.to_query(),
        )

    async def update_organization_membership(
        self, params: UpdateOrganizationMembershipParams
    ) -> OrganizationMembership:
        return await self.workos.call(
            "PUT",
            f"{MEMBERSHIPS_PATH}/{path_segment(params.organization_membership_id)}",
            OrganizationMembership,
            json=request_body(params),
        )

    async def deactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self.workos.call(
            "POST",
            f"{MEMBERSHIPS_PATH}/{path_segment(organization_membership_id)}/deactivate",
            OrganizationMembership,
        )

    async def reactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self.workos.call(
            "POST",
            f"{MEMBERSHIPS_PATH}/{path_segment(organization_membership_id)}/reactivate",
            OrganizationMembership,
        )
