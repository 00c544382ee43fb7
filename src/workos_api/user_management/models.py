"""Models for WorkOS user management."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from .._params import require_exactly_one
from ..common import Metadata, Timestamps
from ..known_or_unknown import KnownOrUnknown
from ..pagination import PaginationParams
from ..roles import RoleSlug

DEVICE_CODE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"


class User(Timestamps):
    id: str
    email: str
    email_verified: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    last_sign_in_at: Optional[datetime] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class AuthenticationMethod(str, Enum):
    SSO = "SSO"
    PASSWORD = "Password"
    PASSKEY = "Passkey"
    APPLE_OAUTH = "AppleOAuth"
    GITHUB_OAUTH = "GitHubOAuth"
    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MAGIC_AUTH = "MagicAuth"
    IMPERSONATION = "Impersonation"


class Impersonator(BaseModel):
    email: str
    reason: Optional[str] = None


class AuthenticationResponse(BaseModel):
    """Tokens and user returned by an authenticate exchange."""

    user: User
    organization_id: Optional[str] = None
    access_token: str
    refresh_token: str
    authentication_method: Optional[KnownOrUnknown[AuthenticationMethod]] = None
    impersonator: Optional[Impersonator] = None


class DeviceAuthorization(BaseModel):
    """Codes to show the user while the device polls for tokens.

    ``interval`` is the minimum number of seconds between polls.
    """

    device_code: str
    user_code: str
    verification_uri: str
    verification_uri_complete: str
    expires_in: int
    interval: int


class AuthenticateWithDeviceCodeParams(BaseModel):
    client_id: str
    device_code: str

    def to_body(self) -> dict[str, Any]:
        return {"grant_type": DEVICE_CODE_GRANT_TYPE, **self.model_dump()}


class OrganizationMembershipStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class OrganizationMembership(Timestamps):
    id: str
    user_id: str
    organization_id: str
    organization_name: Optional[str] = None
    role: RoleSlug
    status: KnownOrUnknown[OrganizationMembershipStatus]


class ListOrganizationMembershipsParams(PaginationParams):
    """Memberships of one organization, or of one user."""

    organization_id: Optional[str] = None
    user_id: Optional[str] = None
    statuses: Optional[list[OrganizationMembershipStatus]] = None

    @model_validator(mode="after")
    def _check_filter(self) -> ListOrganizationMembershipsParams:
        require_exactly_one(self, "organization_id", "user_id")
        return self


class UpdateOrganizationMembershipParams(BaseModel):
    organization_membership_id: str = Field(exclude=True)
    role_slug: str
