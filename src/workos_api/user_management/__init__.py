"""WorkOS user management."""

from .api import UserManagement
from .errors import (
    AccessDeniedError,
    AuthenticateError,
    AuthorizationPendingError,
    DeviceCodeError,
    ExpiredTokenError,
    SlowDownError,
    classify_authenticate_response,
)
from .models import (
    AuthenticateWithDeviceCodeParams,
    AuthenticationMethod,
    AuthenticationResponse,
    DeviceAuthorization,
    Impersonator,
    ListOrganizationMembershipsParams,
    OrganizationMembership,
    OrganizationMembershipStatus,
    UpdateOrganizationMembershipParams,
    User,
)

__all__ = [
    "AccessDeniedError",
    "AuthenticateError",
    "AuthenticateWithDeviceCodeParams",
    "AuthenticationMethod",
    "AuthenticationResponse",
    "AuthorizationPendingError",
    "DeviceAuthorization",
    "DeviceCodeError",
    "ExpiredTokenError",
    "Impersonator",
    "ListOrganizationMembershipsParams",
    "OrganizationMembership",
    "OrganizationMembershipStatus",
    "SlowDownError",
    "UpdateOrganizationMembershipParams",
    "User",
    "UserManagement",
    "classify_authenticate_response",
]
