import json

import pytest
import respx
from pydantic import ValidationError
from workos_api import Settings, WorkOS
from workos_api.errors import ConfigurationError, UnauthorizedError, UnknownError
from workos_api.user_management import (
    AccessDeniedError,
    AuthenticateError,
    AuthenticateWithDeviceCodeParams,
    AuthenticationMethod,
    AuthorizationPendingError,
    ExpiredTokenError,
    ListOrganizationMembershipsParams,
    OrganizationMembershipStatus,
    SlowDownError,
    UpdateOrganizationMembershipParams,
)
from workos_api.user_management.models import DEVICE_CODE_GRANT_TYPE

BASE_URL = "https://api.workos.test"
AUTHENTICATE_URL = f"{BASE_URL}/user_management/authenticate"
MEMBERSHIPS_URL = f"{BASE_URL}/user_management/organization_memberships"

USER = {
    "object": "user",
    "id": "user_01E4ZCR3C56J083X43JQXF3JK5",
    "email": "marcelina.davis@example.com",
    "first_name": "Marcelina",
    "last_name": "Davis",
    "email_verified": True,
    "profile_picture_url": "https://workoscdn.com/images/v1/123abc",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}

MEMBERSHIP = {
    "object": "organization_membership",
    "id": "om_01E4ZCR3C56J083X43JQXF3JK5",
    "user_id": "user_01E4ZCR3C56J083X43JQXF3JK5",
    "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
    "organization_name": "Acme",
    "role": {"slug": "member"},
    "status": "active",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}

DEVICE_PARAMS = AuthenticateWithDeviceCodeParams(
    client_id="client_123456789", device_code="CSLkYJdS1Lwkdzm4ez2fBJf2B"
)


def _workos(**overrides) -> WorkOS:
    return WorkOS(Settings(api_key="sk_example_123456789", base_url=BASE_URL, **overrides))


@pytest.mark.asyncio
@respx.mock
async def test_get_device_authorization_url_posts_form_body():
    workos = _workos()
    route = respx.post(f"{BASE_URL}/user_management/authorize/device").respond(
        200,
        json={
            "device_code": "CSLkYJdS1Lwkdzm4ez2fBJf2B",
            "user_code": "BCDF-GHJK",
            "verification_uri": "https://example.authkit.app/device",
            "verification_uri_complete": "https://example.authkit.app/device?user_code=BCDF-GHJK",
            "expires_in": 300,
            "interval": 5,
        },
    )

    authorization = await workos.user_management.get_device_authorization_url("client_123456789")

    request = route.calls.last.request
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.content == b"client_id=client_123456789"
    assert authorization.user_code == "BCDF-GHJK"
    assert authorization.expires_in == 300
    assert authorization.interval == 5
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_device_authorization_falls_back_to_configured_client_id():
    workos = _workos(client_id="client_from_settings")
    route = respx.post(f"{BASE_URL}/user_management/authorize/device").respond(
        200,
        json={
            "device_code": "dc",
            "user_code": "BCDF-GHJK",
            "verification_uri": "https://example.authkit.app/device",
            "verification_uri_complete": "https://example.authkit.app/device?user_code=BCDF-GHJK",
            "expires_in": 300,
            "interval": 5,
        },
    )

    await workos.user_management.get_device_authorization_url()

    assert route.calls.last.request.content == b"client_id=client_from_settings"
    await workos.aclose()


@pytest.mark.asyncio
async def test_device_authorization_without_client_id_is_configuration_error():
    workos = _workos()

    with pytest.raises(ConfigurationError):
        await workos.user_management.get_device_authorization_url()
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_authenticate_with_device_code_returns_tokens():
    workos = _workos()
    route = respx.post(AUTHENTICATE_URL).respond(
        200,
        json={
            "user": USER,
            "organization_id": "org_01H945H0YD4F97JN9MATX7BYAG",
            "access_token": "eyJhb.nNzb19vaWRjX2tleV9.lc5Uk4yWVk5In0",
            "refresh_token": "yAjhKk123NLIjdrBdGZPf8pLIDvK",
            "authentication_method": "Password",
        },
    )

    result = await workos.user_management.authenticate_with_device_code(DEVICE_PARAMS)

    request = route.calls.last.request
    assert "Authorization" not in request.headers
    assert json.loads(request.content) == {
        "grant_type": DEVICE_CODE_GRANT_TYPE,
        "client_id": "client_123456789",
        "device_code": "CSLkYJdS1Lwkdzm4ez2fBJf2B",
    }
    assert result.user.email == "marcelina.davis@example.com"
    assert result.refresh_token == "yAjhKk123NLIjdrBdGZPf8pLIDvK"
    assert result.authentication_method == AuthenticationMethod("Password")
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize(
    ("code", "error_type"),
    [
        ("authorization_pending", AuthorizationPendingError),
        ("slow_down", SlowDownError),
        ("access_denied", AccessDeniedError),
        ("expired_token", ExpiredTokenError),
    ],
)
async def test_device_code_polling_outcomes_raise_named_errors(code, error_type):
    workos = _workos()
    respx.post(AUTHENTICATE_URL).respond(
        400, json={"error": code, "error_description": f"{code} description"}
    )

    with pytest.raises(error_type) as excinfo:
        await workos.user_management.authenticate_with_device_code(DEVICE_PARAMS)

    assert excinfo.value.error == code
    assert excinfo.value.error_description == f"{code} description"
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize("code", ["invalid_client", "unauthorized_client"])
async def test_rejected_client_is_unauthorized(code):
    workos = _workos()
    respx.post(AUTHENTICATE_URL).respond(400, json={"error": code, "error_description": "nope"})

    with pytest.raises(UnauthorizedError):
        await workos.user_management.authenticate_with_device_code(DEVICE_PARAMS)
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_other_error_code_is_authenticate_error():
    workos = _workos()
    respx.post(AUTHENTICATE_URL).respond(
        400, json={"error": "invalid_grant", "error_description": "The code is invalid."}
    )

    with pytest.raises(AuthenticateError) as excinfo:
        await workos.user_management.authenticate_with_device_code(DEVICE_PARAMS)

    assert type(excinfo.value) is AuthenticateError
    assert excinfo.value.error == "invalid_grant"
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_authenticate_error_without_error_code_is_unknown():
    workos = _workos()
    respx.post(AUTHENTICATE_URL).respond(500, text="upstream failure")

    with pytest.raises(UnknownError) as excinfo:
        await workos.user_management.authenticate_with_device_code(DEVICE_PARAMS)

    assert excinfo.value.status == 500
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_list_memberships_sends_filter_statuses_and_order():
    workos = _workos()
    route = respx.get(MEMBERSHIPS_URL).respond(
        200,
        json={
            "object": "list",
            "data": [MEMBERSHIP],
            "list_metadata": {"before": "om_before", "after": "om_after"},
        },
    )

    page = await workos.user_management.list_organization_memberships(
        ListOrganizationMembershipsParams(
            user_id="user_01E4ZCR3C56J083X43JQXF3JK5",
            statuses=[OrganizationMembershipStatus.ACTIVE, OrganizationMembershipStatus.PENDING],
        )
    )

    params = route.calls.last.request.url.params
    assert params["user_id"] == "user_01E4ZCR3C56J083X43JQXF3JK5"
    assert params["statuses"] == "active,pending"
    assert params["order"] == "desc"
    assert "organization_id" not in params
    assert page.data[0].role.slug == "member"
    assert page.data[0].status is OrganizationMembershipStatus.ACTIVE
    assert page.list_metadata.after == "om_after"
    await workos.aclose()


@pytest.mark.parametrize(
    "filters",
    [{}, {"organization_id": "org_1", "user_id": "user_1"}],
)
def test_list_memberships_requires_exactly_one_filter(filters):
    with pytest.raises(ValidationError):
        ListOrganizationMembershipsParams(**filters)


@pytest.mark.asyncio
@respx.mock
async def test_unknown_membership_status_is_kept_as_string():
    workos = _workos()
    respx.get(f"{MEMBERSHIPS_URL}/om_1").respond(200, json={**MEMBERSHIP, "status": "suspended"})

    membership = await workos.user_management.get_organization_membership("om_1")

    assert membership.status == "suspended"
    assert not isinstance(membership.status, OrganizationMembershipStatus)
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_update_membership_sends_role_slug_only():
    workos = _workos()
    route = respx.put(f"{MEMBERSHIPS_URL}/om_1").respond(
        200, json={**MEMBERSHIP, "role": {"slug": "admin"}}
    )

    membership = await workos.user_management.update_organization_membership(
        UpdateOrganizationMembershipParams(organization_membership_id="om_1", role_slug="admin")
    )

    assert json.loads(route.calls.last.request.content) == {"role_slug": "admin"}
    assert membership.role.slug == "admin"
    await workos.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_deactivate_and_reactivate_membership():
    workos = _workos()
    deactivate = respx.post(f"{MEMBERSHIPS_URL}/om_1/deactivate").respond(
        200, json={**MEMBERSHIP, "status": "inactive"}
    )
    reactivate = respx.post(f"{MEMBERSHIPS_URL}/om_1/reactivate").respond(200, json=MEMBERSHIP)

    inactive = await workos.user_management.deactivate_organization_membership("om_1")
    active = await workos.user_management.reactivate_organization_membership("om_1")

    assert inactive.status is OrganizationMembershipStatus.INACTIVE
    assert active.status is OrganizationMembershipStatus.ACTIVE
    assert deactivate.call_count == 1 and reactivate.call_count == 1
    await workos.aclose()
