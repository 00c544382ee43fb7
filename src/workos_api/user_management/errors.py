"""Errors for the user-management authenticate endpoints.

Authenticate endpoints report failures as ``{"error": ..., "error_description": ...}``
bodies, usually with HTTP 400. The ``error`` string decides the error type,
not the status code.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from ..errors import OperationError, UnauthorizedError
from ..response import classify_response

UNAUTHORIZED_ERROR_CODES = frozenset({"invalid_client", "unauthorized_client"})


class AuthenticateError(OperationError):
    """An authenticate failure reported with an ``error`` code."""

    def __init__(self, error: str, error_description: str) -> None:
        super().__init__(f"{error}: {error_description}")
        self.error = error
        self.error_description = error_description


class DeviceCodeError(AuthenticateError):
    """Base for the device-code grant's named polling outcomes."""

    code = ""

    def __init__(self, error_description: str) -> None:
        super().__init__(self.code, error_description)


class AuthorizationPendingError(DeviceCodeError):
    """The user has not finished; keep polling at the given interval."""

    code = "authorization_pending"


class SlowDownError(DeviceCodeError):
    """Polling too often; add at least five seconds to the interval."""

    code = "slow_down"


class AccessDeniedError(DeviceCodeError):
    """The user declined; stop polling."""

    code = "access_denied"


class ExpiredTokenError(DeviceCodeError):
    """The device code expired; restart the flow."""

    code = "expired_token"


DEVICE_CODE_ERRORS: dict[str, type[DeviceCodeError]] = {
    cls.code: cls
    for cls in (AuthorizationPendingError, SlowDownError, AccessDeniedError, ExpiredTokenError)
}


def _error_payload(response: httpx.Response) -> dict[str, Any] | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def classify_authenticate_response(
    response: httpx.Response,
    named_errors: Mapping[str, type[DeviceCodeError]] | None = None,
) -> httpx.Response:
    """Classify an authenticate response.

    ``invalid_client`` and ``unauthorized_client`` mean the credential was
    rejected. Codes in ``named_errors`` raise their own type. Any other
    ``error``/``error_description`` pair raises ``AuthenticateError``. Bodies
    of any other shape fall through to ``classify_response``.
    """
    if response.status_code == 401:
        raise UnauthorizedError()
    if response.is_error:
        payload = _error_payload(response)
        if payload is not None:
            error = payload.get("error")
            description = payload.get("error_description")
            if isinstance(error, str) and error in UNAUTHORIZED_ERROR_CODES:
                raise UnauthorizedError(error)
            if isinstance(error, str) and isinstance(description, str):
                error_type = (named_errors or {}).get(error)
                if error_type is not None:
                    raise error_type(description)
                raise AuthenticateError(error, description)
    return classify_response(response)
