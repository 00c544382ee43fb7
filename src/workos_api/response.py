"""Classification and decoding of WorkOS HTTP responses."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import JsonBody, JsonOrText, NetworkError, TextBody, UnauthorizedError, UnknownError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def classify_response(response: httpx.Response) -> httpx.Response:
    """Return ``response`` when it succeeded, otherwise raise the matching error.

    A 401 is always ``UnauthorizedError`` and its body is never inspected.
    Any other error status becomes ``UnknownError`` with the body kept as
    JSON when it parses, or as text when it does not.
    """
    if response.status_code == 401:
        raise UnauthorizedError()
    if response.is_error:
        body = read_error_body(response)
        logger.warning(
            "workos_unknown_error status=%s path=%s",
            response.status_code,
            response.request.url.path if _has_request(response) else "",
        )
        raise UnknownError(response.status_code, body)
    return response


def read_error_body(response: httpx.Response) -> JsonOrText:
    try:
        return JsonBody(response.json())
    except ValueError:
        # json errors and UnicodeDecodeError are both ValueError; .text never raises
        return TextBody(response.text)


def decode_response(response: httpx.Response, type_: Any) -> Any:
    """Decode a successful response body into ``type_``.

    A body that does not match is reported as ``NetworkError``: the server
    accepted the request, but the exchange produced nothing usable.
    """
    try:
        return _type_adapter(type_).validate_json(response.content)
    except ValidationError as exc:
        raise NetworkError(
            f"invalid_response_body: {exc.error_count()} validation error(s)"
        ) from exc


@lru_cache(maxsize=None)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _has_request(response: httpx.Response) -> bool:
    try:
        response.request
    except RuntimeError:
        return False
    return True
