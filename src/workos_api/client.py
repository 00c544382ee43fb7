"""HTTP client for the WorkOS REST API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import SecretStr

from .config import Settings
from .directory_sync import DirectorySync
from .errors import ConfigurationError, NetworkError, UrlConstructionError
from .fga import Fga
from .mfa import Mfa
from .organization_domains import OrganizationDomains
from .organizations import Organizations
from .portal import Portal
from .response import classify_response, decode_response
from .user_management import UserManagement
from .widgets import Widgets

logger = logging.getLogger(__name__)


def _secret_value(value: SecretStr | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    return str(value)


def _parse_base_url(value: str) -> httpx.URL:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise UrlConstructionError(f"invalid_base_url: {value!r}") from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise UrlConstructionError(f"invalid_base_url: {value!r}")
    return url


class WorkOS:
    """Client handle shared by every WorkOS operation.

    The handle is read-only after construction: the API key, the parsed base
    URL and the underlying ``httpx.AsyncClient`` are never mutated by an
    operation, so any number of calls may be awaited concurrently.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.base_url = _parse_base_url(self.settings.base_url)
        self.http = http or httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=self.settings.connect_timeout,
                read=self.settings.read_timeout,
                write=self.settings.write_timeout,
                pool=self.settings.pool_timeout,
            ),
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> WorkOS:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def api_key(self) -> str:
        key = _secret_value(self.settings.api_key).strip()
        if not key:
            raise ConfigurationError("workos_api_key_missing")
        return key

    def url(self, path: str) -> httpx.URL:
        """Join ``path`` onto the base URL."""
        try:
            return self.base_url.join(path)
        except httpx.InvalidURL as exc:
            raise UrlConstructionError(f"invalid_path: {path!r}") from exc

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        content: str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
        authenticated: bool = True,
        token: str | None = None,
    ) -> httpx.Response:
        """Issue one request and return the raw, unclassified response.

        ``token`` replaces the API key as bearer credential for this request
        only. With ``authenticated=False`` no ``Authorization`` header is sent.
        """
        url = self.url(path)
        request_headers = {"Accept": "application/json"}
        if authenticated:
            request_headers["Authorization"] = f"Bearer {token or self.api_key}"
        if headers:
            request_headers.update(headers)

        logger.debug("workos_request method=%s path=%s", method, url.path)
        try:
            return await self.http.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                content=content,
                headers=request_headers,
            )
        except httpx.TimeoutException as exc:
            raise NetworkError(f"workos_timeout: Request to {url.path} timed out") from exc
        except httpx.InvalidURL as exc:
            raise UrlConstructionError(f"invalid_url: {url}") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"workos_connection_failed: {exc}") from exc

    async def call(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Send, classify, and decode into ``response_type``.

        With no ``response_type`` the body is never read and ``None`` is
        returned, which is how side-effect-only endpoints (204) are handled.
        """
        response = classify_response(await self.send(method, path, **kwargs))
        if response_type is None:
            return None
        return decode_response(response, response_type)

    @property
    def directory_sync(self) -> DirectorySync:
        return DirectorySync(self)

    @property
    def fga(self) -> Fga:
        return Fga(self)

    @property
    def mfa(self) -> Mfa:
        return Mfa(self)

    @property
    def organizations(self) -> Organizations:
        return Organizations(self)

    @property
    def organization_domains(self) -> OrganizationDomains:
        return OrganizationDomains(self)

    @property
    def portal(self) -> Portal:
        return Portal(self)

    @property
    def user_management(self) -> UserManagement:
        return UserManagement(self)

    @property
    def widgets(self) -> Widgets:
        return Widgets(self)
