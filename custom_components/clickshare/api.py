"""Barco ClickShare REST API client implementation.

The device serves two API generations from the same port: the legacy
``v1.N`` resources (CSE series) and the unified ``v2`` resources (CX series).
This module only knows how to talk HTTP to the box; routing between the
generations lives in ``device.py``.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

import aiohttp

from .const import API_SUPPORTED_VERSIONS, DEFAULT_PORT, RESOURCE_MISSING_MARKER

_LOGGER = logging.getLogger(__name__)


class ClickShareError(Exception):
    """Base error for ClickShare communication."""


class ClickShareConnectionError(ClickShareError):
    """Raised when the device cannot be reached."""


class ClickShareCommandError(ClickShareError):
    """Raised when the device rejects a request."""

    def __init__(self, message: str, status: int | None = None, response: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.response = response

    @property
    def resource_missing(self) -> bool:
        """Return True if the firmware does not expose the requested resource."""
        return RESOURCE_MISSING_MARKER in self.response


class ClickShareAuthError(ClickShareCommandError):
    """Raised when the device refuses the credentials."""


class UnsupportedVersionError(ClickShareError):
    """Raised when the device reports no usable API version."""


class ClickShareClient:
    """HTTP API client for a Barco ClickShare base unit.

    Every request carries a Basic-Auth header computed once from the
    configured credentials. PUT and PATCH payloads are sent form-encoded as
    a single ``key=value`` pair, which is what both API generations expect.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        username: str = "",
        password: str = "",
        use_ssl: bool = True,
        verify_ssl: bool = False,
        timeout: float = 10.0,
        session: aiohttp.ClientSession | None = None,
        enable_debug_logging: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            host: IP address or hostname of the base unit
            port: REST API port (4003 for https, 4000 for http on CX units)
            username: API user
            password: API password
            use_ssl: Talk https to the device
            verify_ssl: Verify the device certificate (self-signed by default)
            timeout: Request timeout in seconds
            session: Shared aiohttp session; a short-lived one is used otherwise
            enable_debug_logging: Log every request and response body
        """
        self._host = host
        self._port = port
        self._ssl = None if verify_ssl else False
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._enable_debug_logging = enable_debug_logging
        scheme = "https" if use_ssl else "http"
        self._base_url = f"{scheme}://{host}:{port}"
        credentials = base64.b64encode(f"{username}:{password}".encode("utf-8"))
        self._headers = {"Authorization": f"Basic {credentials.decode('ascii')}"}

    def _debug_log(self, message: str, *args: Any) -> None:
        """Emit debug log only when debug logging option is enabled."""
        if self._enable_debug_logging:
            _LOGGER.debug(message, *args)

    @property
    def host(self) -> str:
        """Return the host."""
        return self._host

    @property
    def base_url(self) -> str:
        """Return the device base URL."""
        return self._base_url

    async def _async_request(
        self,
        method: str,
        path: str,
        data: dict[str, str] | None = None,
    ) -> Any:
        """Send a request to the device and return the decoded JSON body.

        ``data`` is sent as an urlencoded form; aiohttp sets the content type.

        Raises:
            ClickShareConnectionError: the device could not be reached
            ClickShareAuthError: the credentials were refused
            ClickShareCommandError: the device answered with an error status
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = dict(self._headers)

        self._debug_log("%s %s payload=%s", method, url, data)

        try:
            if self._session is not None:
                return await self._async_send(self._session, method, url, headers, data)
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                return await self._async_send(session, method, url, headers, data)
        except ClickShareError:
            raise
        except (aiohttp.ClientError, TimeoutError) as ex:
            raise ClickShareConnectionError(
                f"Error communicating with {self._host}: {ex}"
            ) from ex

    async def _async_send(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        headers: dict[str, str],
        data: dict[str, str] | None,
    ) -> Any:
        async with session.request(
            method,
            url,
            headers=headers,
            data=data,
            ssl=self._ssl,
            timeout=self._timeout,
        ) as response:
            text = await response.text()
            self._debug_log("%s %s -> %s %s", method, url, response.status, text)

            if response.status in (401, 403):
                raise ClickShareAuthError(
                    f"Authentication failed for {url}", response.status, text
                )
            if response.status >= 400:
                raise ClickShareCommandError(
                    f"Request to {url} failed with status {response.status}",
                    response.status,
                    text,
                )
            if not text:
                # v2 action endpoints may answer with an empty body
                return {"status": response.status}

            try:
                return json.loads(text)
            except ValueError as ex:
                raise ClickShareCommandError(
                    f"Invalid JSON from {url}", response.status, text
                ) from ex

    async def async_get(self, path: str) -> Any:
        """Read a resource."""
        return await self._async_request("GET", path)

    async def async_put(self, path: str, key: str, value: str) -> Any:
        """Replace a v1 resource value."""
        return await self._async_request("PUT", path, {key: value})

    async def async_patch(self, path: str, key: str, value: str) -> Any:
        """Update a single field of a v2 resource."""
        return await self._async_request("PATCH", path, {key: value})

    async def async_post(self, path: str) -> Any:
        """Trigger a v2 operation."""
        return await self._async_request("POST", path)

    async def async_get_supported_versions(self) -> list[str]:
        """Return the API versions reported by the device, oldest first."""
        response = await self.async_get(API_SUPPORTED_VERSIONS)
        if not isinstance(response, dict) or response.get("status") != 200:
            return []

        data = response.get("data")
        versions = data.get("value") if isinstance(data, dict) else None
        if not isinstance(versions, list):
            return []
        return [str(version) for version in versions if version is not None]
