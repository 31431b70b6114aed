"""Session state and request routing for one ClickShare base unit."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from typing import Any

from .api import ClickShareClient, UnsupportedVersionError
from .const import CONTROL_COOLDOWN, POWER_STATUS_NAME, REBOOT_NAME, STANDBY_NAME
from .endpoints import (
    ENCODE_RAW,
    V1,
    V1_DISPLAY_RESOLUTION,
    V1_RESTART_SYSTEM,
    V2_OPERATIONS_REBOOT,
    V2_OPERATIONS_STANDBY,
    ControlOperation,
    EndpointSpec,
    control_table,
    encode_value,
    is_v2,
    match_display_resolution,
    normalize_version,
    parse_minor_version,
)
from .models import Snapshot
from .statistics import V1SnapshotBuilder, V2SnapshotBuilder

_LOGGER = logging.getLogger(__name__)

WRITE_OK = 200
ACTION_ACCEPTED = 202


def _response_status(response: Any) -> int | None:
    if isinstance(response, dict):
        status = response.get("status")
        if isinstance(status, int) and not isinstance(status, bool):
            return status
        if isinstance(status, str) and status.isdigit():
            return int(status)
    return None


class ClickShareDevice:
    """Version-aware adapter for one ClickShare unit.

    All network interaction with the unit runs under a single lock so a poll
    and a control never overlap. After any control write, polls arriving
    within the cooldown window are answered from the cached snapshot.
    """

    def __init__(self, client: ClickShareClient, cooldown: float = CONTROL_COOLDOWN) -> None:
        self._client = client
        self._cooldown = cooldown
        self._lock = asyncio.Lock()
        self._version: str | None = None
        self._snapshot: Snapshot | None = None
        self._last_control: float | None = None
        self.model: str | None = None

    @property
    def client(self) -> ClickShareClient:
        """Return the API client."""
        return self._client

    @property
    def version(self) -> str | None:
        """Return the resolved API version, e.g. ``v2`` or ``v1.14``."""
        return self._version

    @property
    def snapshot(self) -> Snapshot | None:
        """Return the cached snapshot."""
        return self._snapshot

    @property
    def in_cooldown(self) -> bool:
        """Return True while polls are still suppressed after a control."""
        if self._last_control is None:
            return False
        return time.monotonic() - self._last_control < self._cooldown

    async def async_resolve_version(self) -> str:
        """Resolve the API version, querying the device only once."""
        async with self._lock:
            return await self._async_resolve_version()

    async def _async_resolve_version(self) -> str:
        if self._version is not None:
            return self._version

        versions = await self._client.async_get_supported_versions()
        if not versions or not versions[-1].strip():
            raise UnsupportedVersionError("Unable to retrieve a supported ClickShare API version")

        version = normalize_version(versions[-1])
        if not is_v2(version):
            parse_minor_version(version)

        _LOGGER.debug("ClickShare %s supports API %s", self._client.host, version)
        self._version = version
        return version

    async def async_get_snapshot(self) -> Snapshot:
        """Return the current device snapshot.

        The first call always queries the device. Later calls inside the
        control cooldown return the cached snapshot without network traffic.
        A failed poll leaves the cached snapshot untouched.
        """
        async with self._lock:
            version = await self._async_resolve_version()
            if self._snapshot is not None and self.in_cooldown:
                _LOGGER.debug("Device is occupied. Skipping statistics refresh call")
                return self._snapshot.copy()

            if is_v2(version):
                builder: V1SnapshotBuilder | V2SnapshotBuilder = V2SnapshotBuilder(self, version)
            else:
                builder = V1SnapshotBuilder(self, version)

            self._snapshot = await builder.async_build()
            return self._snapshot.copy()

    async def async_control(self, name: str, value: Any) -> bool | None:
        """Apply one control and return whether the device accepted it.

        Unknown property names are logged and ignored; those return None.
        """
        async with self._lock:
            version = await self._async_resolve_version()

            index = match_display_resolution(name)
            if index is not None:
                return await self._async_write(
                    ControlOperation(V1_DISPLAY_RESOLUTION, ENCODE_RAW),
                    version,
                    name,
                    value,
                    index=index,
                )

            if name == REBOOT_NAME:
                return await self._async_reboot(version)
            if name == STANDBY_NAME and is_v2(version):
                return await self._async_action(V2_OPERATIONS_STANDBY, version)

            operation = control_table(version).get(name)
            if operation is None:
                _LOGGER.warning("Operation %s with value %s is not supported", name, value)
                return None

            success = await self._async_write(operation, version, name, value)
            if success and name == STANDBY_NAME and self._snapshot is not None:
                # v1 units report the standby transition late
                self._snapshot.statistics[POWER_STATUS_NAME] = (
                    "On" if str(value) == "0" else "Standby"
                )
            return success

    async def async_control_many(self, controls: Iterable[tuple[str, Any]] | None) -> list[bool | None]:
        """Apply controls in order, each under its own lock acquisition."""
        pairs = list(controls) if controls is not None else []
        if not pairs:
            raise ValueError("Controllable properties cannot be null or empty")

        results = []
        for name, value in pairs:
            results.append(await self.async_control(name, value))
        return results

    async def async_write_setting(self, endpoint: EndpointSpec, value: str) -> bool:
        """Write one setting while the caller already holds the device lock."""
        version = self._version
        if version is None:
            raise UnsupportedVersionError("API version has not been resolved")
        return await self._async_send_write(endpoint, version, value) == WRITE_OK

    async def _async_send_write(
        self,
        endpoint: EndpointSpec,
        version: str,
        value: str,
        index: str | None = None,
    ) -> int | None:
        path = endpoint.path_for(version, index)
        try:
            if endpoint.generation == V1:
                response = await self._client.async_put(path, endpoint.payload_key, value)
            else:
                response = await self._client.async_patch(path, endpoint.payload_key, value)
        finally:
            self._last_control = time.monotonic()
        return _response_status(response)

    async def _async_write(
        self,
        operation: ControlOperation,
        version: str,
        name: str,
        value: Any,
        index: str | None = None,
    ) -> bool:
        encoded = encode_value(operation.encoding, value)
        status = await self._async_send_write(operation.endpoint, version, encoded, index)
        success = status == WRITE_OK
        if success:
            if self._snapshot is not None:
                self._snapshot.apply_control(name, encoded, value)
        else:
            _LOGGER.warning("Device rejected %s=%s (status %s)", name, encoded, status)
        return success

    async def _async_action(self, endpoint: EndpointSpec, version: str) -> bool:
        try:
            response = await self._client.async_post(endpoint.path_for(version))
        finally:
            self._last_control = time.monotonic()
        return _response_status(response) == ACTION_ACCEPTED

    async def _async_reboot(self, version: str) -> bool:
        if is_v2(version):
            return await self._async_action(V2_OPERATIONS_REBOOT, version)
        status = await self._async_send_write(V1_RESTART_SYSTEM, version, "true")
        return status == WRITE_OK
