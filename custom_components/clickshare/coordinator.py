from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import ClickShareAuthError, ClickShareError
from .const import DOMAIN, SCAN_INTERVAL
from .device import ClickShareDevice
from .models import Snapshot

_LOGGER = logging.getLogger(__name__)


class ClickShareCoordinator(DataUpdateCoordinator[Snapshot]):
    """Coordinator for one ClickShare base unit."""

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        device: ClickShareDevice,
    ) -> None:
        """Initialize the coordinator."""
        self._device = device
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=f"{DOMAIN}_{entry.entry_id}",
            update_interval=timedelta(seconds=SCAN_INTERVAL),
        )

    @property
    def device(self) -> ClickShareDevice:
        """Return the device adapter."""
        return self._device

    async def async_control(self, name: str, value: Any) -> None:
        """Send a control to the device and publish the patched snapshot."""
        try:
            success = await self._device.async_control(name, value)
        except ClickShareError as ex:
            raise HomeAssistantError(f"Unable to set {name}: {ex}") from ex

        snapshot = self._device.snapshot
        if snapshot is not None:
            self.async_set_updated_data(snapshot.copy())
        if success is False:
            raise HomeAssistantError(f"ClickShare rejected {name}={value}")

    async def _async_update_data(self) -> Snapshot:
        """Fetch data from the device."""
        try:
            return await self._device.async_get_snapshot()
        except ClickShareAuthError as ex:
            raise UpdateFailed(f"Authentication failed: {ex}") from ex
        except ClickShareError as ex:
            raise UpdateFailed(f"Error communicating with ClickShare: {ex}") from ex
