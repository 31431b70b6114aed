from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import ClickShareCoordinator
from .entity import ClickShareEntity, controls_of_kind


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up ClickShare action buttons (reboot, standby)."""
    coordinator: ClickShareCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    async_add_entities(
        ClickShareButton(entry, coordinator, control.name)
        for control in controls_of_kind(coordinator, "button")
    )


class ClickShareButton(ClickShareEntity, ButtonEntity):
    """Momentary device operation."""

    async def async_press(self) -> None:
        """Trigger the operation."""
        await self.coordinator.async_control(self._property_name, "")
