from __future__ import annotations

from homeassistant.components.text import TextEntity
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
    """Set up ClickShare text entities."""
    coordinator: ClickShareCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    async_add_entities(
        ClickShareText(entry, coordinator, control.name)
        for control in controls_of_kind(coordinator, "text")
    )


class ClickShareText(ClickShareEntity, TextEntity):
    """Text entity for messages and room names."""

    @property
    def native_value(self) -> str | None:
        """Return the current text."""
        descriptor = self.descriptor
        if descriptor is None:
            return None
        return str(descriptor.value)

    async def async_set_value(self, value: str) -> None:
        """Write the new text to the device."""
        await self.coordinator.async_control(self._property_name, value)
