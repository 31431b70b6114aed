from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import ClickShareCoordinator
from .entity import ClickShareEntity, controls_of_kind
from .models import as_bool


def switch_state(value: Any) -> bool:
    """Interpret a switch value from a poll ("true") or a control ("1"/1)."""
    if isinstance(value, str) and value.strip() in ("0", "1"):
        return value.strip() == "1"
    return as_bool(value)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up ClickShare switch entities."""
    coordinator: ClickShareCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    async_add_entities(
        ClickShareSwitch(entry, coordinator, control.name)
        for control in controls_of_kind(coordinator, "switch")
    )


class ClickShareSwitch(ClickShareEntity, SwitchEntity):
    """Switch entity for one on/off property."""

    @property
    def is_on(self) -> bool | None:
        """Return True if the feature is enabled."""
        descriptor = self.descriptor
        if descriptor is None:
            return None
        return switch_state(descriptor.value)

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Enable the feature."""
        await self.coordinator.async_control(self._property_name, 1)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Disable the feature."""
        await self.coordinator.async_control(self._property_name, 0)
