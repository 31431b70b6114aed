from __future__ import annotations

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import ClickShareCoordinator
from .entity import ClickShareEntity, controls_of_kind
from .models import DropdownControl


def option_to_label(control: DropdownControl, value: str) -> str | None:
    """Map a device value to the label shown for it."""
    for option, label in zip(control.options, control.labels):
        if option == value:
            return label
    return None


def label_to_option(control: DropdownControl, label: str) -> str:
    """Map a shown label back to the value sent to the device."""
    for option, option_label in zip(control.options, control.labels):
        if option_label == label:
            return option
    return label


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up ClickShare dropdown entities."""
    coordinator: ClickShareCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    async_add_entities(
        ClickShareSelect(entry, coordinator, control.name)
        for control in controls_of_kind(coordinator, "dropdown")
    )


class ClickShareSelect(ClickShareEntity, SelectEntity):
    """Select entity for one dropdown property."""

    @property
    def options(self) -> list[str]:
        """Return the labels offered by the device."""
        descriptor = self.descriptor
        if descriptor is None or not isinstance(descriptor.control, DropdownControl):
            return []
        return list(descriptor.control.labels)

    @property
    def current_option(self) -> str | None:
        """Return the label of the current value."""
        descriptor = self.descriptor
        if descriptor is None or not isinstance(descriptor.control, DropdownControl):
            return None
        return option_to_label(descriptor.control, str(descriptor.value))

    async def async_select_option(self, option: str) -> None:
        """Send the selected option to the device."""
        descriptor = self.descriptor
        value = option
        if descriptor is not None and isinstance(descriptor.control, DropdownControl):
            value = label_to_option(descriptor.control, option)
        await self.coordinator.async_control(self._property_name, value)
