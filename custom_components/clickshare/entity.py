from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DEFAULT_NAME, DOMAIN
from .coordinator import ClickShareCoordinator
from .models import ControlDescriptor

MODEL_KEYS = ("Device information#Model name", "Device Information#Model Name")


def entity_name(property_name: str) -> str:
    """Turn a grouped property name into a friendly entity name."""
    group, _, name = property_name.partition("#")
    return f"{group} {name}" if name else group


def entity_key(property_name: str) -> str:
    """Return a stable unique id suffix for a property name."""
    return "".join(c if c.isalnum() else "_" for c in property_name.lower()).strip("_")


class ClickShareEntity(CoordinatorEntity[ClickShareCoordinator]):
    """Base class for entities backed by one ClickShare property."""

    _attr_has_entity_name = True

    def __init__(
        self,
        entry: ConfigEntry,
        coordinator: ClickShareCoordinator,
        property_name: str,
    ) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self._entry = entry
        self._property_name = property_name
        self._attr_name = entity_name(property_name)
        self._attr_unique_id = f"{entry.entry_id}_{entity_key(property_name)}"

    @property
    def device_info(self):
        """Return device info."""
        model = self.coordinator.device.model
        if not model and self.coordinator.data:
            for key in MODEL_KEYS:
                model = self.coordinator.data.statistics.get(key)
                if model:
                    break
        return {
            "identifiers": {(DOMAIN, self._entry.entry_id)},
            "manufacturer": "Barco",
            "model": model or "ClickShare",
            "name": self._entry.data.get(CONF_NAME, DEFAULT_NAME),
            "sw_version": f"API {self.coordinator.device.version}",
        }

    @property
    def available(self) -> bool:
        """Return True if entity is available."""
        return self.coordinator.last_update_success

    @property
    def descriptor(self) -> ControlDescriptor | None:
        """Return the current control descriptor for this property."""
        if not self.coordinator.data:
            return None
        return self.coordinator.data.control(self._property_name)


def controls_of_kind(coordinator: ClickShareCoordinator, kind: str) -> list[ControlDescriptor]:
    """Return the controls of one kind from the latest snapshot."""
    if not coordinator.data:
        return []
    return [control for control in coordinator.data.controls if control.kind == kind]
