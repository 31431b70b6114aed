from __future__ import annotations

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import ClickShareCoordinator
from .entity import ClickShareEntity
from .models import Snapshot


def read_only_statistics(snapshot: Snapshot | None) -> list[str]:
    """Return statistics names that have no matching control."""
    if snapshot is None:
        return []
    controlled = {control.name for control in snapshot.controls}
    return [name for name in snapshot.statistics if name not in controlled]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up ClickShare sensor entities for read-only statistics."""
    coordinator: ClickShareCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    async_add_entities(
        ClickShareStatisticSensor(entry, coordinator, name)
        for name in read_only_statistics(coordinator.data)
    )


class ClickShareStatisticSensor(ClickShareEntity, SensorEntity):
    """Diagnostic sensor for one statistics entry."""

    _attr_entity_category = EntityCategory.DIAGNOSTIC

    @property
    def native_value(self) -> str | None:
        """Return the statistics value."""
        if not self.coordinator.data:
            return None
        return self.coordinator.data.statistics.get(self._property_name)
