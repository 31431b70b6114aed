from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_PASSWORD, CONF_PORT, CONF_USERNAME
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryAuthFailed, ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import ClickShareAuthError, ClickShareClient, ClickShareError
from .const import (
    CONF_ENABLE_DEBUG_LOGGING,
    CONF_USE_SSL,
    CONF_VERIFY_SSL,
    DEFAULT_ENABLE_DEBUG_LOGGING,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_USE_SSL,
    DEFAULT_VERIFY_SSL,
    DOMAIN,
    PLATFORMS,
)
from .coordinator import ClickShareCoordinator
from .device import ClickShareDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Barco ClickShare from a config entry."""
    hass.data.setdefault(DOMAIN, {})

    verify_ssl = entry.data.get(CONF_VERIFY_SSL, DEFAULT_VERIFY_SSL)
    client = ClickShareClient(
        host=entry.data[CONF_HOST],
        port=entry.data.get(CONF_PORT, DEFAULT_PORT),
        username=entry.data[CONF_USERNAME],
        password=entry.data[CONF_PASSWORD],
        use_ssl=entry.data.get(CONF_USE_SSL, DEFAULT_USE_SSL),
        verify_ssl=verify_ssl,
        timeout=DEFAULT_TIMEOUT,
        session=async_get_clientsession(hass, verify_ssl=verify_ssl),
        enable_debug_logging=entry.options.get(
            CONF_ENABLE_DEBUG_LOGGING, DEFAULT_ENABLE_DEBUG_LOGGING
        ),
    )
    device = ClickShareDevice(client)

    try:
        await device.async_resolve_version()
    except ClickShareAuthError as ex:
        raise ConfigEntryAuthFailed(str(ex)) from ex
    except ClickShareError as ex:
        raise ConfigEntryNotReady(f"Unable to connect to {client.host}: {ex}") from ex

    coordinator = ClickShareCoordinator(hass, entry, device)
    await coordinator.async_config_entry_first_refresh()

    hass.data[DOMAIN][entry.entry_id] = {
        "client": client,
        "device": device,
        "coordinator": coordinator,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unloaded:
        hass.data[DOMAIN].pop(entry.entry_id, None)
    return unloaded


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload config entry."""
    await hass.config_entries.async_reload(entry.entry_id)
