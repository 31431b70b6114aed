from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol
from homeassistant.config_entries import ConfigEntry, ConfigFlow, FlowResult, OptionsFlow
from homeassistant.const import CONF_HOST, CONF_NAME, CONF_PASSWORD, CONF_PORT, CONF_USERNAME
from homeassistant.core import callback

from .api import (
    ClickShareAuthError,
    ClickShareClient,
    ClickShareError,
    UnsupportedVersionError,
)
from .const import (
    CONF_ENABLE_DEBUG_LOGGING,
    CONF_USE_SSL,
    CONF_VERIFY_SSL,
    DEFAULT_ENABLE_DEBUG_LOGGING,
    DEFAULT_NAME,
    DEFAULT_PORT,
    DEFAULT_USE_SSL,
    DEFAULT_VERIFY_SSL,
    DOMAIN,
)
from .device import ClickShareDevice

_LOGGER = logging.getLogger(__name__)

USER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): str,
        vol.Optional(CONF_PORT, default=DEFAULT_PORT): int,
        vol.Required(CONF_USERNAME): str,
        vol.Required(CONF_PASSWORD): str,
        vol.Optional(CONF_USE_SSL, default=DEFAULT_USE_SSL): bool,
        vol.Optional(CONF_VERIFY_SSL, default=DEFAULT_VERIFY_SSL): bool,
        vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
    }
)


async def validate_connection(data: dict[str, Any]) -> str:
    """Resolve the device API version; raises ClickShareError on failure."""
    client = ClickShareClient(
        host=data[CONF_HOST],
        port=data.get(CONF_PORT, DEFAULT_PORT),
        username=data[CONF_USERNAME],
        password=data[CONF_PASSWORD],
        use_ssl=data.get(CONF_USE_SSL, DEFAULT_USE_SSL),
        verify_ssl=data.get(CONF_VERIFY_SSL, DEFAULT_VERIFY_SSL),
    )
    return await ClickShareDevice(client).async_resolve_version()


class ClickShareConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Barco ClickShare."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle manual configuration."""
        errors: dict[str, str] = {}

        if user_input is not None:
            host = user_input[CONF_HOST]
            try:
                version = await validate_connection(user_input)
            except ClickShareAuthError:
                errors["base"] = "invalid_auth"
            except UnsupportedVersionError:
                errors["base"] = "unsupported_version"
            except ClickShareError:
                errors["base"] = "cannot_connect"
            else:
                _LOGGER.debug("ClickShare at %s answered with API %s", host, version)
                await self.async_set_unique_id(f"clickshare_{host}")
                self._abort_if_unique_id_configured()

                return self.async_create_entry(
                    title=user_input.get(CONF_NAME, DEFAULT_NAME),
                    data={
                        CONF_HOST: host,
                        CONF_PORT: user_input.get(CONF_PORT, DEFAULT_PORT),
                        CONF_NAME: user_input.get(CONF_NAME, DEFAULT_NAME),
                        CONF_USERNAME: user_input[CONF_USERNAME],
                        CONF_PASSWORD: user_input[CONF_PASSWORD],
                        CONF_USE_SSL: user_input.get(CONF_USE_SSL, DEFAULT_USE_SSL),
                        CONF_VERIFY_SSL: user_input.get(CONF_VERIFY_SSL, DEFAULT_VERIFY_SSL),
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=USER_SCHEMA,
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> OptionsFlow:
        """Return the options flow."""
        return ClickShareOptionsFlow()


class ClickShareOptionsFlow(OptionsFlow):
    """Options for an existing ClickShare entry."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Manage the options."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Optional(
                        CONF_ENABLE_DEBUG_LOGGING,
                        default=self.config_entry.options.get(
                            CONF_ENABLE_DEBUG_LOGGING, DEFAULT_ENABLE_DEBUG_LOGGING
                        ),
                    ): bool,
                }
            ),
        )
