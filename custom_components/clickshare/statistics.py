"""Build statistics and control snapshots from the ClickShare REST API.

v2 units expose one resource per subsystem. v1 units expose a growing set of
resources as the firmware minor version increases; each block below is only
queried when the device reports at least the block's minor version.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .api import ClickShareCommandError
from .const import (
    AIRPLAY_NAME,
    AUDIO_NAME,
    AUDIO_OUTPUT_MODES,
    AUDIO_OUTPUT_NAME,
    BLACKBOARD_SAVING_NAME,
    CLICKSHARE_NAME,
    CSE200,
    CSE200_ENERGY_MODES,
    CSE800,
    CSE800_DISPLAY_TIMEOUTS,
    CSE800_ENERGY_MODES_LABELS,
    DEEP_STANDBY_V1,
    DEEP_STANDBY_V2,
    DEVICE_STATUSES,
    DISPLAY_HOTPLUG_NAME,
    DISPLAY_OUTPUT_RESOLUTION_NAME,
    DISPLAY_STANDBY_NAME,
    DISPLAY_TIMEOUT_NAME,
    DISPLAY_WALLPAPER_NAME,
    ECO_STANDBY_V1,
    ECO_STANDBY_V2,
    ENERGY_MODES,
    GOOGLECAST_NAME,
    LANGUAGE_NAME,
    MEETING_ROOM_NAME,
    MIRACAST_NAME,
    ONSCREEN_LANGUAGE_NAME,
    ONSCREEN_MEETING_ROOM_INFO_NAME,
    ONSCREEN_MEETING_ROOM_NAME,
    ONSCREEN_NETWORK_INFO_NAME,
    ONSCREEN_WELCOME_MESSAGE_NAME,
    POWER_MODE_NAME,
    POWER_STATUS_NAME,
    REBOOT_NAME,
    SCREENSAVER_MODE_NAME,
    SCREENSAVER_MODE_NAMES,
    SCREENSAVER_TIMEOUT_NAME,
    SOFTWARE_UPDATE_NAME,
    SOFTWARE_UPDATE_TYPES,
    STANDBY_NAME,
    STANDBY_TIMEOUT_NAME,
    TIMEOUTS,
    V1_REBOOT_GRACE_PERIOD,
    V2_REBOOT_GRACE_PERIOD,
    VIDEO_MODE_NAME,
    WELCOME_MESSAGE_NAME,
)
from .endpoints import (
    EndpointSpec,
    V1_11_CPU_FAN_SPEED,
    V1_11_DISPLAY_CEC,
    V1_11_WLAN_IP_ADDRESS,
    V1_11_WLAN_SUBNET_MASK,
    V1_13_ENABLE_MIRACAST,
    V1_14_SCREEN_SAVER_MODE,
    V1_5_AUDIO_OUTPUT,
    V1_5_ENERGY_MODE,
    V1_6_SYSTEM_STATE,
    V1_7_BLACKBOARD_SAVING,
    V1_7_UPDATE_TYPE,
    V1_8_ENABLE_AIRPLAY,
    V1_8_ENABLE_CLICKSHARE_APP,
    V1_8_ENABLE_GOOGLECAST,
    V1_AUDIO_ENABLED,
    V1_DEVICE_INFO,
    V1_DISPLAY,
    V1_ON_SCREEN_TEXT,
    V2_AIRPLAY,
    V2_AUDIO_OUTPUT,
    V2_BLACKBOARD,
    V2_DEVICE_IDENTITY,
    V2_GOOGLECAST,
    V2_MIRACAST,
    V2_NETWORK,
    V2_OPERATIONS_SUPPORTED,
    V2_PERSONALIZATION,
    V2_POWER_MANAGEMENT,
    V2_VIDEO,
    parse_minor_version,
)
from .models import (
    Snapshot,
    V1DeviceInfo,
    V1Display,
    V1OnScreenText,
    V2Audio,
    V2DeviceIdentity,
    V2Feature,
    V2Network,
    V2NetworkConfiguration,
    V2Personalization,
    V2PowerManagement,
    V2Video,
    add_text_statistic,
    as_bool,
    as_text,
    create_button,
    create_dropdown,
    create_switch,
    create_text,
)

if TYPE_CHECKING:
    from .device import ClickShareDevice

_LOGGER = logging.getLogger(__name__)


class V2SnapshotBuilder:
    """Collect a snapshot from a v2 (CX series) unit."""

    def __init__(self, device: ClickShareDevice, version: str) -> None:
        self._device = device
        self._client = device.client
        self._version = version
        self._snapshot = Snapshot()

    async def _async_get(self, endpoint: EndpointSpec) -> Any:
        return await self._client.async_get(endpoint.path_for(self._version))

    async def async_build(self) -> Snapshot:
        """Query every v2 subsystem and return the assembled snapshot."""
        await self._async_add_operations()
        await self._async_add_power_management()
        await self._async_add_video_mode()
        await self._async_add_audio_mode()
        await self._async_add_network_configuration()
        await self._async_add_device_identity()
        await self._async_add_features()
        await self._async_add_personalization()
        return self._snapshot

    async def _async_add_operations(self) -> None:
        response = await self._async_get(V2_OPERATIONS_SUPPORTED)
        operations = [as_text(item) for item in response] if isinstance(response, list) else []

        if "reboot" in operations:
            self._snapshot.add_control(
                create_button(REBOOT_NAME, REBOOT_NAME, "Rebooting...", V2_REBOOT_GRACE_PERIOD)
            )
        if "standby" in operations:
            self._snapshot.add_control(
                create_button(STANDBY_NAME, STANDBY_NAME, "Processing...", 0)
            )

    async def _async_add_power_management(self) -> None:
        power = V2PowerManagement.from_dict(await self._async_get(V2_POWER_MANAGEMENT))

        power_mode = power.power_mode
        if power_mode == DEEP_STANDBY_V2:
            _LOGGER.debug(
                "The device power mode is set to '%s'. Requesting change to '%s'",
                DEEP_STANDBY_V2,
                ECO_STANDBY_V2,
            )
            await self._device.async_write_setting(V2_POWER_MANAGEMENT, ECO_STANDBY_V2)
            power_mode = ECO_STANDBY_V2

        power_modes = [
            mode for mode in power.supported_power_modes if mode.lower() != DEEP_STANDBY_V2.lower()
        ]
        self._snapshot.add_control(
            create_dropdown(POWER_MODE_NAME, power_mode, power_modes), power_mode
        )
        self._snapshot.add_control(
            create_dropdown(
                STANDBY_TIMEOUT_NAME, power.standby_timeout, power.supported_standby_timeouts
            ),
            power.standby_timeout,
        )
        self._snapshot.add_control(
            create_dropdown(POWER_STATUS_NAME, power.status, power.supported_statuses),
            power.status,
        )

    async def _async_add_video_mode(self) -> None:
        video = V2Video.from_dict(await self._async_get(V2_VIDEO))
        self._snapshot.add_control(
            create_dropdown(VIDEO_MODE_NAME, video.mode, video.supported_modes), video.mode
        )

    async def _async_add_audio_mode(self) -> None:
        audio = V2Audio.from_dict(await self._async_get(V2_AUDIO_OUTPUT))
        self._snapshot.add_control(
            create_dropdown(AUDIO_OUTPUT_NAME, audio.output, audio.supported_outputs),
            audio.output,
        )
        self._snapshot.add_control(
            create_switch(AUDIO_NAME, "enabled", "disabled", audio.enabled),
            audio.enabled_text,
        )

    async def _async_add_network_configuration(self) -> None:
        network = V2Network.from_dict(await self._async_get(V2_NETWORK))
        statistics = self._snapshot.statistics

        add_text_statistic(statistics, "Network configuration#Hostname", network.hostname)
        statistics["Network configuration#Proxy"] = (
            "enabled" if network.proxy_enabled else "disabled"
        )
        if network.proxy_enabled:
            add_text_statistic(
                statistics,
                "Network configuration#Proxy server address",
                network.proxy_server_address,
            )
            add_text_statistic(
                statistics, "Network configuration#Proxy username", network.proxy_username
            )

        add_text_statistic(
            statistics, "Network configuration#DHCP Domain name", network.dhcp_domain_name
        )
        add_text_statistic(
            statistics, "Network configuration#DHCP MAX address", network.dhcp_max_address
        )
        add_text_statistic(
            statistics, "Network configuration#DHCP MIN address", network.dhcp_min_address
        )
        add_text_statistic(
            statistics, "Network configuration#DHCP Subnet mask", network.dhcp_subnet_mask
        )

        self._add_network_interfaces("wired", network.wired)
        self._add_network_interfaces("wireless", network.wireless)

    def _add_network_interfaces(
        self, key: str, configurations: list[V2NetworkConfiguration]
    ) -> None:
        statistics = self._snapshot.statistics
        for configuration in configurations:
            prefix = f"Network configuration: {key}#Configuration {configuration.id}"
            add_text_statistic(statistics, f"{prefix} Operation Mode", configuration.operation_mode)
            add_text_statistic(statistics, f"{prefix} Addressing", configuration.addressing)
            add_text_statistic(statistics, f"{prefix} Status", configuration.status)
            add_text_statistic(statistics, f"{prefix} Ip Address", configuration.ip_address)
            add_text_statistic(statistics, f"{prefix} Subnet Mask", configuration.subnet_mask)
            add_text_statistic(
                statistics, f"{prefix} Default Gateway", configuration.default_gateway
            )
            add_text_statistic(statistics, f"{prefix} MAC Address", configuration.mac_address)

    async def _async_add_device_identity(self) -> None:
        identity = V2DeviceIdentity.from_dict(await self._async_get(V2_DEVICE_IDENTITY))
        statistics = self._snapshot.statistics
        add_text_statistic(statistics, "Device information#Serial number", identity.serial_number)
        add_text_statistic(statistics, "Device information#Article number", identity.article_number)
        add_text_statistic(statistics, "Device information#Model name", identity.model_name)
        add_text_statistic(statistics, "Device information#Product name", identity.product_name)

    async def _async_add_features(self) -> None:
        for name, endpoint in (
            (MIRACAST_NAME, V2_MIRACAST),
            (GOOGLECAST_NAME, V2_GOOGLECAST),
            (AIRPLAY_NAME, V2_AIRPLAY),
            (BLACKBOARD_SAVING_NAME, V2_BLACKBOARD),
        ):
            feature = V2Feature.from_dict(await self._async_get(endpoint), endpoint.payload_key)
            self._snapshot.add_control(
                create_switch(name, "enabled", "disabled", feature.enabled),
                "true" if feature.enabled else "false",
            )

    async def _async_add_personalization(self) -> None:
        personalization = V2Personalization.from_dict(await self._async_get(V2_PERSONALIZATION))
        self._snapshot.add_control(
            create_text(MEETING_ROOM_NAME, personalization.meeting_room_name)
        )
        self._snapshot.add_control(
            create_dropdown(
                LANGUAGE_NAME, personalization.language, personalization.supported_languages
            ),
            personalization.language,
        )
        self._snapshot.add_control(
            create_text(WELCOME_MESSAGE_NAME, personalization.welcome_message),
            personalization.welcome_message,
        )


class V1SnapshotBuilder:
    """Collect a snapshot from a v1.N (CSE series) unit."""

    # Ordered (minimum minor version, block) pairs
    BLOCKS: tuple[tuple[int, str], ...] = (
        (0, "_async_add_device_info"),
        (5, "_async_add_energy_and_audio_output"),
        (6, "_async_add_system_state"),
        (7, "_async_add_blackboard_and_software_update"),
        (8, "_async_add_client_access"),
        (11, "_async_add_network_and_sensors"),
        (13, "_async_add_miracast"),
        (14, "_async_add_screensaver_mode"),
    )

    def __init__(self, device: ClickShareDevice, version: str) -> None:
        self._device = device
        self._client = device.client
        self._version = version
        self._snapshot = Snapshot()

    @classmethod
    def active_blocks(cls, minor: int) -> list[str]:
        """Return the block names a device with the given minor version supports."""
        return [block for threshold, block in cls.BLOCKS if minor >= threshold]

    async def async_build(self) -> Snapshot:
        """Run every block unlocked by the device firmware, lowest first."""
        minor = parse_minor_version(self._version)
        for block in self.active_blocks(minor):
            await getattr(self, block)()
        return self._snapshot

    async def _async_get_value(self, endpoint: EndpointSpec) -> Any:
        """Return ``data.value`` of a v1 resource.

        Older or newer firmware may not expose every resource. The device
        answers those with a "Resource does not exist" error, which only
        means the property is skipped for this poll.
        """
        path = endpoint.path_for(self._version)
        try:
            response = await self._client.async_get(path)
        except ClickShareCommandError as ex:
            if ex.resource_missing:
                _LOGGER.debug(
                    "Unable to fetch data from %s. Resource is not available or deprecated",
                    path,
                )
                return None
            raise

        data = response.get("data") if isinstance(response, dict) else None
        return data.get("value") if isinstance(data, dict) else None

    async def _async_add_device_info(self) -> None:
        info = V1DeviceInfo.from_dict(await self._async_get_value(V1_DEVICE_INFO))
        audio_enabled = await self._async_get_value(V1_AUDIO_ENABLED)
        statistics = self._snapshot.statistics

        if info.model_name:
            self._device.model = info.model_name

        statistics["Device Information#Article Number"] = info.article_number
        statistics["Device Information#Model Name"] = info.model_name
        statistics["Device Information#Serial Number"] = info.serial_number

        statistics["Device Status#Uptime (sec)"] = info.current_uptime
        statistics["Device Status#Uptime Total (sec)"] = info.total_uptime
        statistics["Device Status#First Used"] = info.first_used
        statistics["Device Status#In Use"] = info.in_use
        statistics["Device Status#Status"] = DEVICE_STATUSES.get(info.status, str(info.status))
        statistics["Device Status#Sharing"] = info.sharing
        add_text_statistic(statistics, "Device Status#Status Message", info.status_message)

        statistics["Device Sensors#Cpu Temperature (C)"] = info.cpu_temperature
        statistics["Device Sensors#Pcie Temperature (C)"] = info.pcie_temperature
        statistics["Device Sensors#Sio Temperature (C)"] = info.sio_temperature
        add_text_statistic(statistics, "Last used", info.last_used)

        for process in info.processes:
            statistics[f"Processes#{process.index}. {process.name}"] = process.status

        self._snapshot.add_control(
            create_switch(AUDIO_NAME, "enabled", "disabled", as_bool(audio_enabled))
        )
        self._snapshot.add_control(
            create_button(REBOOT_NAME, REBOOT_NAME, "Rebooting...", V1_REBOOT_GRACE_PERIOD)
        )

        await self._async_add_display()
        await self._async_add_on_screen_text()

    async def _async_add_display(self) -> None:
        display = V1Display.from_dict(await self._async_get_value(V1_DISPLAY))
        snapshot = self._snapshot

        snapshot.add_control(
            create_switch(DISPLAY_STANDBY_NAME, "On", "Off", display.standby_state)
        )
        snapshot.statistics["Display#Display Count"] = display.display_count
        timeouts = CSE800_DISPLAY_TIMEOUTS if self._device.model == CSE800 else TIMEOUTS
        snapshot.add_control(
            create_dropdown(DISPLAY_TIMEOUT_NAME, display.display_timeout, timeouts)
        )
        snapshot.add_control(create_switch(DISPLAY_HOTPLUG_NAME, "On", "Off", display.hot_plug))
        snapshot.add_control(
            create_dropdown(SCREENSAVER_TIMEOUT_NAME, display.screensaver_timeout, TIMEOUTS)
        )
        snapshot.add_control(
            create_switch(DISPLAY_WALLPAPER_NAME, "On", "Off", display.show_wallpaper)
        )

        for output in display.outputs:
            prefix = f"Display#Output {output.index}"
            snapshot.statistics[f"{prefix} Connected"] = output.connected
            snapshot.statistics[f"{prefix} Enabled"] = output.enabled
            snapshot.statistics[f"{prefix} Native Resolution"] = output.native_resolution
            snapshot.statistics[f"{prefix} Port"] = output.port
            snapshot.statistics[f"{prefix} Position"] = output.position
            snapshot.add_control(
                create_dropdown(
                    DISPLAY_OUTPUT_RESOLUTION_NAME.format(index=output.index),
                    output.resolution,
                    output.supported_resolutions,
                ),
                output.resolution,
            )

    async def _async_add_on_screen_text(self) -> None:
        text = V1OnScreenText.from_dict(await self._async_get_value(V1_ON_SCREEN_TEXT))
        snapshot = self._snapshot

        snapshot.statistics["On Screen Text#Location"] = text.location
        snapshot.add_control(
            create_dropdown(ONSCREEN_LANGUAGE_NAME, text.language, text.supported_languages)
        )
        snapshot.add_control(create_text(ONSCREEN_WELCOME_MESSAGE_NAME, text.welcome_message))
        snapshot.add_control(create_text(ONSCREEN_MEETING_ROOM_NAME, text.meeting_room_name))
        snapshot.add_control(
            create_switch(ONSCREEN_MEETING_ROOM_INFO_NAME, "On", "Off", text.show_meeting_room_info)
        )
        snapshot.add_control(
            create_switch(ONSCREEN_NETWORK_INFO_NAME, "On", "Off", text.show_network_info)
        )

    async def _async_add_energy_and_audio_output(self) -> None:
        audio_output = as_text(await self._async_get_value(V1_5_AUDIO_OUTPUT))
        power_mode = as_text(await self._async_get_value(V1_5_ENERGY_MODE))
        model = self._device.model
        if model is None:
            _LOGGER.debug("Device model unknown, skipping energy mode and audio output")
            return

        if power_mode == DEEP_STANDBY_V1:
            _LOGGER.debug(
                "The device power mode is set to '%s'. Requesting change to '%s'",
                DEEP_STANDBY_V1,
                ECO_STANDBY_V1,
            )
            await self._device.async_write_setting(V1_5_ENERGY_MODE, ECO_STANDBY_V1)
            power_mode = ECO_STANDBY_V1

        if model == CSE200:
            control = create_dropdown(POWER_MODE_NAME, power_mode, CSE200_ENERGY_MODES)
        elif model == CSE800:
            control = create_dropdown(
                POWER_MODE_NAME, power_mode, ENERGY_MODES, CSE800_ENERGY_MODES_LABELS
            )
        else:
            control = create_dropdown(POWER_MODE_NAME, power_mode, ENERGY_MODES)
        self._snapshot.add_control(control, power_mode)

        self._snapshot.add_control(
            create_dropdown(AUDIO_OUTPUT_NAME, audio_output, AUDIO_OUTPUT_MODES), audio_output
        )

    async def _async_add_system_state(self) -> None:
        power_status = as_text(await self._async_get_value(V1_6_SYSTEM_STATE))
        self._snapshot.statistics[POWER_STATUS_NAME] = power_status
        self._snapshot.add_control(
            create_switch(STANDBY_NAME, "On", "Off", power_status == "Standby")
        )

    async def _async_add_blackboard_and_software_update(self) -> None:
        blackboard = await self._async_get_value(V1_7_BLACKBOARD_SAVING)
        update_type = as_text(await self._async_get_value(V1_7_UPDATE_TYPE))
        self._snapshot.add_control(
            create_switch(BLACKBOARD_SAVING_NAME, "On", "Off", as_bool(blackboard))
        )
        self._snapshot.add_control(
            create_dropdown(SOFTWARE_UPDATE_NAME, update_type, SOFTWARE_UPDATE_TYPES)
        )

    async def _async_add_client_access(self) -> None:
        for name, endpoint in (
            (AIRPLAY_NAME, V1_8_ENABLE_AIRPLAY),
            (CLICKSHARE_NAME, V1_8_ENABLE_CLICKSHARE_APP),
            (GOOGLECAST_NAME, V1_8_ENABLE_GOOGLECAST),
        ):
            value = await self._async_get_value(endpoint)
            self._snapshot.add_control(
                create_switch(name, "On", "Off", as_bool(value)), as_text(value)
            )

    async def _async_add_network_and_sensors(self) -> None:
        statistics = self._snapshot.statistics
        add_text_statistic(
            statistics, "Network#Wlan IP Address", await self._async_get_value(V1_11_WLAN_IP_ADDRESS)
        )
        add_text_statistic(
            statistics,
            "Network#Wlan Subnet Mask",
            await self._async_get_value(V1_11_WLAN_SUBNET_MASK),
        )
        add_text_statistic(
            statistics,
            "Device Sensors#Cpu Fan Speed",
            await self._async_get_value(V1_11_CPU_FAN_SPEED),
        )
        add_text_statistic(
            statistics, "Display#CEC", await self._async_get_value(V1_11_DISPLAY_CEC)
        )

    async def _async_add_miracast(self) -> None:
        miracast = await self._async_get_value(V1_13_ENABLE_MIRACAST)
        self._snapshot.add_control(
            create_switch(MIRACAST_NAME, "enabled", "disabled", as_bool(miracast))
        )

    async def _async_add_screensaver_mode(self) -> None:
        mode = as_text(await self._async_get_value(V1_14_SCREEN_SAVER_MODE))
        self._snapshot.add_control(
            create_dropdown(SCREENSAVER_MODE_NAME, mode, SCREENSAVER_MODE_NAMES)
        )
