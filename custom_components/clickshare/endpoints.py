"""Endpoint tables for both ClickShare API generations.

v2 resources are addressed as ``v2/<path>`` and written with PATCH.
v1 resources are addressed as ``v1.N/<path>``, wrapped in a
``{status, data: {value}}`` envelope, and written with PUT ``value=...``.
v1 resources only exist from the minor version listed in ``min_minor``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .api import UnsupportedVersionError
from .const import (
    AIRPLAY_NAME,
    AUDIO_NAME,
    AUDIO_OUTPUT_NAME,
    BLACKBOARD_SAVING_NAME,
    CLICKSHARE_NAME,
    DISPLAY_HOTPLUG_NAME,
    DISPLAY_STANDBY_NAME,
    DISPLAY_TIMEOUT_NAME,
    DISPLAY_WALLPAPER_NAME,
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
    SCREENSAVER_TIMEOUT_NAME,
    SOFTWARE_UPDATE_NAME,
    STANDBY_NAME,
    STANDBY_TIMEOUT_NAME,
    V2_MARKER,
    VIDEO_MODE_NAME,
    WELCOME_MESSAGE_NAME,
)

V1 = "v1"
V2 = "v2"

ENCODE_RAW = "raw"
ENCODE_BOOLEAN = "boolean"

DISPLAY_RESOLUTION_PATTERN = re.compile(r"^Display#Output\s(\d{1,3})\sResolution$")


@dataclass(frozen=True)
class EndpointSpec:
    """One device resource and how to write it."""

    generation: str
    min_minor: int
    path: str
    payload_key: str = "value"
    property_name: str = ""

    def path_for(self, version: str, index: int | str | None = None) -> str:
        """Return the path relative to the device base URL."""
        path = self.path.format(index=index) if index is not None else self.path
        return f"{version}/{path}"


@dataclass(frozen=True)
class ControlOperation:
    """Write routing for one controllable property."""

    endpoint: EndpointSpec
    encoding: str = ENCODE_RAW


def is_v2(version: str) -> bool:
    """Return True if the resolved version belongs to the v2 generation."""
    return version.startswith(V2_MARKER)


def normalize_version(version: str) -> str:
    """Collapse any v2 version to the bare ``v2`` URL segment."""
    version = version.strip().strip("/")
    if is_v2(version):
        return V2
    return version


def parse_minor_version(version: str) -> int:
    """Return N for a ``v1.N`` version string."""
    _, sep, minor = version.partition(".")
    if not sep or not minor:
        raise UnsupportedVersionError(
            f"The v1 API version '{version}' without minor version is not supported"
        )
    try:
        return int(minor.split(".")[0])
    except ValueError as ex:
        raise UnsupportedVersionError(f"Unable to parse API version '{version}'") from ex


def encode_value(encoding: str, value: object) -> str:
    """Encode a raw control value for transmission."""
    text = str(value)
    if encoding == ENCODE_BOOLEAN:
        return "false" if text == "0" else "true"
    return text


# v2 resources
V2_POWER_MANAGEMENT = EndpointSpec(V2, 0, "configuration/system/power-management", "powerMode", POWER_MODE_NAME)
V2_POWER_STATUS = EndpointSpec(V2, 0, "configuration/system/power-management", "status", POWER_STATUS_NAME)
V2_STANDBY_TIMEOUT = EndpointSpec(V2, 0, "configuration/system/power-management", "standbyTimeout", STANDBY_TIMEOUT_NAME)
V2_OPERATIONS_REBOOT = EndpointSpec(V2, 0, "operations/reboot", "", REBOOT_NAME)
V2_OPERATIONS_STANDBY = EndpointSpec(V2, 0, "operations/standby", "", STANDBY_NAME)
V2_OPERATIONS_SUPPORTED = EndpointSpec(V2, 0, "operations/supported")
V2_VIDEO = EndpointSpec(V2, 0, "configuration/video", "mode", VIDEO_MODE_NAME)
V2_AUDIO_OUTPUT = EndpointSpec(V2, 0, "configuration/audio", "output", AUDIO_OUTPUT_NAME)
V2_AUDIO_ENABLED = EndpointSpec(V2, 0, "configuration/audio", "enabled", AUDIO_NAME)
V2_NETWORK = EndpointSpec(V2, 0, "configuration/system/network")
V2_DEVICE_IDENTITY = EndpointSpec(V2, 0, "configuration/system/device-identity")
V2_LANGUAGE = EndpointSpec(V2, 0, "configuration/personalization", "language", LANGUAGE_NAME)
V2_WELCOME_MESSAGE = EndpointSpec(V2, 0, "configuration/personalization", "welcomeMessage", WELCOME_MESSAGE_NAME)
V2_MEETING_ROOM = EndpointSpec(V2, 0, "configuration/personalization", "meetingRoomName", MEETING_ROOM_NAME)
V2_MIRACAST = EndpointSpec(V2, 0, "configuration/features/miracast", "enabled", MIRACAST_NAME)
V2_GOOGLECAST = EndpointSpec(V2, 0, "configuration/features/google-cast", "enabled", GOOGLECAST_NAME)
V2_AIRPLAY = EndpointSpec(V2, 0, "configuration/features/airplay", "enabled", AIRPLAY_NAME)
V2_BLACKBOARD = EndpointSpec(V2, 0, "configuration/features/blackboard", "savingEnabled", BLACKBOARD_SAVING_NAME)

V2_PERSONALIZATION = EndpointSpec(V2, 0, "configuration/personalization")

# v1 resources
V1_DEVICE_INFO = EndpointSpec(V1, 0, "DeviceInfo")
V1_AUDIO_ENABLED = EndpointSpec(V1, 0, "Audio/Enabled", property_name=AUDIO_NAME)
V1_DISPLAY = EndpointSpec(V1, 0, "Display")
V1_DISPLAY_STANDBY_STATE = EndpointSpec(V1, 0, "Display/StandbyState", property_name=DISPLAY_STANDBY_NAME)
V1_DISPLAY_TIMEOUT = EndpointSpec(V1, 0, "Display/DisplayTimeout", property_name=DISPLAY_TIMEOUT_NAME)
V1_DISPLAY_HOT_PLUG = EndpointSpec(V1, 0, "Display/HotPlug", property_name=DISPLAY_HOTPLUG_NAME)
V1_SCREENSAVER_TIMEOUT = EndpointSpec(V1, 0, "Display/ScreenSaverTimeout", property_name=SCREENSAVER_TIMEOUT_NAME)
V1_SHOW_WALLPAPER = EndpointSpec(V1, 0, "Display/ShowWallpaper", property_name=DISPLAY_WALLPAPER_NAME)
V1_DISPLAY_RESOLUTION = EndpointSpec(V1, 0, "Display/OutputTable/{index}/Resolution")
V1_ON_SCREEN_TEXT = EndpointSpec(V1, 0, "OnScreenText")
V1_ON_SCREEN_TEXT_LANGUAGE = EndpointSpec(V1, 0, "OnScreenText/Language", property_name=ONSCREEN_LANGUAGE_NAME)
V1_ON_SCREEN_TEXT_WELCOME_MESSAGE = EndpointSpec(V1, 0, "OnScreenText/WelcomeMessage", property_name=ONSCREEN_WELCOME_MESSAGE_NAME)
V1_ON_SCREEN_TEXT_MEETING_ROOM_NAME = EndpointSpec(V1, 0, "OnScreenText/MeetingRoomName", property_name=ONSCREEN_MEETING_ROOM_NAME)
V1_ON_SCREEN_TEXT_SHOW_MEETING_ROOM = EndpointSpec(V1, 0, "OnScreenText/ShowMeetingRoomInfo", property_name=ONSCREEN_MEETING_ROOM_INFO_NAME)
V1_ON_SCREEN_TEXT_SHOW_NETWORK = EndpointSpec(V1, 0, "OnScreenText/ShowNetworkInfo", property_name=ONSCREEN_NETWORK_INFO_NAME)
V1_RESTART_SYSTEM = EndpointSpec(V1, 0, "Configuration/RestartSystem", property_name=REBOOT_NAME)
V1_5_AUDIO_OUTPUT = EndpointSpec(V1, 5, "Audio/Output", property_name=AUDIO_OUTPUT_NAME)
V1_5_ENERGY_MODE = EndpointSpec(V1, 5, "Standby/EnergyMode", property_name=POWER_MODE_NAME)
V1_6_SYSTEM_STATE = EndpointSpec(V1, 6, "Standby/SystemState", property_name=POWER_STATUS_NAME)
V1_6_REQUEST_STANDBY = EndpointSpec(V1, 6, "Standby/RequestStandby", property_name=STANDBY_NAME)
V1_7_BLACKBOARD_SAVING = EndpointSpec(V1, 7, "ClientAccess/BlackboardSaving", property_name=BLACKBOARD_SAVING_NAME)
V1_7_UPDATE_TYPE = EndpointSpec(V1, 7, "Software/AutoUpdate/UpdateType", property_name=SOFTWARE_UPDATE_NAME)
V1_8_ENABLE_AIRPLAY = EndpointSpec(V1, 8, "ClientAccess/EnableAirplay", property_name=AIRPLAY_NAME)
V1_8_ENABLE_CLICKSHARE_APP = EndpointSpec(V1, 8, "ClientAccess/EnableClickShareApp", property_name=CLICKSHARE_NAME)
V1_8_ENABLE_GOOGLECAST = EndpointSpec(V1, 8, "ClientAccess/EnableGoogleCast", property_name=GOOGLECAST_NAME)
V1_11_WLAN_IP_ADDRESS = EndpointSpec(V1, 11, "Network/Wlan/IpAddress")
V1_11_WLAN_SUBNET_MASK = EndpointSpec(V1, 11, "Network/Wlan/SubnetMask")
V1_11_CPU_FAN_SPEED = EndpointSpec(V1, 11, "DeviceInfo/Sensors/CpuFanSpeed")
V1_11_DISPLAY_CEC = EndpointSpec(V1, 11, "Display/CEC")
V1_13_ENABLE_MIRACAST = EndpointSpec(V1, 13, "ClientAccess/EnableMiracast", property_name=MIRACAST_NAME)
V1_14_SCREEN_SAVER_MODE = EndpointSpec(V1, 14, "Display/ScreenSaverMode", property_name=SCREENSAVER_MODE_NAME)

V2_CONTROLS: dict[str, ControlOperation] = {
    POWER_MODE_NAME: ControlOperation(V2_POWER_MANAGEMENT),
    POWER_STATUS_NAME: ControlOperation(V2_POWER_STATUS),
    STANDBY_TIMEOUT_NAME: ControlOperation(V2_STANDBY_TIMEOUT),
    VIDEO_MODE_NAME: ControlOperation(V2_VIDEO),
    AUDIO_OUTPUT_NAME: ControlOperation(V2_AUDIO_OUTPUT),
    LANGUAGE_NAME: ControlOperation(V2_LANGUAGE),
    WELCOME_MESSAGE_NAME: ControlOperation(V2_WELCOME_MESSAGE),
    MEETING_ROOM_NAME: ControlOperation(V2_MEETING_ROOM),
    MIRACAST_NAME: ControlOperation(V2_MIRACAST, ENCODE_BOOLEAN),
    GOOGLECAST_NAME: ControlOperation(V2_GOOGLECAST, ENCODE_BOOLEAN),
    AIRPLAY_NAME: ControlOperation(V2_AIRPLAY, ENCODE_BOOLEAN),
    BLACKBOARD_SAVING_NAME: ControlOperation(V2_BLACKBOARD, ENCODE_BOOLEAN),
    AUDIO_NAME: ControlOperation(V2_AUDIO_ENABLED, ENCODE_BOOLEAN),
}

V1_CONTROLS: dict[str, ControlOperation] = {
    POWER_MODE_NAME: ControlOperation(V1_5_ENERGY_MODE),
    ONSCREEN_LANGUAGE_NAME: ControlOperation(V1_ON_SCREEN_TEXT_LANGUAGE),
    ONSCREEN_WELCOME_MESSAGE_NAME: ControlOperation(V1_ON_SCREEN_TEXT_WELCOME_MESSAGE),
    ONSCREEN_MEETING_ROOM_NAME: ControlOperation(V1_ON_SCREEN_TEXT_MEETING_ROOM_NAME),
    SOFTWARE_UPDATE_NAME: ControlOperation(V1_7_UPDATE_TYPE),
    AUDIO_OUTPUT_NAME: ControlOperation(V1_5_AUDIO_OUTPUT),
    SCREENSAVER_MODE_NAME: ControlOperation(V1_14_SCREEN_SAVER_MODE),
    DISPLAY_TIMEOUT_NAME: ControlOperation(V1_DISPLAY_TIMEOUT),
    SCREENSAVER_TIMEOUT_NAME: ControlOperation(V1_SCREENSAVER_TIMEOUT),
    MIRACAST_NAME: ControlOperation(V1_13_ENABLE_MIRACAST, ENCODE_BOOLEAN),
    GOOGLECAST_NAME: ControlOperation(V1_8_ENABLE_GOOGLECAST, ENCODE_BOOLEAN),
    AIRPLAY_NAME: ControlOperation(V1_8_ENABLE_AIRPLAY, ENCODE_BOOLEAN),
    BLACKBOARD_SAVING_NAME: ControlOperation(V1_7_BLACKBOARD_SAVING, ENCODE_BOOLEAN),
    CLICKSHARE_NAME: ControlOperation(V1_8_ENABLE_CLICKSHARE_APP, ENCODE_BOOLEAN),
    ONSCREEN_MEETING_ROOM_INFO_NAME: ControlOperation(V1_ON_SCREEN_TEXT_SHOW_MEETING_ROOM, ENCODE_BOOLEAN),
    ONSCREEN_NETWORK_INFO_NAME: ControlOperation(V1_ON_SCREEN_TEXT_SHOW_NETWORK, ENCODE_BOOLEAN),
    AUDIO_NAME: ControlOperation(V1_AUDIO_ENABLED, ENCODE_BOOLEAN),
    DISPLAY_WALLPAPER_NAME: ControlOperation(V1_SHOW_WALLPAPER, ENCODE_BOOLEAN),
    DISPLAY_HOTPLUG_NAME: ControlOperation(V1_DISPLAY_HOT_PLUG, ENCODE_BOOLEAN),
    DISPLAY_STANDBY_NAME: ControlOperation(V1_DISPLAY_STANDBY_STATE, ENCODE_BOOLEAN),
    STANDBY_NAME: ControlOperation(V1_6_REQUEST_STANDBY, ENCODE_BOOLEAN),
}


def control_table(version: str) -> dict[str, ControlOperation]:
    """Return the name to write-operation table for a resolved version."""
    return V2_CONTROLS if is_v2(version) else V1_CONTROLS


def match_display_resolution(name: str) -> str | None:
    """Return the output index if ``name`` is an indexed resolution control."""
    match = DISPLAY_RESOLUTION_PATTERN.match(name)
    return match.group(1) if match else None
