from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "clickshare"
DEFAULT_NAME = "Barco ClickShare"
DEFAULT_PORT = 4003  # ClickShare REST API (https)
DEFAULT_TIMEOUT = 10.0
DEFAULT_USE_SSL = True
DEFAULT_VERIFY_SSL = False
SCAN_INTERVAL = 30

# Polls arriving within this window after a control are served from cache
CONTROL_COOLDOWN = 3.0

CONF_USE_SSL = "use_ssl"
CONF_VERIFY_SSL = "verify_ssl"
CONF_ENABLE_DEBUG_LOGGING = "enable_debug_logging"

DEFAULT_ENABLE_DEBUG_LOGGING = False

PLATFORMS: list[Platform] = [
    Platform.BUTTON,
    Platform.SELECT,
    Platform.SWITCH,
    Platform.TEXT,
    Platform.SENSOR,
]

API_SUPPORTED_VERSIONS = "SupportedVersions"
V2_MARKER = "v2"
RESOURCE_MISSING_MARKER = "Resource does not exist"

# Property names shared by both API generations
POWER_MODE_NAME = "Power Management#Power Mode"
POWER_STATUS_NAME = "Power Management#Power Status"
STANDBY_TIMEOUT_NAME = "Power Management#Standby Timeout (min)"
VIDEO_MODE_NAME = "Video Mode"
MIRACAST_NAME = "Features#Miracast"
GOOGLECAST_NAME = "Features#Googlecast"
BLACKBOARD_SAVING_NAME = "Features#Blackboard saving"
AIRPLAY_NAME = "Features#Airplay"
CLICKSHARE_NAME = "Features#ClickShare App"
AUDIO_NAME = "Audio"
AUDIO_OUTPUT_NAME = "Audio Output"
LANGUAGE_NAME = "Personalization#Language"
WELCOME_MESSAGE_NAME = "Personalization#Welcome message"
MEETING_ROOM_NAME = "Personalization#Meeting room name"
REBOOT_NAME = "Reboot"
STANDBY_NAME = "Standby"

# v1 only
ONSCREEN_LANGUAGE_NAME = "On Screen Text#Language"
ONSCREEN_WELCOME_MESSAGE_NAME = "On Screen Text#Welcome Message"
ONSCREEN_MEETING_ROOM_NAME = "On Screen Text#Meeting Room Name"
ONSCREEN_MEETING_ROOM_INFO_NAME = "On Screen Text#Show Meeting Room Info"
ONSCREEN_NETWORK_INFO_NAME = "On Screen Text#Show Network Info"
SOFTWARE_UPDATE_NAME = "Software Update#Update Type"
SCREENSAVER_MODE_NAME = "Display#Screensaver Mode"
SCREENSAVER_TIMEOUT_NAME = "Display#Screensaver Timeout"
DISPLAY_TIMEOUT_NAME = "Display#Display Timeout"
DISPLAY_WALLPAPER_NAME = "Display#Show Wallpaper"
DISPLAY_HOTPLUG_NAME = "Display#Hot Plug"
DISPLAY_STANDBY_NAME = "Display#Standby State"
DISPLAY_OUTPUT_RESOLUTION_NAME = "Display#Output {index} Resolution"

# Power mode sentinels
DEEP_STANDBY_V1 = "deepStandby"
ECO_STANDBY_V1 = "ecoStandby"
DEEP_STANDBY_V2 = "deepStandby"
ECO_STANDBY_V2 = "ecoStandby"

# Models with dedicated option lists
CSE200 = "CSE-200"
CSE800 = "CSE-800"

# Button grace periods (ms)
V1_REBOOT_GRACE_PERIOD = 90000
V2_REBOOT_GRACE_PERIOD = 150000

DEVICE_STATUSES: dict[int, str] = {
    0: "OK",
    1: "Warning",
    2: "Error",
}

TIMEOUTS: list[str] = [
    "0", "60", "120", "180", "300", "600", "900", "1200", "1800", "3600",
]
CSE800_DISPLAY_TIMEOUTS: list[str] = ["0", "300", "600", "1800", "3600"]

ENERGY_MODES: list[str] = ["networkedStandby", "ecoStandby"]
CSE200_ENERGY_MODES: list[str] = ["ecoStandby"]
CSE800_ENERGY_MODES_LABELS: list[str] = ["Networked standby", "Eco standby"]

AUDIO_OUTPUT_MODES: list[str] = ["HDMI", "Jack", "SPDIF"]
SOFTWARE_UPDATE_TYPES: list[str] = ["Off", "Download", "Download and Install"]
SCREENSAVER_MODE_NAMES: list[str] = ["Wallpaper", "Standby", "Off"]
