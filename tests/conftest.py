"""Shared fixtures: a recording fake of the ClickShare REST client."""

from __future__ import annotations

import asyncio
import copy
from typing import Any

import pytest

from custom_components.clickshare.api import ClickShareCommandError

MISSING = '{"status":404,"message":"Resource does not exist"}'


class FakeClient:
    """Stand-in for ClickShareClient that serves canned responses by path."""

    def __init__(
        self,
        versions: list[str],
        responses: dict[str, Any],
        write_status: int = 200,
        action_status: int = 202,
    ) -> None:
        self.host = "10.0.0.5"
        self.versions = versions
        self.responses = responses
        self.write_status = write_status
        self.action_status = action_status
        self.calls: list[tuple[str, str, str | None]] = []

    @property
    def reads(self) -> list[str]:
        return [path for method, path, _ in self.calls if method == "GET"]

    @property
    def writes(self) -> list[tuple[str, str, str | None]]:
        return [call for call in self.calls if call[0] != "GET"]

    async def async_get_supported_versions(self) -> list[str]:
        self.calls.append(("GET", "SupportedVersions", None))
        return list(self.versions)

    async def async_get(self, path: str) -> Any:
        self.calls.append(("GET", path, None))
        await asyncio.sleep(0)
        response = self.responses.get(path)
        if isinstance(response, Exception):
            raise response
        if response is None:
            raise ClickShareCommandError(f"GET {path} failed", 404, MISSING)
        return copy.deepcopy(response)

    async def async_put(self, path: str, key: str, value: str) -> Any:
        self.calls.append(("PUT", path, f"{key}={value}"))
        await asyncio.sleep(0)
        return {"status": self.write_status}

    async def async_patch(self, path: str, key: str, value: str) -> Any:
        self.calls.append(("PATCH", path, f"{key}={value}"))
        await asyncio.sleep(0)
        return {"status": self.write_status}

    async def async_post(self, path: str) -> Any:
        self.calls.append(("POST", path, None))
        await asyncio.sleep(0)
        return {"status": self.action_status}


def v2_responses() -> dict[str, Any]:
    return {
        "v2/operations/supported": ["reboot", "standby"],
        "v2/configuration/system/power-management": {
            "powerMode": "ecoStandby",
            "supportedPowerModes": ["networkedStandby", "ecoStandby", "deepStandby"],
            "standbyTimeout": 10,
            "supportedStandbyTimeouts": [1, 5, 10, 30],
            "status": "on",
            "supportedStatuses": ["on", "standby"],
        },
        "v2/configuration/video": {"mode": "4K", "supportedModes": ["1080p", "4K"]},
        "v2/configuration/audio": {
            "enabled": True,
            "output": "HDMI",
            "supportedOutputs": ["HDMI", "Jack"],
        },
        "v2/configuration/system/network": {
            "hostname": "ClickShare-1863550376",
            "services": {
                "proxy": {"enabled": False, "serverAddress": "proxy.local"},
                "dhcpServer": {
                    "domainName": "clickshare.local",
                    "maxAddress": "192.168.2.200",
                    "minAddress": "192.168.2.100",
                    "subnetMask": "255.255.255.0",
                },
            },
            "wired": [
                {
                    "id": 1,
                    "operationMode": "lan",
                    "addressing": "dhcp",
                    "status": "connected",
                    "ipAddress": "10.0.0.5",
                    "subnetMask": "255.255.255.0",
                    "defaultGateway": "10.0.0.1",
                    "macAddress": "00:04:A5:01:04:78",
                }
            ],
            "wireless": [],
        },
        "v2/configuration/system/device-identity": {
            "serialNumber": "1863550376",
            "articleNumber": "R9861522EU",
            "modelName": "C-10",
            "productName": "ClickShare C-10",
        },
        "v2/configuration/features/miracast": {"enabled": False},
        "v2/configuration/features/google-cast": {"enabled": True},
        "v2/configuration/features/airplay": {"enabled": False},
        "v2/configuration/features/blackboard": {"savingEnabled": True},
        "v2/configuration/personalization": {
            "meetingRoomName": "ClickShare-1863550376",
            "language": "en",
            "supportedLanguages": ["en", "nl"],
            "welcomeMessage": "Welcome",
        },
    }


def _envelope(value: Any) -> dict[str, Any]:
    return {"status": 200, "message": "Success", "data": {"value": value}}


def v1_responses(version: str, model: str = "CSE-200+") -> dict[str, Any]:
    values: dict[str, Any] = {
        "DeviceInfo": {
            "ArticleNumber": "R9861510",
            "ModelName": model,
            "SerialNumber": "1873200822",
            "CurrentUptime": 3600,
            "TotalUptime": 7200,
            "FirstUsed": "2020-01-01",
            "InUse": False,
            "Status": 0,
            "Sharing": False,
            "StatusMessage": "  ",
            "LastUsed": "2020-05-01",
            "Sensors": {"CpuTemperature": 45, "PcieTemperature": 40, "SioTemperature": 38},
            "Processes": {
                "ProcessCount": 2,
                "ProcessTable": {
                    "1": {"Name": "Spinner", "Status": "Running"},
                    "2": {"Name": "ClickShare", "Status": "Stopped"},
                },
            },
        },
        "Audio/Enabled": True,
        "Display": {
            "StandbyState": False,
            "DisplayCount": 1,
            "DisplayTimeout": 300,
            "HotPlug": True,
            "ScreenSaverTimeout": 600,
            "ShowWallpaper": True,
            "OutputCount": 1,
            "OutputTable": {
                "1": {
                    "Connected": True,
                    "Enabled": True,
                    "NativeResolution": "1920x1080",
                    "Port": "HDMI 1",
                    "Position": "Left",
                    "Resolution": "1920x1080",
                    "SupportedResolutions": "1920x1080,1280x720",
                }
            },
        },
        "OnScreenText": {
            "Location": "Top",
            "Language": "English",
            "SupportedLanguages": "English,Dutch",
            "WelcomeMessage": "Welcome",
            "MeetingRoomName": "Room 1",
            "ShowMeetingRoomInfo": True,
            "ShowNetworkInfo": False,
        },
        "Audio/Output": "HDMI",
        "Standby/EnergyMode": "networkedStandby",
        "Standby/SystemState": "On",
        "ClientAccess/BlackboardSaving": True,
        "Software/AutoUpdate/UpdateType": "Download",
        "ClientAccess/EnableAirplay": "true",
        "ClientAccess/EnableClickShareApp": "false",
        "ClientAccess/EnableGoogleCast": "true",
        "Network/Wlan/IpAddress": "192.168.2.1",
        "Network/Wlan/SubnetMask": "255.255.255.0",
        "DeviceInfo/Sensors/CpuFanSpeed": "2400",
        "Display/CEC": "enabled",
        "ClientAccess/EnableMiracast": False,
        "Display/ScreenSaverMode": "Wallpaper",
    }
    return {f"{version}/{path}": _envelope(value) for path, value in values.items()}


@pytest.fixture
def v2_client() -> FakeClient:
    return FakeClient(["v1.14", "v2.0.1"], v2_responses())


@pytest.fixture
def v1_client() -> FakeClient:
    return FakeClient(["v1.0", "v1.5", "v1.14"], v1_responses("v1.14"))
