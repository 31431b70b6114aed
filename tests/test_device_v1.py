from __future__ import annotations

import pytest

from custom_components.clickshare.api import ClickShareCommandError, UnsupportedVersionError
from custom_components.clickshare.const import (
    AIRPLAY_NAME,
    CLICKSHARE_NAME,
    DISPLAY_STANDBY_NAME,
    DISPLAY_TIMEOUT_NAME,
    GOOGLECAST_NAME,
    MIRACAST_NAME,
    ONSCREEN_MEETING_ROOM_INFO_NAME,
    ONSCREEN_NETWORK_INFO_NAME,
    POWER_MODE_NAME,
    POWER_STATUS_NAME,
    REBOOT_NAME,
    SCREENSAVER_MODE_NAME,
    STANDBY_NAME,
)
from custom_components.clickshare.device import ClickShareDevice
from custom_components.clickshare.statistics import V1SnapshotBuilder

from tests.conftest import FakeClient, v1_responses


def _device(version: str, model: str = "CSE-200+", **kwargs) -> tuple[ClickShareDevice, FakeClient]:
    client = FakeClient(["v1.0", version], v1_responses(version, model), **kwargs)
    return ClickShareDevice(client), client


def test_active_blocks_follow_minor_version() -> None:
    assert V1SnapshotBuilder.active_blocks(0) == ["_async_add_device_info"]
    assert V1SnapshotBuilder.active_blocks(8)[-1] == "_async_add_client_access"
    assert len(V1SnapshotBuilder.active_blocks(14)) == len(V1SnapshotBuilder.BLOCKS)
    assert V1SnapshotBuilder.active_blocks(20) == V1SnapshotBuilder.active_blocks(14)


async def test_full_snapshot_on_latest_minor(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)

    snapshot = await device.async_get_snapshot()
    stats = snapshot.statistics

    assert device.version == "v1.14"
    assert device.model == "CSE-200+"
    assert len(snapshot.controls) == 23
    for control in snapshot.controls:
        assert control.name in stats

    assert stats["Device Information#Serial Number"] == "1873200822"
    assert stats["Device Status#Status"] == "OK"
    assert stats["Device Status#In Use"] == "false"
    assert stats["Device Sensors#Cpu Temperature (C)"] == "45"
    assert stats["Processes#1. Spinner"] == "Running"
    assert stats["Processes#2. ClickShare"] == "Stopped"
    assert "Device Status#Status Message" not in stats
    assert stats["Last used"] == "2020-05-01"
    assert stats["Display#Output 1 Port"] == "HDMI 1"
    assert stats["Display#Output 1 Resolution"] == "1920x1080"
    assert stats[POWER_STATUS_NAME] == "On"
    assert stats[AIRPLAY_NAME] == "true"
    assert stats[CLICKSHARE_NAME] == "false"
    assert stats["Network#Wlan IP Address"] == "192.168.2.1"
    assert stats["Display#CEC"] == "enabled"
    assert MIRACAST_NAME in stats
    assert SCREENSAVER_MODE_NAME in stats

    resolution = snapshot.control("Display#Output 1 Resolution")
    assert resolution.control.options == ["1920x1080", "1280x720"]


async def test_on_screen_switches_read_their_own_fields(v1_client: FakeClient) -> None:
    snapshot = await ClickShareDevice(v1_client).async_get_snapshot()

    assert snapshot.control(ONSCREEN_MEETING_ROOM_INFO_NAME).value is True
    assert snapshot.control(ONSCREEN_NETWORK_INFO_NAME).value is False


async def test_minor_8_stops_before_later_blocks() -> None:
    device, client = _device("v1.8")

    snapshot = await device.async_get_snapshot()
    stats = snapshot.statistics

    for name in (AIRPLAY_NAME, CLICKSHARE_NAME, GOOGLECAST_NAME, POWER_MODE_NAME, STANDBY_NAME):
        assert name in stats
    assert MIRACAST_NAME not in stats
    assert SCREENSAVER_MODE_NAME not in stats
    assert "Display#CEC" not in stats
    assert "v1.8/ClientAccess/EnableMiracast" not in client.reads
    assert "v1.8/Display/ScreenSaverMode" not in client.reads
    assert "v1.8/Network/Wlan/IpAddress" not in client.reads


async def test_minor_below_5_has_no_power_mode() -> None:
    device, client = _device("v1.4")

    snapshot = await device.async_get_snapshot()

    assert POWER_MODE_NAME not in snapshot.statistics
    assert STANDBY_NAME not in snapshot.statistics
    assert "v1.4/Standby/EnergyMode" not in client.reads
    assert snapshot.control(REBOOT_NAME) is not None


async def test_cse200_energy_modes() -> None:
    device, _ = _device("v1.14", model="CSE-200")

    snapshot = await device.async_get_snapshot()

    power_mode = snapshot.control(POWER_MODE_NAME)
    assert power_mode.control.options == ["ecoStandby"]


async def test_cse800_energy_modes_and_display_timeouts() -> None:
    device, _ = _device("v1.14", model="CSE-800")

    snapshot = await device.async_get_snapshot()

    power_mode = snapshot.control(POWER_MODE_NAME)
    assert power_mode.control.options == ["networkedStandby", "ecoStandby"]
    assert power_mode.control.labels == ["Networked standby", "Eco standby"]
    display_timeout = snapshot.control(DISPLAY_TIMEOUT_NAME)
    assert display_timeout.control.options == ["0", "300", "600", "1800", "3600"]


async def test_unknown_model_skips_energy_block() -> None:
    responses = v1_responses("v1.14")
    responses["v1.14/DeviceInfo"]["data"]["value"].pop("ModelName")
    device = ClickShareDevice(FakeClient(["v1.14"], responses))

    snapshot = await device.async_get_snapshot()

    assert POWER_MODE_NAME not in snapshot.statistics
    assert "Audio Output" not in snapshot.statistics
    assert STANDBY_NAME in snapshot.statistics


async def test_deep_standby_is_replaced_by_eco_standby() -> None:
    responses = v1_responses("v1.14")
    responses["v1.14/Standby/EnergyMode"]["data"]["value"] = "deepStandby"
    client = FakeClient(["v1.14"], responses)

    snapshot = await ClickShareDevice(client).async_get_snapshot()

    assert ("PUT", "v1.14/Standby/EnergyMode", "value=ecoStandby") in client.writes
    assert snapshot.statistics[POWER_MODE_NAME] == "ecoStandby"


async def test_missing_resource_skips_only_that_property() -> None:
    responses = v1_responses("v1.14")
    del responses["v1.14/Display/CEC"]
    device = ClickShareDevice(FakeClient(["v1.14"], responses))

    snapshot = await device.async_get_snapshot()

    assert "Display#CEC" not in snapshot.statistics
    assert snapshot.statistics["Device Sensors#Cpu Fan Speed"] == "2400"
    assert SCREENSAVER_MODE_NAME in snapshot.statistics


async def test_other_command_errors_propagate() -> None:
    responses = v1_responses("v1.14")
    responses["v1.14/Display/CEC"] = ClickShareCommandError("boom", 500, "Internal error")
    device = ClickShareDevice(FakeClient(["v1.14"], responses))

    with pytest.raises(ClickShareCommandError):
        await device.async_get_snapshot()
    assert device.snapshot is None


async def test_write_reports_success_and_patches_snapshot(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)
    await device.async_get_snapshot()

    assert await device.async_control(AIRPLAY_NAME, 0) is True

    assert v1_client.writes[-1] == ("PUT", "v1.14/ClientAccess/EnableAirplay", "value=false")
    assert device.snapshot.statistics[AIRPLAY_NAME] == "false"
    assert device.snapshot.control(AIRPLAY_NAME).value == 0


async def test_rejected_write_reports_failure() -> None:
    device, client = _device("v1.14", write_status=500)

    assert await device.async_control(SCREENSAVER_MODE_NAME, "Off") is False
    assert client.writes == [("PUT", "v1.14/Display/ScreenSaverMode", "value=Off")]


async def test_standby_updates_power_status(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)
    await device.async_get_snapshot()

    assert await device.async_control(STANDBY_NAME, 1) is True
    assert v1_client.writes[-1] == ("PUT", "v1.14/Standby/RequestStandby", "value=true")
    assert device.snapshot.statistics[POWER_STATUS_NAME] == "Standby"

    assert await device.async_control(STANDBY_NAME, 0) is True
    assert device.snapshot.statistics[POWER_STATUS_NAME] == "On"


async def test_display_standby_does_not_reboot(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)

    await device.async_control(DISPLAY_STANDBY_NAME, 1)

    assert v1_client.writes == [("PUT", "v1.14/Display/StandbyState", "value=true")]


async def test_reboot_puts_restart_system(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)

    assert await device.async_control(REBOOT_NAME, "") is True
    assert v1_client.writes == [("PUT", "v1.14/Configuration/RestartSystem", "value=true")]


async def test_output_resolution_uses_indexed_path(v1_client: FakeClient) -> None:
    device = ClickShareDevice(v1_client)
    await device.async_get_snapshot()

    assert await device.async_control("Display#Output 1 Resolution", "1280x720") is True

    assert v1_client.writes[-1] == (
        "PUT",
        "v1.14/Display/OutputTable/1/Resolution",
        "value=1280x720",
    )
    assert device.snapshot.statistics["Display#Output 1 Resolution"] == "1280x720"


async def test_v1_without_minor_is_unsupported() -> None:
    device = ClickShareDevice(FakeClient(["v1"], {}))

    with pytest.raises(UnsupportedVersionError):
        await device.async_resolve_version()
    assert device.version is None


async def test_no_reported_version_is_unsupported() -> None:
    device = ClickShareDevice(FakeClient([], {}))

    with pytest.raises(UnsupportedVersionError):
        await device.async_get_snapshot()
