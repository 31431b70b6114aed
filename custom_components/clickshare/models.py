"""Typed views of ClickShare responses and the snapshot handed to Home Assistant."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def as_text(value: Any) -> str:
    """Render a scalar JSON value the way the device UI shows it."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_bool(value: Any) -> bool:
    """Interpret a JSON value as a boolean flag."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def text_or_none(value: Any) -> str | None:
    """Return the value only if the device sent text."""
    return value if isinstance(value, str) else None


def text_list(value: Any) -> list[str]:
    """Normalize a JSON array or a comma separated string into options."""
    if isinstance(value, list):
        return [as_text(item) for item in value]
    if isinstance(value, str) and value:
        return value.split(",")
    return []


def add_text_statistic(statistics: dict[str, str], name: str, value: Any) -> None:
    """Add a statistics entry only for non-blank text values."""
    if isinstance(value, str) and value.strip():
        statistics[name] = value


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return default


def indexed_table(container: Any, count_key: str, table_key: str) -> list[tuple[int, dict[str, Any]]]:
    """Walk a v1 ``{Count, Table: {"1": {...}}}`` structure in index order."""
    container = _dict(container)
    table = _dict(container.get(table_key))
    rows: list[tuple[int, dict[str, Any]]] = []
    for index in range(1, _int(container.get(count_key)) + 1):
        row = table.get(str(index))
        if isinstance(row, dict):
            rows.append((index, row))
    return rows


@dataclass
class V1Process:
    """One row of the v1 process table."""

    index: int
    name: str
    status: str


@dataclass
class V1DeviceInfo:
    """v1 ``DeviceInfo`` resource."""

    article_number: str = ""
    model_name: str = ""
    serial_number: str = ""
    current_uptime: str = ""
    total_uptime: str = ""
    first_used: str = ""
    in_use: str = ""
    status: int = 0
    sharing: str = ""
    status_message: str | None = None
    last_used: str | None = None
    cpu_temperature: str = ""
    pcie_temperature: str = ""
    sio_temperature: str = ""
    processes: list[V1Process] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> V1DeviceInfo:
        data = _dict(data)
        sensors = _dict(data.get("Sensors"))
        return cls(
            article_number=as_text(data.get("ArticleNumber")),
            model_name=as_text(data.get("ModelName")),
            serial_number=as_text(data.get("SerialNumber")),
            current_uptime=as_text(data.get("CurrentUptime")),
            total_uptime=as_text(data.get("TotalUptime")),
            first_used=as_text(data.get("FirstUsed")),
            in_use=as_text(data.get("InUse")),
            status=_int(data.get("Status")),
            sharing=as_text(data.get("Sharing")),
            status_message=text_or_none(data.get("StatusMessage")),
            last_used=text_or_none(data.get("LastUsed")),
            cpu_temperature=as_text(sensors.get("CpuTemperature")),
            pcie_temperature=as_text(sensors.get("PcieTemperature")),
            sio_temperature=as_text(sensors.get("SioTemperature")),
            processes=[
                V1Process(index, as_text(row.get("Name")), as_text(row.get("Status")))
                for index, row in indexed_table(
                    data.get("Processes"), "ProcessCount", "ProcessTable"
                )
            ],
        )


@dataclass
class V1DisplayOutput:
    """One physical output of the v1 ``Display`` resource."""

    index: int
    connected: str = ""
    enabled: str = ""
    native_resolution: str = ""
    port: str = ""
    position: str = ""
    resolution: str = ""
    supported_resolutions: list[str] = field(default_factory=list)


@dataclass
class V1Display:
    """v1 ``Display`` resource."""

    standby_state: bool = False
    display_count: str = ""
    display_timeout: str = ""
    hot_plug: bool = False
    screensaver_timeout: str = ""
    show_wallpaper: bool = False
    outputs: list[V1DisplayOutput] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> V1Display:
        data = _dict(data)
        return cls(
            standby_state=as_bool(data.get("StandbyState")),
            display_count=as_text(data.get("DisplayCount")),
            display_timeout=as_text(data.get("DisplayTimeout")),
            hot_plug=as_bool(data.get("HotPlug")),
            screensaver_timeout=as_text(data.get("ScreenSaverTimeout")),
            show_wallpaper=as_bool(data.get("ShowWallpaper")),
            outputs=[
                V1DisplayOutput(
                    index=index,
                    connected=as_text(row.get("Connected")),
                    enabled=as_text(row.get("Enabled")),
                    native_resolution=as_text(row.get("NativeResolution")),
                    port=as_text(row.get("Port")),
                    position=as_text(row.get("Position")),
                    resolution=as_text(row.get("Resolution")),
                    supported_resolutions=text_list(row.get("SupportedResolutions")),
                )
                for index, row in indexed_table(data, "OutputCount", "OutputTable")
            ],
        )


@dataclass
class V1OnScreenText:
    """v1 ``OnScreenText`` resource."""

    location: str = ""
    language: str = ""
    supported_languages: list[str] = field(default_factory=list)
    welcome_message: str = ""
    meeting_room_name: str = ""
    show_meeting_room_info: bool = False
    show_network_info: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> V1OnScreenText:
        data = _dict(data)
        return cls(
            location=as_text(data.get("Location")),
            language=as_text(data.get("Language")),
            supported_languages=text_list(data.get("SupportedLanguages")),
            welcome_message=as_text(data.get("WelcomeMessage")),
            meeting_room_name=as_text(data.get("MeetingRoomName")),
            show_meeting_room_info=as_bool(data.get("ShowMeetingRoomInfo")),
            show_network_info=as_bool(data.get("ShowNetworkInfo")),
        )


@dataclass
class V2PowerManagement:
    """v2 ``configuration/system/power-management`` resource."""

    power_mode: str = ""
    supported_power_modes: list[str] = field(default_factory=list)
    standby_timeout: str = ""
    supported_standby_timeouts: list[str] = field(default_factory=list)
    status: str = ""
    supported_statuses: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> V2PowerManagement:
        data = _dict(data)
        return cls(
            power_mode=as_text(data.get("powerMode")),
            supported_power_modes=text_list(data.get("supportedPowerModes")),
            standby_timeout=as_text(data.get("standbyTimeout")),
            supported_standby_timeouts=text_list(data.get("supportedStandbyTimeouts")),
            status=as_text(data.get("status")),
            supported_statuses=text_list(data.get("supportedStatuses")),
        )


@dataclass
class V2Video:
    """v2 ``configuration/video`` resource."""

    mode: str = ""
    supported_modes: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> V2Video:
        data = _dict(data)
        return cls(
            mode=as_text(data.get("mode")),
            supported_modes=text_list(data.get("supportedModes")),
        )


@dataclass
class V2Audio:
    """v2 ``configuration/audio`` resource."""

    output: str = ""
    supported_outputs: list[str] = field(default_factory=list)
    enabled: bool = False
    enabled_text: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> V2Audio:
        data = _dict(data)
        return cls(
            output=as_text(data.get("output")),
            supported_outputs=text_list(data.get("supportedOutputs")),
            enabled=as_bool(data.get("enabled")),
            enabled_text=as_text(data.get("enabled")),
        )


@dataclass
class V2NetworkConfiguration:
    """One wired or wireless interface configuration."""

    id: int
    operation_mode: str | None = None
    addressing: str | None = None
    status: str | None = None
    ip_address: str | None = None
    subnet_mask: str | None = None
    default_gateway: str | None = None
    mac_address: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> V2NetworkConfiguration:
        data = _dict(data)
        return cls(
            id=_int(data.get("id")),
            operation_mode=text_or_none(data.get("operationMode")),
            addressing=text_or_none(data.get("addressing")),
            status=text_or_none(data.get("status")),
            ip_address=text_or_none(data.get("ipAddress")),
            subnet_mask=text_or_none(data.get("subnetMask")),
            default_gateway=text_or_none(data.get("defaultGateway")),
            mac_address=text_or_none(data.get("macAddress")),
        )


@dataclass
class V2Network:
    """v2 ``configuration/system/network`` resource."""

    hostname: str | None = None
    proxy_enabled: bool = False
    proxy_server_address: str | None = None
    proxy_username: str | None = None
    dhcp_domain_name: str | None = None
    dhcp_max_address: str | None = None
    dhcp_min_address: str | None = None
    dhcp_subnet_mask: str | None = None
    wired: list[V2NetworkConfiguration] = field(default_factory=list)
    wireless: list[V2NetworkConfiguration] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> V2Network:
        data = _dict(data)
        services = _dict(data.get("services"))
        proxy = _dict(services.get("proxy"))
        dhcp_server = _dict(services.get("dhcpServer"))
        return cls(
            hostname=text_or_none(data.get("hostname")),
            proxy_enabled=as_bool(proxy.get("enabled")),
            proxy_server_address=text_or_none(proxy.get("serverAddress")),
            proxy_username=text_or_none(proxy.get("username")),
            dhcp_domain_name=text_or_none(dhcp_server.get("domainName")),
            dhcp_max_address=text_or_none(dhcp_server.get("maxAddress")),
            dhcp_min_address=text_or_none(dhcp_server.get("minAddress")),
            dhcp_subnet_mask=text_or_none(dhcp_server.get("subnetMask")),
            wired=[
                V2NetworkConfiguration.from_dict(item)
                for item in data.get("wired") or []
                if isinstance(item, dict)
            ],
            wireless=[
                V2NetworkConfiguration.from_dict(item)
                for item in data.get("wireless") or []
                if isinstance(item, dict)
            ],
        )


@dataclass
class V2DeviceIdentity:
    """v2 ``configuration/system/device-identity`` resource."""

    serial_number: str | None = None
    article_number: str | None = None
    model_name: str | None = None
    product_name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> V2DeviceIdentity:
        data = _dict(data)
        return cls(
            serial_number=text_or_none(data.get("serialNumber")),
            article_number=text_or_none(data.get("articleNumber")),
            model_name=text_or_none(data.get("modelName")),
            product_name=text_or_none(data.get("productName")),
        )


@dataclass
class V2Feature:
    """One ``configuration/features/*`` resource; ``key`` names its on/off flag."""

    enabled: bool = False

    @classmethod
    def from_dict(cls, data: Any, key: str = "enabled") -> V2Feature:
        return cls(enabled=as_bool(_dict(data).get(key)))


@dataclass
class V2Personalization:
    """v2 ``configuration/personalization`` resource."""

    meeting_room_name: str = ""
    language: str = ""
    supported_languages: list[str] = field(default_factory=list)
    welcome_message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> V2Personalization:
        data = _dict(data)
        return cls(
            meeting_room_name=as_text(data.get("meetingRoomName")),
            language=as_text(data.get("language")),
            supported_languages=text_list(data.get("supportedLanguages")),
            welcome_message=as_text(data.get("welcomeMessage")),
        )


@dataclass
class ButtonControl:
    """Momentary action such as reboot."""

    label: str
    label_pressed: str
    grace_period: int = 0


@dataclass
class DropdownControl:
    """Choice from a fixed option list; labels are shown, options are sent."""

    options: list[str]
    labels: list[str]


@dataclass
class SwitchControl:
    """Two-state toggle."""

    label_on: str
    label_off: str


@dataclass
class TextControl:
    """Free text field."""


Control = ButtonControl | DropdownControl | SwitchControl | TextControl


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ControlDescriptor:
    """A user-controllable property, keyed by its statistics name."""

    name: str
    control: Control
    value: Any = ""
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def kind(self) -> str:
        """Return the control type as a short string."""
        if isinstance(self.control, ButtonControl):
            return "button"
        if isinstance(self.control, DropdownControl):
            return "dropdown"
        if isinstance(self.control, SwitchControl):
            return "switch"
        return "text"


def create_button(name: str, label: str, label_pressed: str, grace_period: int) -> ControlDescriptor:
    return ControlDescriptor(name, ButtonControl(label, label_pressed, grace_period), "")


def create_dropdown(
    name: str,
    value: str,
    options: list[str],
    labels: list[str] | None = None,
) -> ControlDescriptor:
    return ControlDescriptor(
        name,
        DropdownControl(list(options), list(labels if labels is not None else options)),
        value,
    )


def create_switch(name: str, label_on: str, label_off: str, value: bool) -> ControlDescriptor:
    return ControlDescriptor(name, SwitchControl(label_on, label_off), value)


def create_text(name: str, value: str) -> ControlDescriptor:
    return ControlDescriptor(name, TextControl(), value)


@dataclass
class Snapshot:
    """Last known device state: flat statistics plus the controls offered."""

    statistics: dict[str, str] = field(default_factory=dict)
    controls: list[ControlDescriptor] = field(default_factory=list)

    def control(self, name: str) -> ControlDescriptor | None:
        """Return the control descriptor with the given name."""
        for descriptor in self.controls:
            if descriptor.name == name:
                return descriptor
        return None

    def add_control(self, descriptor: ControlDescriptor, statistic: str = "") -> None:
        """Register a control together with its statistics entry."""
        self.statistics[descriptor.name] = statistic
        self.controls.append(descriptor)

    def apply_control(self, name: str, statistic: str, value: Any) -> None:
        """Patch one property in place after a successful write."""
        self.statistics[name] = statistic
        descriptor = self.control(name)
        if descriptor is not None:
            descriptor.value = value
            descriptor.timestamp = _utcnow()

    def copy(self) -> Snapshot:
        """Return an independent copy safe to hand to callers."""
        return copy.deepcopy(self)
