from __future__ import annotations

from custom_components.clickshare.entity import entity_key, entity_name
from custom_components.clickshare.models import Snapshot, create_dropdown, create_switch
from custom_components.clickshare.select import label_to_option, option_to_label
from custom_components.clickshare.sensor import read_only_statistics
from custom_components.clickshare.switch import switch_state


def test_entity_names() -> None:
    assert entity_name("Power Management#Power Mode") == "Power Management Power Mode"
    assert entity_name("Video Mode") == "Video Mode"
    assert entity_key("Display#Output 1 Resolution") == "display_output_1_resolution"
    assert entity_key("Power Management#Standby Timeout (min)") == (
        "power_management_standby_timeout__min"
    )


def test_dropdown_labels_map_to_options() -> None:
    control = create_dropdown(
        "Power Management#Power Mode",
        "ecoStandby",
        ["networkedStandby", "ecoStandby"],
        ["Networked standby", "Eco standby"],
    ).control

    assert option_to_label(control, "ecoStandby") == "Eco standby"
    assert option_to_label(control, "deepStandby") is None
    assert label_to_option(control, "Networked standby") == "networkedStandby"
    assert label_to_option(control, "unknown") == "unknown"


def test_switch_state() -> None:
    assert switch_state("true") is True
    assert switch_state("false") is False
    assert switch_state("1") is True
    assert switch_state("0") is False
    assert switch_state(1) is True
    assert switch_state(False) is False


def test_read_only_statistics() -> None:
    snapshot = Snapshot(statistics={"Device information#Serial number": "1863550376"})
    snapshot.add_control(create_switch("Audio", "enabled", "disabled", True), "true")

    assert read_only_statistics(snapshot) == ["Device information#Serial number"]
    assert read_only_statistics(None) == []
