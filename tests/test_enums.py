"""Tests for the wire encoding of enumerations."""

import pytest

from solaredge_monitoring.endpoints.accounts_list import AccountSortProperty
from solaredge_monitoring.endpoints.site_list import SiteSortProperty, SiteStatus
from solaredge_monitoring.enums import InverterMode, MeterType, SortOrder, SystemUnits, TimeUnit


@pytest.mark.parametrize(
    "member, expected",
    [
        (MeterType.PRODUCTION, "Production"),
        (MeterType.CONSUMPTION, "Consumption"),
        (MeterType.SELF_CONSUMPTION, "SelfConsumption"),
        (MeterType.FEED_IN, "FeedIn"),
        (MeterType.PURCHASED, "Purchased"),
        (TimeUnit.QUARTER_OF_AN_HOUR, "QUARTER_OF_AN_HOUR"),
        (TimeUnit.HOUR, "HOUR"),
        (TimeUnit.DAY, "DAY"),
        (TimeUnit.WEEK, "WEEK"),
        (TimeUnit.MONTH, "MONTH"),
        (TimeUnit.YEAR, "YEAR"),
        (SortOrder.ASC, "ASC"),
        (SortOrder.DESC, "DESC"),
        (SystemUnits.IMPERIAL, "Imperial"),
        (SystemUnits.METRICS, "Metrics"),
        (SiteSortProperty.PEAK_POWER, "peakPower"),
        (SiteStatus.DISABLED, "Disabled"),
        (AccountSortProperty.FAX, "fax"),
    ],
)
def test_enum_renders_wire_value(member, expected) -> None:
    """str() and f-strings both yield the exact upstream encoding."""
    assert str(member) == expected
    assert f"{member}" == expected


def test_enum_parses_wire_value() -> None:
    """Wire values map back to members."""
    assert MeterType("FeedIn") is MeterType.FEED_IN
    assert TimeUnit("QUARTER_OF_AN_HOUR") is TimeUnit.QUARTER_OF_AN_HOUR


def test_inverter_mode_labels() -> None:
    """Inverter modes have human readable labels."""
    assert InverterMode.WAKE_UP.label == "Wake Up"
    assert InverterMode.OFF.label == "Off"
    assert InverterMode.LOCKED_STDBY.label == "Locked Standby"
    assert InverterMode.LOCKED_INV_ARC_DETECTED.label == "Locked Inverter Arc Detected"
    assert InverterMode.LOCKED_DG.label == "Locked DG"
    assert InverterMode.MPPT.label == "MPPT"
