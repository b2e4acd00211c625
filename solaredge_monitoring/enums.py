"""Enumerations shared by monitoring API requests and responses.

The value of each member is its exact wire encoding.
"""

from enum import Enum


class WireEnum(str, Enum):
    """String enum that renders as its wire value."""

    def __str__(self) -> str:
        return self.value


class MeterType(WireEnum):
    """Meters supported by SolarEdge."""

    PRODUCTION = "Production"
    CONSUMPTION = "Consumption"
    SELF_CONSUMPTION = "SelfConsumption"
    FEED_IN = "FeedIn"
    PURCHASED = "Purchased"


class TimeUnit(WireEnum):
    """Aggregation granularity of time series data."""

    QUARTER_OF_AN_HOUR = "QUARTER_OF_AN_HOUR"
    HOUR = "HOUR"
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class SortOrder(WireEnum):
    """Sort order for list endpoints."""

    ASC = "ASC"
    DESC = "DESC"


class SystemUnits(WireEnum):
    """Measurement system used in environmental benefit responses."""

    IMPERIAL = "Imperial"
    METRICS = "Metrics"


class InverterMode(WireEnum):
    """Operating mode reported in inverter telemetry."""

    OFF = "OFF"
    NIGHT = "NIGHT"
    WAKE_UP = "WAKE_UP"
    PRODUCTION = "PRODUCTION"
    PRODUCTION_LIMIT = "PRODUCTION_LIMIT"
    SHUTDOWN = "SHUTDOWN"
    ERROR = "ERROR"
    SETUP = "SETUP"
    LOCKED_STDBY = "LOCKED_STDBY"
    LOCKED_FIRE_FIGHTERS = "LOCKED_FIRE_FIGHTERS"
    LOCKED_FORCE_SHUTDOWN = "LOCKED_FORCE_SHUTDOWN"
    LOCKED_COMM_TIMEOUT = "LOCKED_COMM_TIMEOUT"
    LOCKED_INV_TRIP = "LOCKED_INV_TRIP"
    LOCKED_INV_ARC_DETECTED = "LOCKED_INV_ARC_DETECTED"
    LOCKED_DG = "LOCKED_DG"
    MPPT = "MPPT"
    SLEEPING = "SLEEPING"

    @property
    def label(self) -> str:
        """Human readable name of the mode."""
        return _INVERTER_MODE_LABELS.get(self, self.value.replace("_", " ").title())


_INVERTER_MODE_LABELS = {
    InverterMode.LOCKED_STDBY: "Locked Standby",
    InverterMode.LOCKED_COMM_TIMEOUT: "Locked Communication Timeout",
    InverterMode.LOCKED_INV_TRIP: "Locked Inverter Trip",
    InverterMode.LOCKED_INV_ARC_DETECTED: "Locked Inverter Arc Detected",
    InverterMode.LOCKED_DG: "Locked DG",
    InverterMode.MPPT: "MPPT",
}
