"""Site power measurements in 15 minute resolution, for one site or in bulk."""

from datetime import datetime
from typing import List, Optional

from solaredge_monitoring.endpoints.base import BulkMonitoringRequest, datetime_fragment
from solaredge_monitoring.enums import TimeUnit
from solaredge_monitoring.models import ApiModel, DateValue


class Power(ApiModel):
    """Power measurements over the requested period."""

    time_unit: TimeUnit
    unit: str
    measured_by: Optional[str] = None
    values: List[DateValue]


class SitePowerResponse(ApiModel):
    power: Power


class PowerDataValueSeries(ApiModel):
    measured_by: Optional[str] = None
    values: List[DateValue]


class SitePowerEntry(ApiModel):
    """Power values of one site in a bulk response."""

    site_id: int
    power_data_value_series: PowerDataValueSeries


class PowerDateValuesList(ApiModel):
    time_unit: TimeUnit
    unit: str
    count: int
    site_energy_list: List[SitePowerEntry]


class SitesPowerResponse(ApiModel):
    power_date_values_list: PowerDateValuesList


class SitePowerRequest(BulkMonitoringRequest):
    """Request site power between two points in time.

    The server limits the period to one month.
    """

    path = "site/{site_id}/power"
    response_model = SitePowerResponse
    bulk_path = "sites/{site_ids}/power"
    bulk_response_model = SitesPowerResponse

    def __init__(self, start_time: datetime, end_time: datetime) -> None:
        super().__init__(
            {
                "start_time": datetime_fragment("startTime", start_time),
                "end_time": datetime_fragment("endTime", end_time),
            }
        )
