"""Per-meter lifetime energy readings, metadata and connected device."""

from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import (
    MonitoringRequest,
    datetime_fragment,
    list_fragment,
    query_fragment,
)
from solaredge_monitoring.enums import MeterType, TimeUnit
from solaredge_monitoring.models import ApiModel, DateValue


class Meter(ApiModel):
    """Readings and metadata of one meter."""

    meter_serial_number: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    model: str
    meter_type: MeterType
    values: List[DateValue]


class MeterEnergyDetails(ApiModel):
    time_unit: TimeUnit
    unit: str
    meters: List[Meter]


class SiteGetMetersDataResponse(ApiModel):
    meter_energy_details: MeterEnergyDetails


class SiteGetMetersDataRequest(MonitoringRequest):
    path = "site/{site_id}/meters"
    response_model = SiteGetMetersDataResponse

    def __init__(
        self,
        start_time: datetime,
        end_time: datetime,
        time_unit: Optional[TimeUnit] = None,
        meters: Optional[Iterable[MeterType]] = None,
    ) -> None:
        super().__init__(
            {
                "meters": list_fragment("meters", meters),
                "time_unit": query_fragment("timeUnit", time_unit),
                "start_time": datetime_fragment("startTime", start_time),
                "end_time": datetime_fragment("endTime", end_time),
            }
        )
