"""Detailed site power per meter."""

from datetime import datetime
from typing import Iterable, List, Optional

from solaredge_monitoring.endpoints.base import MonitoringRequest, datetime_fragment, list_fragment
from solaredge_monitoring.enums import MeterType, TimeUnit
from solaredge_monitoring.models import ApiModel, MeterValue


class PowerDetails(ApiModel):
    time_unit: TimeUnit
    unit: str
    meters: List[MeterValue]


class SitePowerDetailedResponse(ApiModel):
    power_details: PowerDetails


class SitePowerDetailedRequest(MonitoringRequest):
    path = "site/{site_id}/powerDetails"
    response_model = SitePowerDetailedResponse

    def __init__(
        self,
        start_time: datetime,
        end_time: datetime,
        meters: Optional[Iterable[MeterType]] = None,
    ) -> None:
        super().__init__(
            {
                "meters": list_fragment("meters", meters),
                "start_time": datetime_fragment("startTime", start_time),
                "end_time": datetime_fragment("endTime", end_time),
            }
        )
