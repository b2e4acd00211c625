"""Detailed site energy per meter: production, consumption, feed-in, purchased, self-consumption."""

from datetime import datetime
from typing import Iterable, List, Optional

from solaredge_monitoring.endpoints.base import (
    MonitoringRequest,
    datetime_fragment,
    list_fragment,
    query_fragment,
)
from solaredge_monitoring.enums import MeterType, TimeUnit
from solaredge_monitoring.models import ApiModel, MeterValue


class EnergyDetails(ApiModel):
    """Energy values per requested meter type."""

    time_unit: TimeUnit
    unit: str
    meters: List[MeterValue]


class SiteEnergyDetailedResponse(ApiModel):
    energy_details: EnergyDetails


class SiteEnergyDetailedRequest(MonitoringRequest):
    """Request detailed energy between two points in time.

    Args:
        start_time: Beginning of the period.
        end_time: End of the period.
        time_unit: Aggregation granularity of the returned values.
        meters: Meter types to report, all meters if omitted.
    """

    path = "site/{site_id}/energyDetails"
    response_model = SiteEnergyDetailedResponse

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
