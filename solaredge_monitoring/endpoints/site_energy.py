"""Site energy measurements, for one site or in bulk."""

from datetime import date
from typing import List, Optional

from solaredge_monitoring.endpoints.base import BulkMonitoringRequest, date_fragment, query_fragment
from solaredge_monitoring.enums import TimeUnit
from solaredge_monitoring.models import ApiModel, DateValue


class Energy(ApiModel):
    """Energy measurements over the requested dates."""

    time_unit: TimeUnit
    unit: str
    measured_by: Optional[str] = None
    values: List[DateValue]


class SiteEnergyResponse(ApiModel):
    energy: Energy


class EnergyValues(ApiModel):
    measured_by: Optional[str] = None
    values: List[DateValue]


class SiteEnergyEntry(ApiModel):
    """Energy values of one site in a bulk response."""

    site_id: int
    energy_values: EnergyValues


class SitesEnergy(ApiModel):
    time_unit: TimeUnit
    unit: str
    count: int
    site_energy_list: List[SiteEnergyEntry]


class SitesEnergyResponse(ApiModel):
    sites_energy: SitesEnergy


class SiteEnergyRequest(BulkMonitoringRequest):
    """Request site energy between two dates.

    Args:
        start_date: First day of the period.
        end_date: Last day of the period.
        time_unit: Aggregation granularity, server default (DAY) if omitted.
    """

    path = "site/{site_id}/energy"
    response_model = SiteEnergyResponse
    bulk_path = "sites/{site_ids}/energy"
    bulk_response_model = SitesEnergyResponse

    def __init__(self, start_date: date, end_date: date, time_unit: Optional[TimeUnit] = None) -> None:
        super().__init__(
            {
                "time_unit": query_fragment("timeUnit", time_unit),
                "start_date": date_fragment("startDate", start_date),
                "end_date": date_fragment("endDate", end_date),
            }
        )
