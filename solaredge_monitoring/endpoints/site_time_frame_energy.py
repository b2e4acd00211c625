"""Total energy produced by the site for a given period."""

from datetime import date
from typing import List, Optional

from solaredge_monitoring.endpoints.base import BulkMonitoringRequest, date_fragment
from solaredge_monitoring.models import ApiModel


class TimeFrameEnergy(ApiModel):
    """Energy produced during the period."""

    energy: float
    unit: str
    measured_by: Optional[str] = None


class SiteTimeFrameEnergyResponse(ApiModel):
    time_frame_energy: TimeFrameEnergy


class SiteTimeFrameEnergyEntry(ApiModel):
    site_id: int
    time_frame_energy: TimeFrameEnergy


class TimeFrameEnergyList(ApiModel):
    count: int
    time_frame_energy_list: List[SiteTimeFrameEnergyEntry]


class SitesTimeFrameEnergyResponse(ApiModel):
    time_frame_energy_list: TimeFrameEnergyList


class SiteTimeFrameEnergyRequest(BulkMonitoringRequest):
    path = "site/{site_id}/timeFrameEnergy"
    response_model = SiteTimeFrameEnergyResponse
    bulk_path = "sites/{site_ids}/timeFrameEnergy"
    bulk_response_model = SitesTimeFrameEnergyResponse

    def __init__(self, start_date: date, end_date: date) -> None:
        super().__init__(
            {
                "start_date": date_fragment("startDate", start_date),
                "end_date": date_fragment("endDate", end_date),
            }
        )
