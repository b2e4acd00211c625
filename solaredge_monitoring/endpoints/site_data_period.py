"""Energy production start and end dates of the site."""

from typing import Optional

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class SiteDataPeriod(ApiModel):
    """Period of time the site has been producing. Both ends are absent for a new site."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None


class SiteDataPeriodResponse(ApiModel):
    data_period: SiteDataPeriod


class SiteDataPeriodRequest(MonitoringRequest):
    path = "site/{site_id}/dataPeriod"
    response_model = SiteDataPeriodResponse

    def __init__(self) -> None:
        super().__init__()
