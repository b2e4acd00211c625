"""Site details: name, location, status, modules and public settings."""

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel, SiteDetails


class SiteDetailsResponse(ApiModel):
    details: SiteDetails


class SiteDetailsRequest(MonitoringRequest):
    path = "site/{site_id}/details"
    response_model = SiteDetailsResponse

    def __init__(self) -> None:
        super().__init__()
