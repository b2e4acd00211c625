"""Site overview: lifetime, yearly, monthly and daily energy plus current power."""

from typing import Optional

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class EnergyRevenue(ApiModel):
    energy: float
    revenue: Optional[float] = None


class CurrentPower(ApiModel):
    power: float


class Overview(ApiModel):
    last_update_time: str
    life_time_data: EnergyRevenue
    last_year_data: EnergyRevenue
    last_month_data: EnergyRevenue
    last_day_data: EnergyRevenue
    current_power: CurrentPower
    measured_by: str


class SiteOverviewResponse(ApiModel):
    overview: Overview


class SiteOverviewRequest(MonitoringRequest):
    path = "site/{site_id}/overview"
    response_model = SiteOverviewResponse

    def __init__(self) -> None:
        super().__init__()
