"""Environmental benefits of the site: CO2 saved, trees planted, light bulbs powered."""

from typing import Optional

from solaredge_monitoring.endpoints.base import MonitoringRequest, query_fragment
from solaredge_monitoring.enums import SystemUnits
from solaredge_monitoring.models import ApiModel


class GasEmissionSaved(ApiModel):
    """Emissions an equivalent fossil fuel system would have produced."""

    units: str
    co2: float
    so2: float
    nox: float


class EnvBenefits(ApiModel):
    gas_emission_saved: GasEmissionSaved
    trees_planted: float
    light_bulbs: float


class SiteEnvironmentalBenefitsResponse(ApiModel):
    env_benefits: EnvBenefits


class SiteEnvironmentalBenefitsRequest(MonitoringRequest):
    path = "site/{site_id}/envBenefits"
    response_model = SiteEnvironmentalBenefitsResponse

    def __init__(self, system_units: Optional[SystemUnits] = None) -> None:
        super().__init__({"system_units": query_fragment("systemUnits", system_units)})
