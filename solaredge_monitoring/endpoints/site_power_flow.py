"""Current power flow between PV array, storage, loads and grid."""

from typing import List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class Connection(ApiModel):
    """A producing element (``from``) feeding a consuming element (``to``)."""

    source: str = Field(alias="from")
    target: str = Field(alias="to")


class Parameters(ApiModel):
    """State of one element. Power is always positive; direction comes from the connections."""

    status: str
    current_power: float
    # STORAGE only
    charge_level: Optional[int] = None
    critical: Optional[bool] = None
    time_left: Optional[str] = None


class SiteCurrentPowerFlow(ApiModel):
    update_refresh_rate: int
    unit: str
    connections: List[Connection]
    grid: Parameters = Field(alias="GRID")
    load: Parameters = Field(alias="LOAD")
    pv: Optional[Parameters] = Field(default=None, alias="PV")
    storage: Optional[Parameters] = Field(default=None, alias="STORAGE")


class SitePowerFlowResponse(ApiModel):
    site_current_power_flow: SiteCurrentPowerFlow


class SitePowerFlowRequest(MonitoringRequest):
    path = "site/{site_id}/currentPowerFlow"
    response_model = SitePowerFlowResponse

    def __init__(self) -> None:
        super().__init__()
