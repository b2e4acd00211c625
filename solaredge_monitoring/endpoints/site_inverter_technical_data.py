"""Technical telemetry of one inverter over a period of time."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest, datetime_fragment
from solaredge_monitoring.enums import InverterMode
from solaredge_monitoring.models import ApiModel


class PhaseData(ApiModel):
    """AC measurements of a single phase."""

    ac_current: float
    ac_voltage: float
    ac_frequency: float
    apparent_power: Optional[float] = None
    active_power: Optional[float] = None
    reactive_power: Optional[float] = None
    cos_phi: Optional[float] = None


class Telemetry(ApiModel):
    """One telemetry sample.

    ``operation_mode`` is 0 when on-grid, 1 when off-grid on PV or battery
    and 2 when off-grid with a generator present.
    """

    date: str
    total_active_power: Optional[float] = None
    dc_voltage: Optional[float] = None
    ground_fault_resistance: Optional[float] = None
    power_limit: float
    total_energy: float
    temperature: float
    inverter_mode: InverterMode
    operation_mode: int
    l1_data: PhaseData = Field(alias="L1Data")
    l2_data: Optional[PhaseData] = Field(default=None, alias="L2Data")
    l3_data: Optional[PhaseData] = Field(default=None, alias="L3Data")


class InverterData(ApiModel):
    count: int
    telemetries: List[Telemetry]


class SiteInverterTechnicalDataResponse(ApiModel):
    data: InverterData


class SiteInverterTechnicalDataRequest(MonitoringRequest):
    """Request inverter telemetry; the server limits the period to one week."""

    path = "equipment/{site_id}/{serial_number}/data"
    response_model = SiteInverterTechnicalDataResponse

    def __init__(self, serial_number: str, start_time: datetime, end_time: datetime) -> None:
        super().__init__(
            {
                "start_time": datetime_fragment("startTime", start_time),
                "end_time": datetime_fragment("endTime", end_time),
            },
            serial_number=serial_number,
        )
