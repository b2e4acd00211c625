"""Battery storage data: state of energy, power and lifetime energy."""

from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest, datetime_fragment, list_fragment
from solaredge_monitoring.models import ApiModel


class BatteryTelemetry(ApiModel):
    time_stamp: str
    power: Optional[float] = None
    battery_state: Optional[int] = None
    life_time_energy_charged: Optional[float] = None
    life_time_energy_discharged: Optional[float] = None
    full_pack_energy_available: Optional[float] = None
    internal_temp: Optional[float] = None
    ac_grid_charging: Optional[float] = Field(default=None, alias="ACGridCharging")
    battery_percentage_state: Optional[float] = None


class Battery(ApiModel):
    nameplate: float
    serial_number: Optional[str] = None
    model_number: Optional[str] = None
    telemetry_count: Optional[int] = None
    telemetries: List[BatteryTelemetry] = Field(default_factory=list)


class StorageData(ApiModel):
    battery_count: int
    batteries: List[Battery]


class SiteStorageDataResponse(ApiModel):
    storage_data: StorageData


class SiteStorageDataRequest(MonitoringRequest):
    """Request storage data, optionally limited to some battery serial numbers."""

    path = "site/{site_id}/storageData"
    response_model = SiteStorageDataResponse

    def __init__(
        self,
        start_time: datetime,
        end_time: datetime,
        serials: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(
            {
                "start_time": datetime_fragment("startTime", start_time),
                "end_time": datetime_fragment("endTime", end_time),
                "serials": list_fragment("serials", serials),
            }
        )
