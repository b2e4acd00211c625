"""Inverters and SMIs of the site."""

from typing import List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class Equipment(ApiModel):
    name: str
    manufacturer: str
    model: str
    serial_number: str
    kw_pdc: Optional[str] = Field(default=None, alias="kWpDC")


class Reporters(ApiModel):
    count: int
    list: List[Equipment]


class SiteEquipmentListResponse(ApiModel):
    reporters: Reporters


class SiteEquipmentListRequest(MonitoringRequest):
    path = "equipment/{site_id}/list"
    response_model = SiteEquipmentListResponse

    def __init__(self) -> None:
        super().__init__()
