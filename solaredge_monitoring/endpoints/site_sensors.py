"""Sensors of the site and the gateways they are connected to."""

from typing import List

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class Sensor(ApiModel):
    name: str
    measurement: str
    sensor_type: str = Field(alias="type")


class Gateway(ApiModel):
    """Sensors connected to one gateway."""

    connected_to: str
    count: int
    sensors: List[Sensor]


class SiteSensors(ApiModel):
    total: int
    list: List[Gateway]


class SiteGetSensorListResponse(ApiModel):
    site_sensors: SiteSensors = Field(alias="SiteSensors")


class SiteGetSensorListRequest(MonitoringRequest):
    path = "equipment/{site_id}/sensors"
    response_model = SiteGetSensorListResponse

    def __init__(self) -> None:
        super().__init__()
