"""Replacement history of an inverter, optimizer, battery or gateway."""

from typing import List

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class ChangeEntry(ApiModel):
    serial_number: str
    part_number: str
    date: str


class ChangeLog(ApiModel):
    count: int
    list: List[ChangeEntry]


class SiteEquipmentChangeLogResponse(ApiModel):
    change_log: ChangeLog = Field(alias="ChangeLog")


class SiteEquipmentChangeLogRequest(MonitoringRequest):
    """Request the change log of one piece of equipment by its short serial number."""

    path = "equipment/{site_id}/{serial_number}/changeLog"
    response_model = SiteEquipmentChangeLogResponse

    def __init__(self, serial_number: str) -> None:
        super().__init__(serial_number=serial_number)
