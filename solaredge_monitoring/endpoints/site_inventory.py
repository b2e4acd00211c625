"""Inventory of the site: inverters, batteries, meters, gateways and sensors."""

from typing import List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.enums import MeterType
from solaredge_monitoring.models import ApiModel


class InventoryMeter(ApiModel):
    name: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    firmware_version: str
    connected_to: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    meter_type: MeterType = Field(alias="type")
    # "Physical" for a hardware meter, "Virtual" if computed from other meters
    form: str
    sn: Optional[str] = Field(default=None, alias="SN")


class InventorySensor(ApiModel):
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    id: str
    connected_to: str
    category: str
    sensor_type: str = Field(alias="type")


class InventoryGateway(ApiModel):
    name: str
    communication_method: str
    sn: str = Field(alias="SN")
    cpu_version: str


class InventoryBattery(ApiModel):
    name: str
    manufacturer: str
    model: str
    firmware_version: str
    connected_inverter_sn: str
    nameplate_capacity: str
    sn: str = Field(alias="SN")


class Inverter(ApiModel):
    name: str
    manufacturer: str
    model: str
    communication_method: str
    cpu_version: str
    sn: str = Field(alias="SN")
    connected_optimizers: int


class Inventory(ApiModel):
    meters: List[InventoryMeter]
    sensors: List[InventorySensor]
    gateways: List[InventoryGateway]
    batteries: List[InventoryBattery]
    inverters: List[Inverter]


class SiteInventoryResponse(ApiModel):
    inventory: Inventory = Field(alias="Inventory")


class SiteInventoryRequest(MonitoringRequest):
    path = "site/{site_id}/inventory"
    response_model = SiteInventoryResponse

    def __init__(self) -> None:
        super().__init__()
