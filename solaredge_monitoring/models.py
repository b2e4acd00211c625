"""Data models shared by several monitoring API responses."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from solaredge_monitoring.enums import MeterType


class ApiModel(BaseModel):
    """Base model for monitoring API payloads, which use camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        protected_namespaces=(),
    )


class DateValue(ApiModel):
    """A date and value pair. The unit is given elsewhere in the response."""

    date: str
    value: Optional[float] = None


class MeterValue(ApiModel):
    """Values of one meter type over a range of dates."""

    meter_type: MeterType = Field(alias="type")
    values: List[DateValue]


class SiteLocation(ApiModel):
    """Location of the SolarEdge installation."""

    country: str
    state: Optional[str] = None
    city: str
    address: str
    address2: str
    zip: str
    time_zone: str
    country_code: str
    state_code: Optional[str] = None


class SiteModule(ApiModel):
    """Solar panel module information."""

    manufacturer_name: str
    model_name: str
    maximum_power: float
    temperature_coef: float


class SitePublicSettings(ApiModel):
    """Settings of the public web page of the site."""

    name: Optional[str] = None
    is_public: bool


class SiteDetails(ApiModel):
    """Details of a single site, as returned by the details and site list endpoints."""

    id: int
    name: str
    account_id: int
    status: str
    peak_power: float
    last_update_time: Optional[str] = None
    currency: Optional[str] = None
    installation_date: str
    pto_date: Optional[str] = None
    notes: Optional[str] = None
    site_type: str = Field(alias="type")
    location: SiteLocation
    primary_module: Optional[SiteModule] = None
    alternative_module: Optional[SiteModule] = None
    uris: Dict[str, str] = Field(default_factory=dict)
    public_settings: SitePublicSettings
