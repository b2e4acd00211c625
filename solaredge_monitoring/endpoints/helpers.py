"""Lookup of endpoints that can be sent without parameters."""

import logging
from typing import Dict, Type

from .base import MonitoringRequest
from .site_data_period import SiteDataPeriodRequest
from .site_details import SiteDetailsRequest
from .site_environmental_benefits import SiteEnvironmentalBenefitsRequest
from .site_equipment_list import SiteEquipmentListRequest
from .site_inventory import SiteInventoryRequest
from .site_overview import SiteOverviewRequest
from .site_power_flow import SitePowerFlowRequest
from .site_sensors import SiteGetSensorListRequest
from .version import CurrentVersionRequest, SupportedVersionsRequest


logger = logging.getLogger(__name__)

SIMPLE_ENDPOINTS: Dict[str, Type[MonitoringRequest]] = {
    "details": SiteDetailsRequest,
    "overview": SiteOverviewRequest,
    "data-period": SiteDataPeriodRequest,
    "inventory": SiteInventoryRequest,
    "equipment-list": SiteEquipmentListRequest,
    "sensors": SiteGetSensorListRequest,
    "power-flow": SitePowerFlowRequest,
    "env-benefits": SiteEnvironmentalBenefitsRequest,
    "version": CurrentVersionRequest,
    "supported-versions": SupportedVersionsRequest,
}


def get_request(name: str) -> MonitoringRequest:
    """Build the request registered under the given endpoint name."""
    try:
        request_class = SIMPLE_ENDPOINTS[name]
    except KeyError:
        raise ValueError(f"Unknown endpoint '{name}'") from None

    logger.debug("Building %s for endpoint %s", request_class.__name__, name)
    return request_class()
