"""Current and supported API versions of the monitoring server."""

from typing import List

from solaredge_monitoring.endpoints.base import MonitoringRequest
from solaredge_monitoring.models import ApiModel


class Version(ApiModel):
    """A release number in <major.minor.revision> format."""

    release: str


class CurrentVersionResponse(ApiModel):
    version: Version


class SupportedVersionsResponse(ApiModel):
    supported: List[Version]


class CurrentVersionRequest(MonitoringRequest):
    """Request the API version running on the server."""

    path = "version/current"
    response_model = CurrentVersionResponse

    def __init__(self) -> None:
        super().__init__()


class SupportedVersionsRequest(MonitoringRequest):
    """Request all API versions supported by the server."""

    path = "version/supported"
    response_model = SupportedVersionsResponse

    def __init__(self) -> None:
        super().__init__()
