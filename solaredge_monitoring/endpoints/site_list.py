"""Sites related to the account api key, with search, sort and pagination."""

from typing import Iterable, List, Optional

from solaredge_monitoring.endpoints.base import (
    MonitoringRequest,
    list_fragment,
    query_fragment,
    size_fragment,
)
from solaredge_monitoring.enums import SortOrder, WireEnum
from solaredge_monitoring.models import ApiModel, SiteDetails


class SiteSortProperty(WireEnum):
    NAME = "name"
    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    ADDRESS = "address"
    ZIP = "zip"
    STATUS = "status"
    PEAK_POWER = "peakPower"
    INSTALLATION_DATE = "installationDate"
    AMOUNT = "amount"
    MAX_SEVERITY = "maxSeverity"
    CREATION_TIME = "creationTime"


class SiteStatus(WireEnum):
    """Site status filter. The server default lists Active and Pending sites."""

    ACTIVE = "Active"
    PENDING = "Pending"
    DISABLED = "Disabled"
    ALL = "All"


class Sites(ApiModel):
    count: int
    site: List[SiteDetails]


class SiteListResponse(ApiModel):
    sites: Sites


class SiteListRequest(MonitoringRequest):
    """Request the sites of the account.

    Args:
        size: Maximum number of sites returned, 1..100. Out of range values
            are left out of the request. Fetch further pages with start_index.
        start_index: Index of the first site returned.
        search_text: Free text matched against name, notes, address, etc.
        sort_property: Property to sort the list by.
        sort_order: Sort direction for sort_property.
        status: Statuses of the sites to include.
    """

    path = "sites/list"
    response_model = SiteListResponse

    def __init__(
        self,
        size: Optional[int] = None,
        start_index: Optional[int] = None,
        search_text: Optional[str] = None,
        sort_property: Optional[SiteSortProperty] = None,
        sort_order: Optional[SortOrder] = None,
        status: Optional[Iterable[SiteStatus]] = None,
    ) -> None:
        super().__init__(
            {
                "size": size_fragment(size),
                "start_index": query_fragment("startIndex", start_index),
                "search_text": query_fragment("searchText", search_text),
                "sort_property": query_fragment("sortProperty", sort_property),
                "sort_order": query_fragment("sortOrder", sort_order),
                "status": list_fragment("status", status),
            }
        )
