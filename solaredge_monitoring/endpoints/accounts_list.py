"""Accounts and sub-accounts related to the api key, with search, sort and pagination."""

from typing import Dict, List, Optional

from pydantic import Field

from solaredge_monitoring.endpoints.base import MonitoringRequest, query_fragment, size_fragment
from solaredge_monitoring.enums import SortOrder, WireEnum
from solaredge_monitoring.models import ApiModel


class AccountSortProperty(WireEnum):
    NAME = "name"
    COUNTRY = "country"
    CITY = "city"
    ADDRESS = "address"
    ZIP = "zip"
    FAX = "fax"
    PHONE = "phone"
    NOTES = "notes"


class AccountLocation(ApiModel):
    country: str
    state: Optional[str] = None
    city: str
    address: str
    address2: str
    zip: str


class AccountDetails(ApiModel):
    id: int
    name: str
    location: AccountLocation
    company_web_site: str
    contact_person: str
    email: str
    phone_number: str
    fax_number: str
    notes: str
    parent_id: int
    uris: Dict[str, str] = Field(default_factory=dict)


class Accounts(ApiModel):
    count: int
    list: List[AccountDetails]


class AccountsListResponse(ApiModel):
    accounts: Accounts


class AccountsListRequest(MonitoringRequest):
    """Request the accounts visible to the api key.

    ``size`` must lie in 1..100; other values are left out of the request.
    """

    path = "accounts/list"
    response_model = AccountsListResponse

    def __init__(
        self,
        size: Optional[int] = None,
        start_index: Optional[int] = None,
        search_text: Optional[str] = None,
        sort_property: Optional[AccountSortProperty] = None,
        sort_order: Optional[SortOrder] = None,
    ) -> None:
        super().__init__(
            {
                "size": size_fragment(size),
                "start_index": query_fragment("startIndex", start_index),
                "search_text": query_fragment("searchText", search_text),
                "sort_property": query_fragment("sortProperty", sort_property),
                "sort_order": query_fragment("sortOrder", sort_order),
            }
        )
