"""Base request interface for monitoring API endpoints.

Each endpoint is a subclass of MonitoringRequest naming its path template
and response model. Optional query parameters are rendered into URL
fragments of the form ``name=value&`` when the request is built, so the
URL of a request never changes after construction.
"""

import logging
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Type

from solaredge_monitoring.models import ApiModel


logger = logging.getLogger(__name__)

MONITORING_API_URL = "https://monitoringapi.solaredge.com/"
URL_DATE_FORMAT = "%Y-%m-%d"
URL_DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_PAGE_SIZE = 100


def query_fragment(name: str, value: Any) -> str:
    """Render a single query parameter, or an empty string if it is absent."""
    if value is None:
        return ""
    return f"{name}={value}&"


def date_fragment(name: str, value: Optional[date]) -> str:
    """Render a date-only parameter as YYYY-MM-DD."""
    if value is None:
        return ""
    return query_fragment(name, value.strftime(URL_DATE_FORMAT))


def datetime_fragment(name: str, value: Optional[datetime]) -> str:
    """Render a date-time parameter as YYYY-MM-DD HH:MM:SS."""
    if value is None:
        return ""
    return query_fragment(name, value.strftime(URL_DATE_TIME_FORMAT))


def list_fragment(name: str, values: Optional[Iterable[Any]]) -> str:
    """Render a multi-valued parameter as one comma-joined fragment."""
    if values is None:
        return ""
    joined = ",".join(str(v) for v in values)
    if not joined:
        return ""
    return query_fragment(name, joined)


def size_fragment(size: Optional[int]) -> str:
    """Render a pagination size, dropping values outside (0, 100]."""
    if size is None:
        return ""
    if not 0 < size <= MAX_PAGE_SIZE:
        logger.warning("Ignoring page size %s outside 1..%s", size, MAX_PAGE_SIZE)
        return ""
    return query_fragment("size", size)


class MonitoringRequest:
    """A GET request against one monitoring API endpoint."""

    path: ClassVar[str]
    response_model: ClassVar[Type[ApiModel]]

    def __init__(self, fragments: Optional[Dict[str, str]] = None, **path_params: str):
        self._fragments: Mapping[str, str] = MappingProxyType(dict(fragments or {}))
        self._path_params: Mapping[str, str] = MappingProxyType(path_params)

    @property
    def fragments(self) -> Mapping[str, str]:
        """Pre-rendered query fragments in URL order, keyed by parameter."""
        return self._fragments

    @property
    def path_params(self) -> Mapping[str, str]:
        """Path parameters other than the site id."""
        return self._path_params

    def query(self) -> str:
        """Concatenation of all non-empty fragments."""
        return "".join(self._fragments.values())

    def build_url(self, site_id: str, api_key: str, base_url: str = MONITORING_API_URL) -> str:
        """Build the full request URL for a site, ending with the api key."""
        path = self.path.format(site_id=site_id, **self._path_params)
        return f"{base_url}{path}?{self.query()}api_key={api_key}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._fragments) == dict(other._fragments) and dict(self._path_params) == dict(
            other._path_params
        )

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._fragments.items()), tuple(self._path_params.items())))

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in {**self._path_params, **self._fragments}.items())
        return f"{type(self).__name__}({params})"


class BulkMonitoringRequest(MonitoringRequest):
    """A request that can also be sent for a list of sites at once."""

    bulk_path: ClassVar[str]
    bulk_response_model: ClassVar[Type[ApiModel]]

    def build_bulk_url(self, site_ids: str, api_key: str, base_url: str = MONITORING_API_URL) -> str:
        """Build the bulk URL for a comma-joined list of site ids."""
        path = self.bulk_path.format(site_ids=site_ids, **self._path_params)
        return f"{base_url}{path}?{self.query()}api_key={api_key}"
