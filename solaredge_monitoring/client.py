"""Dispatch of monitoring API requests.

``send`` performs one blocking GET for a request, checks the status and
parses the body into the request's response model. Failures surface as
TransportError or HttpStatusError; nothing is retried.
"""

import logging
import re
from http import HTTPStatus
from typing import Any, Optional, Type, TypeVar

import requests
from requests import RequestException

from solaredge_monitoring.config import ClientConfig
from solaredge_monitoring.credentials import Credentials
from solaredge_monitoring.endpoints.base import MONITORING_API_URL, BulkMonitoringRequest, MonitoringRequest
from solaredge_monitoring.exceptions import (
    BulkSiteListError,
    HttpStatusError,
    ResponseParseError,
    TransportError,
)
from solaredge_monitoring.models import ApiModel
from solaredge_monitoring.transport import RequestsTransport, Transport


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=ApiModel)

_API_KEY_PATTERN = re.compile(r"api_key=[^&]*")


def redact(url: str) -> str:
    """Hide the api key in a request URL."""
    return _API_KEY_PATTERN.sub("api_key=***", url)


def status_reason(status_code: int) -> str:
    """Canonical reason phrase for a status, or the numeric status if there is none."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return str(status_code)


def _body_text(response: requests.Response) -> str:
    try:
        return response.text
    except (RequestException, RuntimeError) as exc:
        logger.debug("Unable to read error body: %s", exc)
        return ""


def dispatch(
    url: str,
    response_model: Type[ModelT],
    transport: Transport,
    timeout: Optional[float] = None,
) -> ModelT:
    """Perform a GET against a fully built URL and parse the JSON body."""
    logger.debug("GET %s", redact(url))
    try:
        response = transport.get(url, timeout=timeout)
    except RequestException as exc:
        logger.error("Monitoring API request error: %s", redact(str(exc)))
        raise TransportError(f"Monitoring API request failed: {redact(str(exc))}", cause=exc) from exc

    try:
        if not 200 <= response.status_code < 300:
            reason = status_reason(response.status_code)
            logger.warning("Monitoring API answered %s (%s)", response.status_code, reason)
            raise HttpStatusError(reason, _body_text(response))

        try:
            return response_model.model_validate(response.json())
        except (RequestException, ValueError) as exc:
            logger.error("Unable to parse %s: %s", response_model.__name__, exc)
            raise ResponseParseError(f"Unable to parse {response_model.__name__}: {exc}", cause=exc) from exc
    finally:
        response.close()


def send(
    request: MonitoringRequest,
    credentials: Credentials,
    transport: Transport,
    *,
    base_url: str = MONITORING_API_URL,
    timeout: Optional[float] = None,
) -> Any:
    """Send a request for the credentials' site and return its typed response."""
    url = request.build_url(credentials.site_id, credentials.api_key.get_secret_value(), base_url=base_url)
    return dispatch(url, request.response_model, transport, timeout=timeout)


def send_bulk(
    request: BulkMonitoringRequest,
    credentials: Credentials,
    transport: Transport,
    *,
    base_url: str = MONITORING_API_URL,
    timeout: Optional[float] = None,
) -> Any:
    """Send a request for every site of the credentials' bulk site list."""
    if not isinstance(request, BulkMonitoringRequest):
        raise TypeError(f"{type(request).__name__} has no bulk form")
    if not credentials.bulk_site_ids:
        raise BulkSiteListError("A bulk request needs credentials with a bulk site list")

    url = request.build_bulk_url(
        credentials.bulk_sites, credentials.api_key.get_secret_value(), base_url=base_url
    )
    return dispatch(url, request.bulk_response_model, transport, timeout=timeout)


class MonitoringClient:
    """Credentials, transport and settings bound together for repeated sends.

    A transport passed in stays owned by the caller; one created here is
    closed by ``close``.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[Transport] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.credentials = credentials
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: Transport = transport or RequestsTransport()

    @property
    def site_id(self) -> str:
        return self.credentials.site_id

    def send(self, request: MonitoringRequest) -> Any:
        return send(
            request,
            self.credentials,
            self._transport,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )

    def send_bulk(self, request: BulkMonitoringRequest) -> Any:
        return send_bulk(
            request,
            self.credentials,
            self._transport,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, RequestsTransport):
            self._transport.close()

    def __enter__(self) -> "MonitoringClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
