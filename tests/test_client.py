"""Tests for request dispatch and the error taxonomy."""

import logging
import threading
import time
from datetime import datetime
from unittest.mock import Mock

import pytest
import requests

from conftest import FakeTransport, make_response
from solaredge_monitoring.client import MonitoringClient, redact, send, send_bulk, status_reason
from solaredge_monitoring.config import ClientConfig
from solaredge_monitoring.credentials import Credentials
from solaredge_monitoring.endpoints.base import MONITORING_API_URL
from solaredge_monitoring.endpoints.site_details import SiteDetailsRequest
from solaredge_monitoring.endpoints.site_power import SitePowerRequest
from solaredge_monitoring.endpoints.site_time_frame_energy import SiteTimeFrameEnergyRequest
from solaredge_monitoring.endpoints.version import CurrentVersionRequest, CurrentVersionResponse
from solaredge_monitoring.exceptions import (
    BulkSiteListError,
    HttpStatusError,
    MonitoringError,
    ResponseParseError,
    TransportError,
)
from solaredge_monitoring.transport import RequestsTransport


DT = datetime(2022, 1, 1)


class TestSend:
    """Tests for the generic send operation."""

    def test_success(self, credentials: Credentials) -> None:
        """A 2xx body is parsed into the response model."""
        transport = FakeTransport([make_response(200, {"version": {"release": "1.0.0"}})])

        resp = send(CurrentVersionRequest(), credentials, transport)

        assert isinstance(resp, CurrentVersionResponse)
        assert resp.version.release == "1.0.0"
        assert transport.urls == [f"{MONITORING_API_URL}version/current?api_key=SECRETKEY"]
        assert len(transport.closed) == 1

    def test_site_id_in_url(self, credentials: Credentials) -> None:
        """The credentials' site id is interpolated into the path."""
        transport = FakeTransport([make_response(404, "")])

        with pytest.raises(HttpStatusError):
            send(SiteDetailsRequest(), credentials, transport)

        assert transport.urls == [f"{MONITORING_API_URL}site/12345/details?api_key=SECRETKEY"]

    def test_forbidden(self, credentials: Credentials) -> None:
        """A 403 yields the canonical reason and the raw body, without JSON decoding."""
        response = make_response(403, "Access denied", reason="Nope")
        response.json = Mock(side_effect=AssertionError("error body must not be decoded"))
        transport = FakeTransport([response])

        with pytest.raises(HttpStatusError) as exc_info:
            send(SiteDetailsRequest(), credentials, transport)

        assert exc_info.value.reason == "Forbidden"
        assert exc_info.value.body == "Access denied"
        assert len(transport.closed) == 1

    def test_status_without_canonical_phrase(self, credentials: Credentials) -> None:
        """Unknown statuses are reported by number."""
        transport = FakeTransport([make_response(599, "")])

        with pytest.raises(HttpStatusError) as exc_info:
            send(SiteDetailsRequest(), credentials, transport)

        assert exc_info.value.reason == "599"
        assert exc_info.value.body == ""

    def test_connection_error(self, credentials: Credentials) -> None:
        """Transport failures are wrapped with their cause."""
        cause = requests.ConnectionError("Name or service not known")
        transport = FakeTransport([cause])

        with pytest.raises(TransportError) as exc_info:
            send(SiteDetailsRequest(), credentials, transport)

        assert exc_info.value.cause is cause
        assert not isinstance(exc_info.value, ResponseParseError)

    def test_invalid_json(self, credentials: Credentials) -> None:
        """A 2xx body that is not JSON is a parse error."""
        transport = FakeTransport([make_response(200, "<html>maintenance</html>")])

        with pytest.raises(ResponseParseError):
            send(CurrentVersionRequest(), credentials, transport)
        assert len(transport.closed) == 1

    def test_schema_mismatch(self, credentials: Credentials) -> None:
        """A 2xx body of the wrong shape is a parse error, which is a transport error."""
        transport = FakeTransport([make_response(200, {"unexpected": True})])

        with pytest.raises(TransportError) as exc_info:
            send(CurrentVersionRequest(), credentials, transport)

        assert isinstance(exc_info.value, ResponseParseError)
        assert isinstance(exc_info.value, MonitoringError)

    def test_api_key_not_logged(self, credentials: Credentials, caplog) -> None:
        """Debug logging redacts the api key."""
        transport = FakeTransport([make_response(200, {"version": {"release": "1.0.0"}})])

        with caplog.at_level(logging.DEBUG, logger="solaredge_monitoring.client"):
            send(CurrentVersionRequest(), credentials, transport)

        assert "api_key=***" in caplog.text
        assert "SECRETKEY" not in caplog.text

    def test_timeout_passed_through(self, credentials: Credentials) -> None:
        """The configured timeout reaches the transport."""
        transport = FakeTransport([make_response(200, {"version": {"release": "1.0.0"}})])

        send(CurrentVersionRequest(), credentials, transport, timeout=5.0)

        assert transport.timeouts == [5.0]


class TestSendBulk:
    """Tests for bulk sends."""

    def test_bulk_url(self, credentials: Credentials) -> None:
        """The bulk site list replaces the site id segment."""
        body = {"timeFrameEnergyList": {"count": 0, "timeFrameEnergyList": []}}
        transport = FakeTransport([make_response(200, body)])
        bulk = credentials.with_bulk_sites(["1", "2"])

        resp = send_bulk(SiteTimeFrameEnergyRequest(DT, DT), bulk, transport)

        assert resp.time_frame_energy_list.count == 0
        assert transport.urls[0].startswith(f"{MONITORING_API_URL}sites/1,2/timeFrameEnergy?")

    def test_missing_bulk_list_fails_before_network(self, credentials: Credentials) -> None:
        """No request is sent without a bulk list."""
        transport = FakeTransport([])

        with pytest.raises(BulkSiteListError):
            send_bulk(SitePowerRequest(DT, DT), credentials, transport)

        assert transport.urls == []

    def test_request_without_bulk_form(self, credentials: Credentials) -> None:
        """Requests without a bulk form are rejected."""
        with pytest.raises(TypeError):
            send_bulk(SiteDetailsRequest(), credentials.with_bulk_sites(["1"]), FakeTransport([]))


def test_status_reason() -> None:
    """Canonical phrases come from the status code, not the server."""
    assert status_reason(403) == "Forbidden"
    assert status_reason(429) == "Too Many Requests"
    assert status_reason(799) == "799"


def test_redact() -> None:
    """Only the api key value is hidden."""
    assert redact("https://x/site/1/details?startTime=a&api_key=abc") == "https://x/site/1/details?startTime=a&api_key=***"


class TestMonitoringClient:
    """Tests for the client wrapper."""

    def test_send_uses_config(self, credentials: Credentials) -> None:
        """Base URL and timeout come from the client config."""
        transport = FakeTransport([make_response(200, {"version": {"release": "1.0.0"}})])
        client = MonitoringClient(
            credentials, transport=transport, config=ClientConfig(base_url="http://localhost/", timeout=3)
        )

        resp = client.send(CurrentVersionRequest())

        assert resp.version.release == "1.0.0"
        assert transport.urls == ["http://localhost/version/current?api_key=SECRETKEY"]
        assert transport.timeouts == [3.0]
        assert client.site_id == "12345"

    def test_send_bulk(self, credentials: Credentials) -> None:
        """Bulk sends go through the client's transport."""
        body = {
            "powerDateValuesList": {"timeUnit": "QUARTER_OF_AN_HOUR", "unit": "W", "count": 0, "siteEnergyList": []}
        }
        transport = FakeTransport([make_response(200, body)])
        client = MonitoringClient(credentials.with_bulk_sites(["7"]), transport=transport)

        resp = client.send_bulk(SitePowerRequest(DT, DT))

        assert resp.power_date_values_list.count == 0
        assert "/sites/7/power?" in transport.urls[0]

    def test_caller_owned_transport_not_closed(self, credentials: Credentials) -> None:
        """A transport passed in is left open."""
        transport = Mock(spec=RequestsTransport)

        with MonitoringClient(credentials, transport=transport):
            pass

        transport.close.assert_not_called()

    def test_owned_transport_closed(self, credentials: Credentials, monkeypatch) -> None:
        """A transport created by the client is closed on exit."""
        closed = []
        monkeypatch.setattr(RequestsTransport, "close", lambda self: closed.append(self))

        with MonitoringClient(credentials):
            pass

        assert len(closed) == 1


class TestRequestsTransport:
    """Tests for the requests-backed transport."""

    def test_session_reused(self) -> None:
        """One session serves all requests."""
        session = Mock(spec=requests.Session)
        transport = RequestsTransport(session)

        transport.get("https://example.com/a", timeout=1.0)
        transport.get("https://example.com/b")

        assert session.get.call_count == 2
        session.get.assert_called_with("https://example.com/b", timeout=None)

    def test_concurrent_first_use_creates_one_session(self, monkeypatch) -> None:
        """Threads sharing a fresh transport end up on the same session."""
        created = []

        class SlowSession:
            def __init__(self) -> None:
                time.sleep(0.2)
                created.append(self)

            def get(self, url, timeout=None):  # pylint: disable=unused-argument
                return url

            def close(self) -> None:
                pass

        monkeypatch.setattr(requests, "Session", SlowSession)
        shared = RequestsTransport()
        barrier = threading.Barrier(2)

        def worker() -> None:
            barrier.wait()
            shared.get("https://example.com/")

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(created) == 1

    def test_close(self) -> None:
        """Closing releases the session."""
        session = Mock(spec=requests.Session)

        with RequestsTransport(session):
            pass

        session.close.assert_called_once()
