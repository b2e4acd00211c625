"""Shared fixtures for monitoring client tests."""

import json
from typing import Any, List, Optional, Union

import pytest
import requests

from solaredge_monitoring.credentials import Credentials


def make_response(status_code: int, body: Union[str, bytes, dict, list] = b"", reason: Optional[str] = None) -> requests.Response:
    """Build an in-memory requests Response."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    response._content = body  # pylint: disable=protected-access
    response._content_consumed = True  # pylint: disable=protected-access
    return response


class FakeTransport:
    """Transport returning canned responses and recording requested URLs."""

    def __init__(self, responses: Optional[List[Any]] = None) -> None:
        self.responses = list(responses or [])
        self.urls: List[str] = []
        self.timeouts: List[Optional[float]] = []
        self.closed: List[requests.Response] = []

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        self.urls.append(url)
        self.timeouts.append(timeout)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result

        original_close = result.close

        def close() -> None:
            self.closed.append(result)
            original_close()

        result.close = close
        return result


@pytest.fixture(name="credentials")
def fixture_credentials() -> Credentials:
    """Credentials for a test site."""
    return Credentials(site_id="12345", api_key="SECRETKEY")
