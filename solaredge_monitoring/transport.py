"""HTTP transport used to send monitoring API requests."""

import threading
from typing import Any, Optional, Protocol

import requests


class Transport(Protocol):
    """Anything that can perform a blocking GET and return a requests Response."""

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        ...


class RequestsTransport:
    """Transport backed by a requests Session for connection pooling.

    The session is created on first use and may be shared by threads that
    send independent requests.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session
        self._lock = threading.Lock()

    def _get_session(self) -> requests.Session:
        with self._lock:
            if self._session is None:
                self._session = requests.Session()
            return self._session

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        return self._get_session().get(url, timeout=timeout)

    def close(self) -> None:
        with self._lock:
            if self._session is not None:
                self._session.close()
                self._session = None

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
