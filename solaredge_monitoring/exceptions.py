"""Exception classes for the SolarEdge monitoring client.

Every error raised by the client derives from MonitoringError. Two kinds
reach callers after a request has been sent: TransportError when the HTTP
exchange could not be completed (or its body could not be parsed), and
HttpStatusError when the server answered with a non-success status.
"""

from typing import Optional


class MonitoringError(Exception):
    """Base exception for all monitoring client errors."""


class TransportError(MonitoringError):
    """Raised when the HTTP exchange with the monitoring server fails.

    Attributes:
        cause: The underlying exception from the HTTP stack, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ResponseParseError(TransportError):
    """Raised when a successful response body does not match the expected schema."""


class HttpStatusError(MonitoringError):
    """Raised when the server answers with a non-2xx status.

    Attributes:
        reason: Canonical reason phrase for the status, or the numeric
            status if it has none.
        body: Raw diagnostic text sent by the server, possibly empty.
    """

    def __init__(self, reason: str, body: str = ""):
        super().__init__(f"HTTP error status: {reason}: {body}" if body else f"HTTP error status: {reason}")
        self.reason = reason
        self.body = body


class BulkSiteListError(MonitoringError, ValueError):
    """Raised when a bulk site list is missing or has the wrong size."""
