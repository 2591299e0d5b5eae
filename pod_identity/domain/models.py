"""Typed domain models shared across runtime layers.

This module provides simple data contracts passed between the dispatcher,
the request logger and the HTTP surface.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RequestLogEntry:
    """One observed request, as handed to request loggers.

    Attributes:
        timestamp: UTC time the request was dispatched.
        method: HTTP method as received.
        request_target: Raw request target including any query string.
    """

    timestamp: datetime
    method: str
    request_target: str


@dataclass(frozen=True)
class DispatchResult:
    """Response contract produced by the dispatcher for one request.

    Attributes:
        status_code: HTTP status code.
        media_type: Content-Type without parameters.
        body: Fully rendered response body.
    """

    status_code: int
    media_type: str
    body: str
