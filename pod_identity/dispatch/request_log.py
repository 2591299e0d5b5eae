"""Stdout request logger backed by the standard logging module."""

import logging

from pod_identity.domain import RequestLogEntry, domain_format_utc_timestamp

from .interfaces import RequestLogPort

REQUEST_LOGGER_NAME = "pod_identity.requests"


def dispatch_format_request_line(entry: RequestLogEntry) -> str:
    """Render one request as `<timestamp> - <METHOD> <target>`.

    Args:
        entry: Request to render.

    Returns:
        str: Single log line without trailing newline.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return f"{domain_format_utc_timestamp(entry.timestamp)} - {entry.method} {entry.request_target}"


class LoggingRequestLogger(RequestLogPort):
    """Request logger that emits one INFO record per request."""

    def __init__(self, logger: logging.Logger | None = None):
        """Initialize request logger.

        Args:
            logger: Target logger; defaults to the `pod_identity.requests` logger.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._logger = logger if logger is not None else logging.getLogger(REQUEST_LOGGER_NAME)

    def log_request(self, entry: RequestLogEntry) -> None:
        """Emit one INFO record for the request.

        Args:
            entry: Timestamp, method and raw target of the request.

        Returns:
            None: The record is written as a side effect.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        self._logger.info(dispatch_format_request_line(entry))
