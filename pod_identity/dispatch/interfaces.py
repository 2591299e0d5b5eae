"""Typed interfaces for dispatch-layer collaborators."""

from typing import Protocol

from pod_identity.domain import RequestLogEntry


class RequestLogPort(Protocol):
    """Port definition for recording one line per dispatched request."""

    def log_request(self, entry: RequestLogEntry) -> None:
        """Record one dispatched request.

        Args:
            entry: Timestamp, method and raw target of the request.

        Returns:
            None: Recording is a side effect.

        Raises:
            RuntimeError: Raised when the underlying sink cannot be written.
        """
