"""Identity request dispatcher.

Maps a raw request target onto one of four fixed responses. Routing is an
exact string comparison against the target as received: the query string is
part of the target and no trailing-slash or percent-decoding normalization is
applied. Every request is answered with HTTP 200, including unknown targets
and methods.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Callable

from pod_identity.config import ServerConfig
from pod_identity.domain import DispatchResult, RequestLogEntry, domain_format_utc_timestamp, domain_utc_now

from .interfaces import RequestLogPort

HEALTH_TARGET = "/health"
VERSION_TARGET = "/version"
INFO_TARGET = "/info"

GREETING_HEADLINE = "Hello from ArgoCD GitOps!"

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"


def _render_json(payload: dict[str, str]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class IdentityRequestDispatcher:
    """Dispatcher that answers identity routes from a frozen `ServerConfig`."""

    def __init__(
        self,
        config: ServerConfig,
        request_logger: RequestLogPort,
        clock: Callable[[], datetime] = domain_utc_now,
    ):
        """Initialize dispatcher.

        Args:
            config: Startup configuration holding the identity values.
            request_logger: Collaborator invoked once per dispatched request.
            clock: Source of the current UTC time.

        Raises:
            ValueError: Raised when config or request_logger is None.
        """

        if config is None:
            raise ValueError("config must not be None")
        if request_logger is None:
            raise ValueError("request_logger must not be None")
        self._config = config
        self._request_logger = request_logger
        self._clock = clock
        self._handlers: dict[str, Callable[[], DispatchResult]] = {
            HEALTH_TARGET: self._dispatch_health,
            VERSION_TARGET: self._dispatch_version,
            INFO_TARGET: self._dispatch_info,
        }

    @property
    def config(self) -> ServerConfig:
        """Return the configuration the dispatcher answers from.

        Returns:
            ServerConfig: Frozen startup configuration.

        Raises:
            RuntimeError: This accessor does not raise runtime errors.
        """

        return self._config

    def dispatch(self, method: str, request_target: str) -> DispatchResult:
        """Log the request and build the response for its target.

        Args:
            method: HTTP method; recorded but not used for routing.
            request_target: Raw request target including any query string.

        Returns:
            DispatchResult: Status 200 result with media type and rendered body.

        Raises:
            RuntimeError: Raised only when the request logger fails.
        """

        received_at = self._clock()
        self._request_logger.log_request(
            RequestLogEntry(timestamp=received_at, method=method, request_target=request_target)
        )
        handler = self._handlers.get(request_target, self._dispatch_greeting)
        return handler()

    def _dispatch_health(self) -> DispatchResult:
        return DispatchResult(status_code=200, media_type=JSON_MEDIA_TYPE, body=_render_json({"status": "healthy"}))

    def _dispatch_version(self) -> DispatchResult:
        payload = {
            "version": self._config.app_version,
            "environment": self._config.app_env,
            "podName": self._config.pod_name,
            "timestamp": domain_format_utc_timestamp(self._clock()),
        }
        return DispatchResult(status_code=200, media_type=JSON_MEDIA_TYPE, body=_render_json(payload))

    def _dispatch_info(self) -> DispatchResult:
        payload = {
            "podName": self._config.pod_name,
            "nodeName": self._config.node_name,
            "version": self._config.app_version,
            "environment": self._config.app_env,
            "timestamp": domain_format_utc_timestamp(self._clock()),
        }
        return DispatchResult(status_code=200, media_type=JSON_MEDIA_TYPE, body=_render_json(payload))

    def _dispatch_greeting(self) -> DispatchResult:
        body = (
            f"{GREETING_HEADLINE}\n"
            f"Version: {self._config.app_version}\n"
            f"Environment: {self._config.app_env}\n"
            f"Pod: {self._config.pod_name}\n"
            f"Node: {self._config.node_name}\n"
        )
        return DispatchResult(status_code=200, media_type=TEXT_MEDIA_TYPE, body=body)
