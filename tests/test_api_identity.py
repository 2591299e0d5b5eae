"""Tests for identity HTTP endpoint behavior.

These tests validate the always-200 routing policy and response payloads
through the FastAPI application.
"""

from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pod_identity.api.application import create_api_application
from pod_identity.bootstrap import bootstrap_create_application, bootstrap_create_dispatcher
from pod_identity.config import ServerConfig
from pod_identity.domain import RequestLogEntry


class _CapturingRequestLogger:
    """Request logger double that keeps entries in memory."""

    def __init__(self) -> None:
        self.entries: list[RequestLogEntry] = []

    def log_request(self, entry: RequestLogEntry) -> None:
        """Record one entry.

        Args:
            entry: Request log entry.

        Returns:
            None: Entries are appended to the in-memory list.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.entries.append(entry)


def _build_config(**overrides: str) -> ServerConfig:
    """Create test configuration object.

    Returns:
        ServerConfig: Deterministic configuration for API creation.

    Raises:
        ValueError: Raised by ServerConfig when values are invalid.
    """

    values = {"pod_name": "pod-7", "node_name": "node-2", "app_version": "2.3.4", "app_env": "staging"}
    values.update(overrides)
    return ServerConfig(_env_file=None, **values)


def _build_client(config: ServerConfig | None = None) -> tuple[TestClient, _CapturingRequestLogger]:
    request_logger = _CapturingRequestLogger()
    dispatcher = bootstrap_create_dispatcher(config=config or _build_config(), request_logger=request_logger)
    return TestClient(create_api_application(dispatcher)), request_logger


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_api_health_returns_healthy_json() -> None:
    """Return HTTP 200 and the exact health body.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client, _ = _build_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.text == '{"status":"healthy"}'


def test_api_version_reports_configured_identity() -> None:
    """Return configured version, environment and pod name with a timestamp.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match configured values.
    """

    client, _ = _build_client()

    response = client.get("/version")
    payload = response.json()

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert payload["version"] == "2.3.4"
    assert payload["environment"] == "staging"
    assert payload["podName"] == "pod-7"
    assert _parse_timestamp(payload["timestamp"]).tzinfo is not None


def test_api_version_reports_defaults_without_environment(monkeypatch) -> None:
    """Report default version and environment when nothing is configured."""

    for variable_name in ("APP_VERSION", "APP_ENV", "POD_NAME", "NODE_NAME"):
        monkeypatch.delenv(variable_name, raising=False)
    client, _ = _build_client(config=ServerConfig(_env_file=None))

    payload = client.get("/version").json()

    assert payload["version"] == "1.0.0"
    assert payload["environment"] == "development"
    assert payload["podName"] == "unknown"


def test_api_info_reports_pod_and_node() -> None:
    """Return pod and node names plus version, environment and timestamp."""

    client, _ = _build_client()

    response = client.get("/info")
    payload = response.json()

    assert response.status_code == 200
    assert payload["podName"] == "pod-7"
    assert payload["nodeName"] == "node-2"
    assert payload["version"] == "2.3.4"
    assert payload["environment"] == "staging"
    _parse_timestamp(payload["timestamp"])


@pytest.mark.parametrize(
    "request_target",
    ["/", "/unknown", "/health/", "/health?probe=1", "/docs", "/redoc", "/openapi.json", "/a/b/c"],
)
def test_api_unmatched_targets_return_greeting(request_target: str) -> None:
    """Return HTTP 200 plain-text greeting for every non-route target.

    Returns:
        None: Assertions validate fallback response.

    Raises:
        AssertionError: Raised when a non-route target is not answered with the greeting.
    """

    client, _ = _build_client()

    response = client.get(request_target, follow_redirects=False)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == (
        "Hello from ArgoCD GitOps!\nVersion: 2.3.4\nEnvironment: staging\nPod: pod-7\nNode: node-2\n"
    )


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "PURGE", "PROPFIND"])
def test_api_any_method_returns_success(method: str) -> None:
    """Answer every method with HTTP 200, including extension methods.

    Returns:
        None: Assertions validate response status and body.

    Raises:
        AssertionError: Raised when a method is rejected.
    """

    client, request_logger = _build_client()

    response = client.request(method, "/health")

    assert response.status_code == 200
    assert response.text == '{"status":"healthy"}'
    assert [(entry.method, entry.request_target) for entry in request_logger.entries] == [(method, "/health")]


def test_api_head_request_returns_success() -> None:
    """Answer HEAD requests with HTTP 200.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when behavior differs from expectation.
    """

    client, _ = _build_client()

    response = client.head("/info")

    assert response.status_code == 200


def test_api_request_body_is_ignored() -> None:
    """Answer with HTTP 200 without parsing the request body.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when behavior differs from expectation.
    """

    client, _ = _build_client()

    response = client.post("/version", content=b"{not json")

    assert response.status_code == 200
    assert response.json()["version"] == "2.3.4"


def test_api_logs_raw_target_once_per_request() -> None:
    """Log one entry per request carrying method, path and query string.

    Returns:
        None: Assertions validate logger interaction.

    Raises:
        AssertionError: Raised when log entries do not match requests.
    """

    client, request_logger = _build_client()

    client.get("/health")
    client.get("/info?verbose=1")
    client.delete("/missing")

    assert [(entry.method, entry.request_target) for entry in request_logger.entries] == [
        ("GET", "/health"),
        ("GET", "/info?verbose=1"),
        ("DELETE", "/missing"),
    ]


def test_bootstrap_create_application_uses_supplied_config() -> None:
    """Build the application from an explicitly supplied configuration.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when behavior differs from expectation.
    """

    application = bootstrap_create_application(config=_build_config(app_version="9.9.9"))

    assert isinstance(application, FastAPI)
    assert application.version == "9.9.9"
    assert TestClient(application).get("/version").json()["version"] == "9.9.9"


def test_api_factory_requires_dispatcher() -> None:
    """Reject application creation without a dispatcher.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when behavior differs from expectation.
    """

    with pytest.raises(ValueError, match="dispatcher must not be None"):
        create_api_application(dispatcher=None)


@pytest.mark.parametrize("request_target", ["/", "/deeply/nested/path", "/info/extra"])
def test_api_catch_all_route_forwards_root_and_nested_paths(request_target: str) -> None:
    """Forward root and multi-segment paths to the dispatcher unchanged.

    Returns:
        None: Assertions validate forwarded targets.

    Raises:
        AssertionError: Raised when a path is rejected or rewritten.
    """

    client, request_logger = _build_client()

    response = client.put(request_target)

    assert response.status_code == 200
    assert response.text.startswith("Hello from ArgoCD GitOps!\n")
    assert [(entry.method, entry.request_target) for entry in request_logger.entries] == [("PUT", request_target)]
