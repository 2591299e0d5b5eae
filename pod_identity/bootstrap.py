"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from pod_identity.api import create_api_application
from pod_identity.config import ServerConfig, config_load_settings
from pod_identity.dispatch import IdentityRequestDispatcher, LoggingRequestLogger, RequestLogPort


def bootstrap_create_dispatcher(
    config: ServerConfig,
    request_logger: RequestLogPort | None = None,
) -> IdentityRequestDispatcher:
    """Build the identity dispatcher.

    Args:
        config: Frozen startup configuration.
        request_logger: Optional request logger override; defaults to stdout logging.

    Returns:
        IdentityRequestDispatcher: Dispatcher bound to the configuration.

    Raises:
        ValueError: Raised when config is None.
    """

    return IdentityRequestDispatcher(
        config=config,
        request_logger=request_logger if request_logger is not None else LoggingRequestLogger(),
    )


def bootstrap_create_application(config: ServerConfig | None = None) -> FastAPI:
    """Assemble the runtime application after loading startup configuration.

    Args:
        config: Optional pre-loaded configuration; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_config = config if config is not None else config_load_settings()
    return create_api_application(dispatcher=bootstrap_create_dispatcher(config=resolved_config))
