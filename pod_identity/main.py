"""Main module entrypoint for local runtime execution.

This module loads startup configuration and launches the FastAPI service. All
behavior is driven by environment variables; no command-line arguments are
accepted.
"""

import logging

import uvicorn

from pod_identity.bootstrap import bootstrap_create_application
from pod_identity.config import ServerConfig, config_load_settings
from pod_identity.logging_setup import logging_configure

SERVER_LOGGER_NAME = "pod_identity.server"


def main_startup_lines(config: ServerConfig) -> list[str]:
    """Return the banner lines reported once the listener is bound.

    Args:
        config: Active startup configuration.

    Returns:
        list[str]: Port and identity lines in display order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return [
        f"Server running on port {config.port}",
        f"Version: {config.app_version}",
        f"Environment: {config.app_env}",
        f"Pod Name: {config.pod_name}",
        f"Node Name: {config.node_name}",
    ]


class IdentityServer(uvicorn.Server):
    """Uvicorn server that logs the identity banner after a successful bind."""

    def __init__(self, config: uvicorn.Config, server_config: ServerConfig):
        super().__init__(config)
        self._server_config = server_config
        self._logger = logging.getLogger(SERVER_LOGGER_NAME)

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        for line in main_startup_lines(self._server_config):
            self._logger.info(line)


def main() -> None:
    """Run the identity service with configuration from the environment.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    logging_configure(log_level=settings.log_level)
    application = bootstrap_create_application(config=settings)
    server = IdentityServer(
        uvicorn.Config(
            application,
            host=settings.host,
            port=settings.port,
            access_log=False,
        ),
        server_config=settings,
    )
    server.run()


if __name__ == "__main__":
    main()
