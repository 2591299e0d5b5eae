"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServerConfig(BaseSettings):
    """Immutable startup snapshot of listener and identity values.

    Environment variable names map directly to field names in uppercase.
    Example: `pod_name` reads from `POD_NAME`. Variables set to an empty
    string fall back to the field default.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port.
        pod_name: Name of the pod serving the request.
        node_name: Name of the node the pod is scheduled on.
        app_version: Deployed application version label.
        app_env: Deployment environment label.
        log_level: Threshold for the stdout application logger.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=0, le=65535)
    pod_name: str = Field(default="unknown")
    node_name: str = Field(default="unknown")
    app_version: str = Field(default="1.0.0")
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper() or "INFO"
        if normalized_value not in LOG_LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}")
        return normalized_value


def config_load_settings() -> ServerConfig:
    """Load runtime settings from environment and dotenv.

    Returns:
        ServerConfig: Frozen runtime settings object.

    Raises:
        SettingsLoadError: Raised when a value cannot be coerced, e.g. a non-numeric `PORT`.
    """

    try:
        return ServerConfig()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
