"""Configuration package for runtime identity settings and startup validation."""

from .settings import ServerConfig, SettingsLoadError, config_load_settings

__all__ = ["ServerConfig", "SettingsLoadError", "config_load_settings"]
