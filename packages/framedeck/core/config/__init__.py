"""Configuration management for framedeck."""

from framedeck.core.config.loader import (
    clear_app_config_cache,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from framedeck.core.config.models import (
    AppConfig,
    ConfigBase,
    LoggingConfig,
    PresentationConfig,
    StorageConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "clear_app_config_cache",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "ConfigBase",
    "LoggingConfig",
    "PresentationConfig",
    "StorageConfig",
]
