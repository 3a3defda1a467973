"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from framedeck.core.config.models import AppConfig
from framedeck.core.utils.json import read_json
from framedeck.core.utils.logging import configure_logging as _configure_logging, get_logger

logger = get_logger(__name__)

STORAGE_ROOT_ENV = "FRAMEDECK_STORAGE_ROOT"

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = Path("framedeck.json")
_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("framedeck.json")
        'json'
        >>> detect_format("framedeck.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Supports both JSON and YAML formats, auto-detected from the extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            data = read_json(path)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if data is None:
            data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(data).__name__}")
    return data


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file falls back to defaults. The storage root can be
    overridden with the FRAMEDECK_STORAGE_ROOT environment variable.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)
              Defaults to framedeck.json

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH

    if _app_config_cache is not None and path == _DEFAULT_APP_CONFIG_PATH:
        return _app_config_cache

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug(f"No config file at {path}, using defaults")
        config = AppConfig()

    config = _apply_env_overrides(config)

    if path == _DEFAULT_APP_CONFIG_PATH:
        _app_config_cache = config

    return config


def clear_app_config_cache() -> None:
    """Forget the cached default config (tests, config reloads)."""
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    storage_root = os.getenv(STORAGE_ROOT_ENV)
    if not storage_root:
        return config

    logger.debug(f"Loaded {STORAGE_ROOT_ENV} from environment")
    storage = config.storage.model_copy(update={"root": storage_root})
    return config.model_copy(update={"storage": storage})
