"""Configuration models for framedeck."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal, Self

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from framedeck.core.presentation.models import NavigationOptions


class ConfigBase(BaseModel):
    """Base class for all framedeck configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Subclasses must override this to provide their default location.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        # AppConfig tolerates a missing default file and reads env overrides
        if cls.__name__ == "AppConfig":
            from framedeck.core.config.loader import load_app_config

            return load_app_config(path)  # type: ignore[return-value]

        from framedeck.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path; stdout when unset")


class PresentationConfig(BaseModel):
    """Presentation behavior configuration.

    Attributes:
        zoom_factor: Fraction of the viewport a presented frame occupies.
        fit_to_viewport: Scale frames to fit the viewport.
        animate: Animate viewport transitions.
        autostart: Start presenting as soon as the scene has frames.
        autostart_attempts: How many times autostart polls the frame source.
    """

    model_config = ConfigDict(extra="forbid")

    zoom_factor: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Viewport fill factor; below 1.0 leaves a margin around the frame",
    )
    fit_to_viewport: bool = Field(default=True, description="Fit frames to the viewport")
    animate: bool = Field(default=True, description="Animate viewport transitions")
    autostart: bool = Field(default=False, description="Start presenting on open")
    autostart_attempts: int = Field(
        default=10, ge=1, description="Frame source polls before autostart gives up"
    )

    def navigation_options(self) -> NavigationOptions:
        """Viewport options for every navigation request."""
        from framedeck.core.presentation.models import NavigationOptions

        return NavigationOptions(
            fit_to_viewport=self.fit_to_viewport,
            zoom_factor=self.zoom_factor,
            animate=self.animate,
        )


class StorageConfig(BaseModel):
    """Custom order persistence configuration."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["fs", "memory", "null"] = Field(
        default="fs", description="Order store backend"
    )
    root: str = Field(
        default="data/presentation_orders",
        description="Directory for the fs backend",
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")
    presentation: PresentationConfig = PresentationConfig()
    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("framedeck.json")
