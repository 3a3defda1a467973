"""Shared pytest fixtures for framedeck tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from framedeck.core.config.loader import clear_app_config_cache
from framedeck.core.presentation.models import FrameRef, NavigationOptions
from framedeck.core.scene import StaticFrameSource
from framedeck.core.storage import InMemoryOrderStore

# ============================================================================
# Frame Fixtures
# ============================================================================


def make_frame(frame_id: str, x: float = 0.0, y: float = 0.0, name: str | None = None) -> FrameRef:
    """Build a 100x80 frame at (x, y)."""
    return FrameRef(id=frame_id, x=x, y=y, width=100.0, height=80.0, name=name)


@pytest.fixture
def f1() -> FrameRef:
    """Top-left frame."""
    return make_frame("F1", x=0, y=0, name="Intro")


@pytest.fixture
def f2() -> FrameRef:
    """Top-right frame (same row as F1)."""
    return make_frame("F2", x=100, y=0)


@pytest.fixture
def f3() -> FrameRef:
    """Second-row frame."""
    return make_frame("F3", x=0, y=50, name="Summary")


@pytest.fixture
def frames(f1: FrameRef, f2: FrameRef, f3: FrameRef) -> tuple[FrameRef, ...]:
    """Three frames in scrambled insertion order; default order is F1, F2, F3."""
    return (f3, f1, f2)


# ============================================================================
# Collaborator Fixtures
# ============================================================================


class RecordingViewport:
    """Viewport that records every navigation request."""

    def __init__(self) -> None:
        self.calls: list[tuple[FrameRef, NavigationOptions]] = []

    def navigate_to(self, frame: FrameRef, options: NavigationOptions) -> None:
        self.calls.append((frame, options))

    @property
    def frame_ids(self) -> list[str]:
        return [frame.id for frame, _ in self.calls]


class RecordingHighlight:
    """Highlight sink that records every highlight update."""

    def __init__(self) -> None:
        self.updates: list[FrameRef | None] = []

    def set_highlight(self, frame: FrameRef | None) -> None:
        self.updates.append(frame)

    @property
    def current(self) -> FrameRef | None:
        return self.updates[-1] if self.updates else None


@pytest.fixture
def viewport() -> RecordingViewport:
    return RecordingViewport()


@pytest.fixture
def highlight() -> RecordingHighlight:
    return RecordingHighlight()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def frame_source(frames: tuple[FrameRef, ...]) -> StaticFrameSource:
    return StaticFrameSource(frames)


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_app_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from cached config and environment overrides."""
    monkeypatch.delenv("FRAMEDECK_STORAGE_ROOT", raising=False)
    clear_app_config_cache()
    yield
    clear_app_config_cache()


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging(force=True) after a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
