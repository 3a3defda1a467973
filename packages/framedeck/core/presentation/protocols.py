"""Collaborator protocols consumed by the presentation engine.

The engine never renders or stores anything itself; the host application
supplies these narrow interfaces.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from framedeck.core.presentation.models import FrameRef, NavigationOptions


@runtime_checkable
class FrameSource(Protocol):
    """Provides the frames currently present in the scene."""

    def get_frames(self) -> Iterable[FrameRef]:
        """Return current, non-deleted frames.

        Must be callable synchronously and reflect the latest committed
        scene state.
        """
        ...


@runtime_checkable
class Viewport(Protocol):
    """Moves the canvas view onto a frame."""

    def navigate_to(self, frame: FrameRef, options: NavigationOptions) -> None:
        """Start bringing `frame` into view.

        Fire-and-forget: implementations may animate, but must return
        without waiting for the animation to finish.
        """
        ...


@runtime_checkable
class HighlightSink(Protocol):
    """Receives the currently presented frame for rendering emphasis."""

    def set_highlight(self, frame: FrameRef | None) -> None:
        """Highlight `frame`, or clear the highlight when None."""
        ...


__all__ = ["FrameSource", "HighlightSink", "Viewport"]
