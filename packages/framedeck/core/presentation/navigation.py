"""Cyclic slide navigation and viewport requests."""

from __future__ import annotations

from framedeck.core.presentation.models import FrameRef, NavigationOptions, NavigationRequest


def next_index(current: int, total: int) -> int:
    """Index after `current`, wrapping to 0 past the last slide."""
    if total == 0:
        return 0
    return (current + 1) % total


def previous_index(current: int, total: int) -> int:
    """Index before `current`, wrapping to the last slide from 0."""
    if total == 0:
        return 0
    return total - 1 if current == 0 else current - 1


def navigation_request(
    frame: FrameRef, options: NavigationOptions | None = None
) -> NavigationRequest:
    """Build the viewport request that brings `frame` into view.

    Args:
        frame: Target frame
        options: Viewport options (fit, zoom factor, animation); defaults
            to fit-to-viewport at 0.9 zoom, animated

    Returns:
        Fire-and-forget navigation request
    """
    return NavigationRequest(frame=frame, options=options or NavigationOptions())


__all__ = ["navigation_request", "next_index", "previous_index"]
