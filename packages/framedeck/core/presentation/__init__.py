"""Presentation sequencing engine.

Turns the frames of a canvas into an ordered, navigable slide sequence:
- ordering: default position order and custom-order reconciliation
- navigation: cyclic next/previous and viewport requests
- reorder: drag-and-drop moves that keep the highlight on the same slide
- session: pure idle/active transitions returning (effect, session)
- controller: host-side runner that executes transitions
"""

from framedeck.core.presentation.keymap import (
    KeyEvent,
    PresentationCommand,
    resolve_command,
)
from framedeck.core.presentation.models import (
    FrameRef,
    FrameSequence,
    NavigationOptions,
    NavigationRequest,
    Session,
    Transition,
    frame_title,
    sequence_ids,
)
from framedeck.core.presentation.navigation import (
    navigation_request,
    next_index,
    previous_index,
)
from framedeck.core.presentation.ordering import compute_default_order, reconcile
from framedeck.core.presentation.protocols import FrameSource, HighlightSink, Viewport
from framedeck.core.presentation.reorder import reorder
from framedeck.core.presentation.view import PanelView, SlideItem, build_panel_view

# Controller last: it depends on config and storage, which import models above
from framedeck.core.presentation.controller import PresentationController  # noqa: E402

__all__ = [
    # Models
    "FrameRef",
    "FrameSequence",
    "NavigationOptions",
    "NavigationRequest",
    "Session",
    "Transition",
    "frame_title",
    "sequence_ids",
    # Engines
    "compute_default_order",
    "reconcile",
    "next_index",
    "previous_index",
    "navigation_request",
    "reorder",
    # Collaborators
    "FrameSource",
    "HighlightSink",
    "Viewport",
    # Keyboard
    "KeyEvent",
    "PresentationCommand",
    "resolve_command",
    # View
    "PanelView",
    "SlideItem",
    "build_panel_view",
    # Controller
    "PresentationController",
]
