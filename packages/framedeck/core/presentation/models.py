"""Value types for the presentation engine.

All models are immutable. New sessions are only produced by the transition
functions in `framedeck.core.presentation.session`; the host owns the
mutable reference to the current one.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FrameRef(BaseModel):
    """A presentable canvas region.

    Attributes:
        id: Stable frame identifier.
        x: Horizontal origin.
        y: Vertical origin.
        width: Region width.
        height: Region height.
        name: Optional display title.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    id: str = Field(min_length=1, description="Frame identifier")
    x: float = Field(default=0.0, description="Horizontal origin")
    y: float = Field(default=0.0, description="Vertical origin")
    width: float = Field(default=0.0, ge=0.0, description="Region width")
    height: float = Field(default=0.0, ge=0.0, description="Region height")
    name: str | None = Field(default=None, description="Display title")


FrameSequence = tuple[FrameRef, ...]
"""Ordered frames; position in the tuple is presentation order."""


def sequence_ids(sequence: FrameSequence) -> tuple[str, ...]:
    """Return the frame ids of a sequence, in order."""
    return tuple(frame.id for frame in sequence)


def frame_title(frame: FrameRef) -> str:
    """Display title for a frame (its name, or a generic label)."""
    if frame.name and frame.name.strip():
        return frame.name
    return "Frame"


class Session(BaseModel):
    """Presentation session state.

    Invariants:
        - 0 <= active_index < len(sequence) while active
        - an active session always has at least one frame
        - frame ids in the sequence are unique
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    active: bool = False
    sequence: FrameSequence = ()
    active_index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        ids = sequence_ids(self.sequence)
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate frame ids in sequence: {ids}")
        if self.active:
            if not self.sequence:
                raise ValueError("An active session requires at least one frame")
            if self.active_index >= len(self.sequence):
                raise ValueError(
                    f"active_index {self.active_index} out of range for "
                    f"{len(self.sequence)} frames"
                )
        return self

    @classmethod
    def idle(cls) -> Session:
        """The initial (and terminal) session."""
        return cls()

    @property
    def current_frame(self) -> FrameRef | None:
        """Frame the session is showing, or None when idle."""
        if not self.active:
            return None
        return self.sequence[self.active_index]


class NavigationOptions(BaseModel):
    """Viewport options attached to every navigation request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fit_to_viewport: bool = True
    zoom_factor: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Fraction of the viewport the frame occupies",
    )
    animate: bool = True


class NavigationRequest(BaseModel):
    """Viewport side effect: bring a frame into view."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    frame: FrameRef
    options: NavigationOptions = Field(default_factory=NavigationOptions)


class Transition(BaseModel):
    """Result of a session operation.

    The effect must be dispatched before the session is committed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    effect: NavigationRequest | None = None
    session: Session
    persist_order: FrameSequence | None = Field(
        default=None,
        description="Custom order to write to the order store, if it changed",
    )

    @property
    def highlight(self) -> FrameRef | None:
        return self.session.current_frame


__all__ = [
    "FrameRef",
    "FrameSequence",
    "NavigationOptions",
    "NavigationRequest",
    "Session",
    "Transition",
    "frame_title",
    "sequence_ids",
]
