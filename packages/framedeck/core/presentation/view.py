"""Read-only view model for the presentation panel and overlay."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from framedeck.core.presentation.models import FrameSequence, Session, frame_title

EMPTY_INFO = "Create frames on your canvas to start a presentation"


class SlideItem(BaseModel):
    """One row of the reorderable slide list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(ge=0)
    frame_id: str
    title: str
    active: bool = False
    dimmed: bool = False


class PanelView(BaseModel):
    """Everything the panel/overlay needs to render one state.

    Attributes:
        can_start: A presentation can be started.
        can_navigate: Next/previous are meaningful.
        counter: "Frame i of n" while presenting.
        overlay_counter: Compact "i / n" while presenting.
        info: Hint shown while idle.
        slides: Slides in presentation order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    active: bool
    can_start: bool
    can_navigate: bool
    counter: str | None = None
    overlay_counter: str | None = None
    info: str | None = None
    slides: tuple[SlideItem, ...] = ()


def _ready_info(count: int) -> str:
    return f"Ready to present {count} frame{'s' if count != 1 else ''}"


def build_panel_view(session: Session, slides: FrameSequence) -> PanelView:
    """Build the panel view for a session.

    Args:
        session: Current session
        slides: Slide order to list while idle (ignored while presenting,
            where the session sequence is shown)

    Returns:
        Immutable view model; while presenting every slide except the
        active one is dimmed
    """
    if session.active:
        total = len(session.sequence)
        position = session.active_index + 1
        items = tuple(
            SlideItem(
                index=i,
                frame_id=frame.id,
                title=frame_title(frame),
                active=i == session.active_index,
                dimmed=i != session.active_index,
            )
            for i, frame in enumerate(session.sequence)
        )
        return PanelView(
            active=True,
            can_start=False,
            can_navigate=total > 0,
            counter=f"Frame {position} of {total}",
            overlay_counter=f"{position} / {total}",
            slides=items,
        )

    items = tuple(
        SlideItem(index=i, frame_id=frame.id, title=frame_title(frame))
        for i, frame in enumerate(slides)
    )
    return PanelView(
        active=False,
        can_start=bool(items),
        can_navigate=False,
        info=_ready_info(len(items)) if items else EMPTY_INFO,
        slides=items,
    )


__all__ = ["EMPTY_INFO", "PanelView", "SlideItem", "build_panel_view"]
