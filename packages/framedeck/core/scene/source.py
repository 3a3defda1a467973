"""In-memory frame source."""

from __future__ import annotations

from collections.abc import Iterable

from framedeck.core.presentation.models import FrameRef
from framedeck.core.utils.logging import get_logger

logger = get_logger(__name__)


class StaticFrameSource:
    """Mutable in-memory scene; satisfies the FrameSource protocol.

    Mutations do not notify anyone: the host calls
    `PresentationController.refresh()` after changing frames.
    """

    def __init__(self, frames: Iterable[FrameRef] = ()) -> None:
        self._frames: dict[str, FrameRef] = {}
        self.set_frames(frames)

    def get_frames(self) -> tuple[FrameRef, ...]:
        return tuple(self._frames.values())

    def set_frames(self, frames: Iterable[FrameRef]) -> None:
        """Replace every frame."""
        self._frames = {}
        for frame in frames:
            self._frames[frame.id] = frame

    def add_frame(self, frame: FrameRef) -> None:
        """Add a frame, replacing any frame with the same id."""
        self._frames[frame.id] = frame

    def remove_frame(self, frame_id: str) -> bool:
        """Remove a frame; returns False if it did not exist."""
        removed = self._frames.pop(frame_id, None)
        if removed is None:
            logger.debug(f"remove_frame: unknown frame {frame_id!r}")
        return removed is not None

    def __len__(self) -> int:
        return len(self._frames)
