"""Slide ordering: default order from positions and custom-order reconciliation."""

from __future__ import annotations

from collections.abc import Iterable

from framedeck.core.presentation.models import FrameRef, FrameSequence


def _position_key(frame: FrameRef) -> tuple[float, float, str]:
    return (frame.y, frame.x, frame.id)


def _unique_by_id(frames: Iterable[FrameRef]) -> dict[str, FrameRef]:
    by_id: dict[str, FrameRef] = {}
    for frame in frames:
        by_id.setdefault(frame.id, frame)
    return by_id


def compute_default_order(frames: Iterable[FrameRef]) -> FrameSequence:
    """Order frames top-to-bottom, then left-to-right.

    Ties on both coordinates fall back to the frame id so the result is a
    total, reproducible order. Frames sharing an id are collapsed to the
    first one seen.

    Args:
        frames: Current frames (any iteration order)

    Returns:
        Frames sorted by (y, x, id)
    """
    return tuple(sorted(_unique_by_id(frames).values(), key=_position_key))


def reconcile(persisted: Iterable[FrameRef], current_frames: Iterable[FrameRef]) -> FrameSequence:
    """Merge a persisted custom order with the live frame set.

    Surviving frames keep their persisted relative order (carrying their
    current geometry), frames missing from the persisted order are appended
    in default order, deleted frames are dropped. An empty persisted order,
    or one with no surviving members while new frames exist, falls back to
    the default order.

    Args:
        persisted: Previously saved custom order (may be empty)
        current_frames: Frames currently present in the scene

    Returns:
        Reconciled sequence whose ids are exactly the current ids

    Example:
        >>> reconcile([f3, f1, f2], [f1, f3])
        (f3, f1)
    """
    current = _unique_by_id(current_frames)
    persisted_ids = list(_unique_by_id(persisted))

    if not persisted_ids:
        return compute_default_order(current.values())

    kept = [current[frame_id] for frame_id in persisted_ids if frame_id in current]
    known = set(persisted_ids)
    added = compute_default_order(f for f in current.values() if f.id not in known)

    if not kept and added:
        return compute_default_order(current.values())

    return tuple(kept) + added


__all__ = ["compute_default_order", "reconcile"]
