"""Presentation session state machine.

Every operation is a pure function from the current `Session` (plus the
inputs it needs) to a `Transition`: an optional viewport effect, the next
session, and the custom order to persist when it changed. Callers must
dispatch the effect before committing the session; see
`PresentationController.apply`.

States:
    Idle   -- initial and terminal; empty sequence, index 0
    Active -- non-empty sequence, valid index, one frame highlighted
"""

from __future__ import annotations

from collections.abc import Iterable

from framedeck.core.presentation.models import (
    FrameRef,
    FrameSequence,
    NavigationOptions,
    Session,
    Transition,
    sequence_ids,
)
from framedeck.core.presentation.navigation import (
    navigation_request,
    next_index,
    previous_index,
)
from framedeck.core.presentation.ordering import reconcile
from framedeck.core.presentation.reorder import reorder


def _unchanged(session: Session) -> Transition:
    return Transition(session=session)


def _show(
    sequence: FrameSequence, index: int, options: NavigationOptions | None
) -> Transition:
    return Transition(
        effect=navigation_request(sequence[index], options),
        session=Session(active=True, sequence=sequence, active_index=index),
    )


def start(
    session: Session,
    frames: Iterable[FrameRef],
    persisted: FrameSequence = (),
    options: NavigationOptions | None = None,
) -> Transition:
    """Idle -> Active on the first slide.

    The slide order is the persisted custom order reconciled against the
    current frames. With no frames the session stays idle. Starting an
    already active session changes nothing.
    """
    if session.active:
        return _unchanged(session)

    sequence = reconcile(persisted, frames)
    if not sequence:
        return _unchanged(session)

    return _show(sequence, 0, options)


def stop(session: Session) -> Transition:
    """Any state -> Idle, clearing sequence, index and highlight."""
    return Transition(session=Session.idle())


def next_slide(session: Session, options: NavigationOptions | None = None) -> Transition:
    """Active -> Active on the next slide (wraps to the first)."""
    if not session.active or not session.sequence:
        return _unchanged(session)
    index = next_index(session.active_index, len(session.sequence))
    return _show(session.sequence, index, options)


def previous_slide(session: Session, options: NavigationOptions | None = None) -> Transition:
    """Active -> Active on the previous slide (wraps to the last)."""
    if not session.active or not session.sequence:
        return _unchanged(session)
    index = previous_index(session.active_index, len(session.sequence))
    return _show(session.sequence, index, options)


def apply_reorder(
    session: Session,
    base_sequence: FrameSequence,
    from_index: int,
    to_index: int,
) -> Transition:
    """Move one slide, in either state.

    While active the session's own sequence is reordered and the highlight
    stays on the same frame, so no viewport effect is needed. While idle
    `base_sequence` (the order the slide list shows) is reordered. Any real
    move is returned as the new custom order to persist.

    Args:
        session: Current session
        base_sequence: Slide order shown while idle
        from_index: Index of the dragged slide
        to_index: Drop index

    Returns:
        Transition; unchanged when the move is invalid
    """
    if session.active:
        sequence, index = reorder(session.sequence, from_index, to_index, session.active_index)
        if sequence == session.sequence:
            return _unchanged(session)
        return Transition(
            session=Session(active=True, sequence=sequence, active_index=index),
            persist_order=sequence,
        )

    sequence, _ = reorder(base_sequence, from_index, to_index, 0)
    if sequence == base_sequence:
        return _unchanged(session)
    return Transition(session=session, persist_order=sequence)


def clear_order(session: Session) -> Transition:
    """Forget the custom order so the next start uses position order.

    A running presentation keeps its current sequence.
    """
    return Transition(session=session, persist_order=())


def frames_changed(
    session: Session,
    frames: Iterable[FrameRef],
    persisted: FrameSequence = (),
    options: NavigationOptions | None = None,
) -> Transition:
    """React to frames being added to or removed from the scene.

    Idle: the persisted custom order is reconciled against the new frames
    and returned for persistence when reconciliation changed it.

    Active: the session sequence is reconciled. If the highlighted frame
    survived the index follows it; if it was removed the index is clamped
    into range and the viewport moves to the new current frame. A session
    left with no frames stops.
    """
    frames = tuple(frames)

    if not session.active:
        if not persisted:
            return _unchanged(session)
        reconciled = reconcile(persisted, frames)
        if sequence_ids(reconciled) == sequence_ids(persisted):
            return _unchanged(session)
        return Transition(session=session, persist_order=reconciled)

    reconciled = reconcile(session.sequence, frames)
    persist_order = None
    if persisted and sequence_ids(reconciled) != sequence_ids(persisted):
        persist_order = reconciled

    if not reconciled:
        return Transition(session=Session.idle(), persist_order=persist_order)

    current = session.sequence[session.active_index]
    ids = sequence_ids(reconciled)
    if current.id in ids:
        index = ids.index(current.id)
        return Transition(
            session=Session(active=True, sequence=reconciled, active_index=index),
            persist_order=persist_order,
        )

    index = min(session.active_index, len(reconciled) - 1)
    shown = _show(reconciled, index, options)
    return Transition(effect=shown.effect, session=shown.session, persist_order=persist_order)


__all__ = [
    "apply_reorder",
    "clear_order",
    "frames_changed",
    "next_slide",
    "previous_slide",
    "start",
    "stop",
]
