"""Single-element move within a slide sequence."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def shift_active_index(from_index: int, to_index: int, active_index: int) -> int:
    """Follow the highlighted slide across a move.

    Args:
        from_index: Position the moved slide left
        to_index: Position the moved slide landed on
        active_index: Highlighted position before the move

    Returns:
        Highlighted position after the move (same logical slide)
    """
    if active_index == from_index:
        return to_index
    if from_index < active_index <= to_index:
        return active_index - 1
    if to_index <= active_index < from_index:
        return active_index + 1
    return active_index


def reorder(
    sequence: tuple[T, ...],
    from_index: int,
    to_index: int,
    active_index: int,
) -> tuple[tuple[T, ...], int]:
    """Move the element at `from_index` to `to_index`.

    Out-of-range indices and `from_index == to_index` are no-ops that return
    the inputs unchanged; stale drag gestures must not break a session.

    Args:
        sequence: Current order
        from_index: Index of the element to move
        to_index: Destination index in the resulting sequence
        active_index: Highlighted index before the move

    Returns:
        Tuple of (new sequence, new active index)

    Example:
        >>> reorder(("A", "B", "C", "D"), 1, 3, 2)
        (('A', 'C', 'D', 'B'), 1)
    """
    size = len(sequence)
    if not (0 <= from_index < size and 0 <= to_index < size) or from_index == to_index:
        return sequence, active_index

    items = list(sequence)
    moved = items.pop(from_index)
    items.insert(to_index, moved)

    return tuple(items), shift_active_index(from_index, to_index, active_index)


__all__ = ["reorder", "shift_active_index"]
