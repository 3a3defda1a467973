"""In-memory order store for tests and embedding."""

from framedeck.core.presentation.models import FrameSequence


class InMemoryOrderStore:
    """
    Dict-backed order store.

    Keeps saves in process memory only; `saves` counts writes so callers can
    assert on persistence behavior.
    """

    def __init__(self, initial: dict[str, FrameSequence] | None = None) -> None:
        self._orders: dict[str, FrameSequence] = dict(initial or {})
        self.saves = 0

    def load(self, document_id: str) -> FrameSequence:
        """Return the saved order, or an empty tuple."""
        return self._orders.get(document_id, ())

    def save(self, document_id: str, sequence: FrameSequence) -> None:
        """Replace the saved order."""
        self._orders[document_id] = tuple(sequence)
        self.saves += 1
