"""Protocol for durable order store backends."""

from typing import Protocol, runtime_checkable

from framedeck.core.presentation.models import FrameSequence


@runtime_checkable
class OrderStore(Protocol):
    """
    Protocol for per-document custom order persistence.

    All implementations must support:
    - Last-write-wins saves keyed by document id
    - Empty result for documents with no saved order
    - OrderStoreError on read/write failure (never a partial result)
    """

    def load(self, document_id: str) -> FrameSequence:
        """
        Load the saved custom order for a document.

        Args:
            document_id: Document identifier

        Returns:
            Saved order, or an empty tuple if none exists

        Raises:
            OrderStoreError: If the stored order cannot be read or decoded
        """
        ...

    def save(self, document_id: str, sequence: FrameSequence) -> None:
        """
        Replace the saved custom order for a document.

        Args:
            document_id: Document identifier
            sequence: Order to persist

        Raises:
            OrderStoreError: On write failure
        """
        ...
