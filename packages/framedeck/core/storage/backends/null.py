"""No-op order store for development/testing.

Never has a saved order, discards all saves.
"""

from framedeck.core.presentation.models import FrameSequence


class NullOrderStore:
    """
    No-op order store.

    Always reports no custom order, discards all saves.
    """

    def load(self, document_id: str) -> FrameSequence:
        """Always returns an empty order."""
        return ()

    def save(self, document_id: str, sequence: FrameSequence) -> None:
        """Discard."""
        pass
