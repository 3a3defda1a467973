"""Filesystem-backed order store.

One JSON document per presentation, written with temp file + atomic replace
so a crash mid-write never leaves a truncated order behind.
"""

import hashlib
from pathlib import Path
import time

from pydantic import ValidationError

from framedeck.core.presentation.models import FrameSequence
from framedeck.core.storage.errors import OrderStoreError
from framedeck.core.storage.models import StoredOrder
from framedeck.core.utils.json import sanitize_path_component, write_text_atomic
from framedeck.core.utils.logging import get_logger

logger = get_logger(__name__)


class FSOrderStore:
    """
    Order store that keeps one `<document>-<digest>.json` file per document under a root.

    The root directory is created lazily on first save.
    """

    def __init__(self, root: Path | str) -> None:
        """
        Initialize filesystem order store.

        Args:
            root: Directory holding the order documents
        """
        self.root = Path(root)

    def path_for(self, document_id: str) -> Path:
        """Compute the order file path for a document (no I/O).

        The readable prefix is lossy, so a digest of the raw id keeps ids
        like "team/q1" and "team_q1" in separate files.
        """
        digest = hashlib.sha256(document_id.encode("utf-8")).hexdigest()[:12]
        return self.root / f"{sanitize_path_component(document_id)}-{digest}.json"

    def load(self, document_id: str) -> FrameSequence:
        """
        Load the saved order for a document.

        Args:
            document_id: Document identifier

        Returns:
            Saved order, or an empty tuple when no file exists or the file
            belongs to a different document

        Raises:
            OrderStoreError: If the file cannot be read or fails validation
        """
        path = self.path_for(document_id)
        if not path.exists():
            return ()

        try:
            stored = StoredOrder.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError, ValueError) as e:
            raise OrderStoreError(
                f"Could not read order file {path}", document_id=document_id, cause=e
            ) from e

        if stored.document_id != document_id:
            logger.debug(
                f"Order file {path} belongs to {stored.document_id!r}, not {document_id!r}"
            )
            return ()

        return stored.frames

    def save(self, document_id: str, sequence: FrameSequence) -> None:
        """
        Replace the saved order for a document (atomic write).

        Args:
            document_id: Document identifier
            sequence: Order to persist

        Raises:
            OrderStoreError: On write failure
        """
        path = self.path_for(document_id)
        stored = StoredOrder(document_id=document_id, frames=sequence, saved_at=time.time())
        try:
            write_text_atomic(path, stored.model_dump_json(indent=2))
        except OSError as e:
            raise OrderStoreError(
                f"Could not write order file {path}", document_id=document_id, cause=e
            ) from e
        logger.debug(f"Saved order for {document_id!r}: {len(sequence)} frames -> {path}")
