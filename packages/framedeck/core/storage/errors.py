from __future__ import annotations


class OrderStoreError(Exception):
    """Durable order store could not be read or written.

    Attributes:
        message: Human-readable error description
        document_id: Document whose order was being accessed
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        *,
        document_id: str,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.document_id = document_id
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message, f"document={self.document_id}"]
        if self.cause is not None:
            parts.append(f"cause={type(self.cause).__name__}: {self.cause}")
        return " | ".join(parts)
