"""Models for the durable order store."""

from pydantic import BaseModel, ConfigDict, Field

from framedeck.core.presentation.models import FrameSequence


class StoredOrder(BaseModel):
    """
    Persisted custom slide order for one document.

    The stored frames are a snapshot; reconciliation against the live scene
    decides which of them still exist.
    """

    model_config = ConfigDict(extra="ignore")

    document_id: str = Field(min_length=1, description="Document the order belongs to")
    frames: FrameSequence = Field(default=(), description="Frames in presentation order")
    saved_at: float = Field(description="Unix timestamp (seconds)")
    schema_version: int = Field(default=1, description="Stored document schema version")
