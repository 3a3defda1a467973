"""Scene documents: a document id plus the frames on its canvas."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from framedeck.core.config.loader import load_config
from framedeck.core.presentation.models import FrameRef


class SceneDocument(BaseModel):
    """Frames of one canvas document.

    Example (YAML):
        document_id: quarterly-review
        frames:
          - {id: intro, x: 0, y: 0, width: 800, height: 600, name: Intro}
          - {id: numbers, x: 900, y: 0, width: 800, height: 600}
    """

    model_config = ConfigDict(extra="ignore")

    document_id: str = Field(min_length=1, description="Document identifier")
    frames: list[FrameRef] = Field(default_factory=list, description="Frames on the canvas")

    @model_validator(mode="after")
    def _unique_frame_ids(self) -> Self:
        ids = [f.id for f in self.frames]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate frame ids in scene: {duplicates}")
        return self


def load_scene(path: str | Path) -> SceneDocument:
    """Load a scene document from JSON or YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or content is invalid
        ValidationError: If the document fails validation
    """
    return SceneDocument.model_validate(load_config(path))
