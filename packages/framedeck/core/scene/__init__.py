"""Scene documents and frame sources."""

from framedeck.core.scene.models import SceneDocument, load_scene
from framedeck.core.scene.source import StaticFrameSource

__all__ = ["SceneDocument", "StaticFrameSource", "load_scene"]
