"""Order store backend implementations."""

from framedeck.core.storage.backends.fs import FSOrderStore
from framedeck.core.storage.backends.memory import InMemoryOrderStore
from framedeck.core.storage.backends.null import NullOrderStore

__all__ = ["FSOrderStore", "InMemoryOrderStore", "NullOrderStore"]
