"""Durable per-document storage for custom slide orders.

Backends:
- FSOrderStore: one JSON file per document, atomic writes
- InMemoryOrderStore: process-local dict
- NullOrderStore: never persists anything

Failures surface as OrderStoreError; callers decide whether to degrade.
"""

from pathlib import Path

from framedeck.core.config.models import StorageConfig
from framedeck.core.storage.backends.fs import FSOrderStore
from framedeck.core.storage.backends.memory import InMemoryOrderStore
from framedeck.core.storage.backends.null import NullOrderStore
from framedeck.core.storage.errors import OrderStoreError
from framedeck.core.storage.models import StoredOrder
from framedeck.core.storage.protocols import OrderStore


def create_order_store(config: StorageConfig) -> OrderStore:
    """Build the order store backend selected by config."""
    if config.backend == "fs":
        return FSOrderStore(Path(config.root))
    if config.backend == "memory":
        return InMemoryOrderStore()
    return NullOrderStore()


__all__ = [
    # Core
    "OrderStore",
    "OrderStoreError",
    "StoredOrder",
    # Backends
    "FSOrderStore",
    "InMemoryOrderStore",
    "NullOrderStore",
    # Factory
    "create_order_store",
]
