# Path: core/store/__init__.py
# Purpose: Package initializer for entity store interfaces and implementations.
# Layer: core/store.
# Details: Exposes the read and writable store contracts and the list-backed in-memory store.

from .base import EntityStore, WritableEntityStore
from .memory_store import InMemoryEntityStore

__all__ = ["EntityStore", "InMemoryEntityStore", "WritableEntityStore"]
