from .manifest_store import ManifestStore
from .memory_store import InMemoryStore

__all__ = ["InMemoryStore", "ManifestStore"]
