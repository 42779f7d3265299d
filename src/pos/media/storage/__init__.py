"""Blob store factory.

Provides get_blob_store() / set_blob_store() so a hosted image service can
replace the in-memory store without touching the catalogue code.
"""

from pos.media.storage.memory_adapter import InMemoryBlobStore
from pos.media.storage.port import BlobStore

_current_store: BlobStore | None = None


def get_blob_store() -> BlobStore:
    """Return the current blob store. Defaults to InMemoryBlobStore."""
    global _current_store
    if _current_store is None:
        _current_store = InMemoryBlobStore()
    return _current_store


def set_blob_store(store: BlobStore) -> None:
    """Override the active blob store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_blob_store() -> None:
    global _current_store
    _current_store = None
