"""Blob store port for item and category images."""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Stores uploaded images and hands back a public URL for each."""

    @abstractmethod
    def upload(self, data: bytes, filename: str | None = None, content_type: str | None = None) -> str:
        """Store ``data`` and return its public URL."""
        ...

    @abstractmethod
    def delete(self, url: str) -> bool:
        """Remove the object behind ``url``. Returns False when nothing was stored there."""
        ...
