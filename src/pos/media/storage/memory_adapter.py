"""In-process blob store used in development and tests."""

from dataclasses import dataclass
from uuid import uuid4

from pos.errors import BlobStoreFailure
from pos.media.storage.port import BlobStore


@dataclass(frozen=True)
class StoredBlob:
    data: bytes
    filename: str | None
    content_type: str | None


class InMemoryBlobStore(BlobStore):
    def __init__(self, base_url: str = "memory://pos-media") -> None:
        self.base_url = base_url.rstrip("/")
        self.blobs: dict[str, StoredBlob] = {}
        self.fail_uploads = False
        self.fail_deletes = False

    def upload(self, data: bytes, filename: str | None = None, content_type: str | None = None) -> str:
        if self.fail_uploads:
            raise BlobStoreFailure("Blob store rejected the upload", filename=filename)

        url = f"{self.base_url}/{uuid4().hex}"
        self.blobs[url] = StoredBlob(data=data, filename=filename, content_type=content_type)
        return url

    def delete(self, url: str) -> bool:
        if self.fail_deletes:
            raise BlobStoreFailure("Blob store rejected the delete", url=url)
        return self.blobs.pop(url, None) is not None
