"""
Storage client interface consumed by the syncer.
"""
from typing import BinaryIO, Dict, List, Optional, Protocol

from ..models.data_models import StorageResponse, ListResult, DeleteResult


class StorageClient(Protocol):
    """The three bucket operations the syncer is built on."""

    def put_stream(self, key: str, stream: BinaryIO, headers: Dict[str, str]) -> StorageResponse:
        """Write the stream to key with the given request headers."""
        ...

    def list(self, prefix: str, marker: Optional[str] = None) -> ListResult:
        """Return one page of keys under prefix, starting after marker."""
        ...

    def delete_multi(self, keys: List[str]) -> DeleteResult:
        """Delete all keys in a single bulk request."""
        ...
