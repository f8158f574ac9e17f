"""
Core data models for the bucket sync service.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class AccessLevel(str, Enum):
    """Object-level visibility applied at upload time."""
    PUBLIC_READ_WRITE = 'public-read-write'
    PUBLIC_READ = 'public-read'
    PRIVATE = 'private'


@dataclass(frozen=True)
class FileEntry:
    """Represents one local file to upload."""
    relative_path: str
    local_source_path: str
    access_level: AccessLevel = AccessLevel.PUBLIC_READ


def remote_key(prefix: str, relative_path: str) -> str:
    """Build the remote object key for a path relative to prefix."""
    return f"{prefix}{relative_path}"


@dataclass
class StorageResponse:
    """HTTP-level outcome of a storage request."""
    status: int
    body: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {'status': self.status, 'body': self.body}


@dataclass
class ListResult:
    """One page of a remote listing."""
    response: StorageResponse
    objects: List[str] = field(default_factory=list)
    next_marker: Optional[str] = None


@dataclass
class DeleteResult:
    """Outcome of a bulk delete request."""
    response: StorageResponse
    deleted: List[str] = field(default_factory=list)


@dataclass
class SyncPlan:
    """Files to write and remote paths to remove for one sync run."""
    to_upload: List[FileEntry]
    to_delete: List[str]
