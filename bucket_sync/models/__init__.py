"""
Models package for the bucket sync service.
"""
from .data_models import (
    AccessLevel,
    FileEntry,
    StorageResponse,
    ListResult,
    DeleteResult,
    SyncPlan,
    remote_key
)
from .config import BucketConfig, SyncOptions, SyncConfig

__all__ = [
    'AccessLevel',
    'FileEntry',
    'StorageResponse',
    'ListResult',
    'DeleteResult',
    'SyncPlan',
    'remote_key',
    'BucketConfig',
    'SyncOptions',
    'SyncConfig'
]
