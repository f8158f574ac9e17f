"""
Bucket Sync - synchronizes a local directory to an object-storage bucket prefix.
"""

from .services.syncer import Syncer
from .services.sync_service import SyncService, compute_sync_plan
from .models.config import SyncOptions, BucketConfig, SyncConfig
from .models.data_models import AccessLevel, FileEntry

__version__ = "1.0.0"
__all__ = [
    "Syncer",
    "SyncService",
    "compute_sync_plan",
    "SyncOptions",
    "BucketConfig",
    "SyncConfig",
    "AccessLevel",
    "FileEntry"
]
