"""
Sync service orchestrating a full local directory to bucket synchronization.
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from ..clients.base import StorageClient
from ..clients.s3_manager import S3Manager
from ..models.config import SyncOptions
from ..models.data_models import AccessLevel, FileEntry, SyncPlan
from .file_collector import FileCollector
from .sync_log import LoguruSyncLog, SyncLog
from .syncer import Syncer


def compute_sync_plan(local_entries: Iterable[FileEntry], remote_paths: Iterable[str]) -> SyncPlan:
    """
    Compute the operations that make the remote prefix mirror the local files.

    Remote listings carry no content hash, so every local entry is uploaded.
    Remote paths with no local counterpart are deleted, in listing order.

    Args:
        local_entries: Files present locally
        remote_paths: Paths present remotely, relative to the prefix

    Returns:
        SyncPlan with the entries to upload and the paths to delete
    """
    to_upload = list(local_entries)
    local_paths = {entry.relative_path for entry in to_upload}
    to_delete = [path for path in remote_paths if path not in local_paths]
    return SyncPlan(to_upload=to_upload, to_delete=to_delete)


class SyncService:
    """
    Main synchronization service: collects local files, lists the remote
    prefix, uploads and removes stale keys.
    """

    def __init__(self, options: SyncOptions, client: Optional[StorageClient] = None,
                 log: Optional[SyncLog] = None):
        """
        Initialize sync service.

        Args:
            options: SyncOptions for the storage connection and pacing
            client: Storage client; an S3Manager is created when omitted
            log: Progress log; a LoguruSyncLog is used when omitted
        """
        self.options = options
        self.client = client if client is not None else S3Manager(options)
        self.log = log if log is not None else LoguruSyncLog()
        self.syncer = Syncer(options, self.client)

        logger.info("SyncService initialized successfully")

    def collect(self, local_dir: str, exclude: Iterable[str] = (),
                access_level: AccessLevel = AccessLevel.PUBLIC_READ) -> List[FileEntry]:
        """Collect the local files under local_dir."""
        return FileCollector(access_level=access_level, exclude=exclude).collect(local_dir)

    def run_sync(self, local_dir: str, prefix: str, exclude: Iterable[str] = (),
                 access_level: AccessLevel = AccessLevel.PUBLIC_READ) -> Dict[str, Any]:
        """
        Synchronize local_dir to prefix.

        Args:
            local_dir: Local directory to mirror
            prefix: Remote key prefix
            exclude: fnmatch patterns of relative paths to skip
            access_level: Access level applied to every uploaded file

        Returns:
            Dictionary containing sync statistics
        """
        logger.info(f"Starting sync of {local_dir} to prefix '{prefix}'")

        sync_stats: Dict[str, Any] = {
            'start_time': datetime.now(),
            'files_uploaded': 0,
            'files_deleted': 0,
            'upload_ms': 0,
            'delete_ms': 0
        }

        local_entries = self.collect(local_dir, exclude=exclude, access_level=access_level)

        self.log.watch(f"Listing remote files under '{prefix}'")
        remote_paths = self.syncer.list(prefix, self.log)
        logger.info(f"Found {len(remote_paths)} remote files")

        plan = compute_sync_plan(local_entries, remote_paths)
        logger.info(f"Sync plan - Upload: {len(plan.to_upload)}, Delete: {len(plan.to_delete)}")

        sync_stats['upload_ms'] = self.syncer.upload(prefix, plan.to_upload, self.log)
        sync_stats['files_uploaded'] = len(plan.to_upload)

        if plan.to_delete:
            sync_stats['delete_ms'] = self.syncer.delete(prefix, plan.to_delete, self.log)
            sync_stats['files_deleted'] = len(plan.to_delete)
        else:
            logger.info("No stale remote files to delete")

        sync_stats['end_time'] = datetime.now()
        sync_stats['duration'] = (sync_stats['end_time'] - sync_stats['start_time']).total_seconds()

        logger.info(f"Sync completed - Uploaded: {sync_stats['files_uploaded']}, "
                    f"Deleted: {sync_stats['files_deleted']}, "
                    f"Duration: {sync_stats['duration']:.2f} seconds")

        return sync_stats

    def get_sync_status(self) -> Dict[str, Any]:
        """
        Get current sync service status.

        Returns:
            Dictionary containing service status information
        """
        test_connection = getattr(self.client, 'test_connection', None)
        connected = test_connection() if test_connection is not None else None

        return {
            'service_status': 'healthy' if connected is not False else 'error',
            'bucket': self.options.bucket.name,
            'endpoint': self.options.bucket.endpoint,
            'region': self.options.bucket.region,
            'wait_before_upload': self.options.wait_before_upload,
            'wait_before_delete': self.options.wait_before_delete
        }
