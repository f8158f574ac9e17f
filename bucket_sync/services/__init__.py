# Services package
from .sync_log import SyncLog, LoguruSyncLog
from .syncer import Syncer, wait
from .file_collector import FileCollector
from .sync_service import SyncService, compute_sync_plan

__all__ = ['SyncLog', 'LoguruSyncLog', 'Syncer', 'wait', 'FileCollector', 'SyncService', 'compute_sync_plan']
