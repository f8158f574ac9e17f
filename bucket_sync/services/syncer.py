"""
Syncer: sequential upload, list and bulk delete against a remote bucket.

Every operation reports its outcome through a SyncLog. Expected failures
(non-200 responses, unreadable local files, transport errors) are logged and
never raised, so a caller cannot tell partial from full success by the return
value alone.
"""
import json
import time
from typing import Iterable, List

from loguru import logger

from ..clients.base import StorageClient
from ..models.config import SyncOptions
from ..models.data_models import AccessLevel, FileEntry, StorageResponse, remote_key
from .sync_log import SyncLog


ACL_HEADER = 'x-oss-object-acl'


def wait(seconds: float = 0) -> None:
    """Block for the given number of seconds. Zero returns immediately."""
    if seconds:
        time.sleep(seconds)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _raw(response: StorageResponse) -> str:
    return json.dumps(response.to_dict(), default=str)


class Syncer:
    """
    Sequences storage operations with configurable pre-operation delays.

    Holds no state besides the options and client it was built with.
    """

    def __init__(self, options: SyncOptions, client: StorageClient):
        """
        Initialize syncer.

        Args:
            options: SyncOptions providing global headers and pacing waits
            client: Storage client the operations are delegated to
        """
        self.options = options
        self.client = client

    def upload(self, prefix: str, entries: Iterable[FileEntry], log: SyncLog) -> int:
        """
        Upload entries one after another under prefix.

        A failed file is logged and the batch continues.

        Args:
            prefix: Key prefix prepended to each relative path
            entries: Files to upload, in upload order
            log: Channels receiving per-file outcomes

        Returns:
            int: Milliseconds spent uploading, excluding the initial wait
        """
        wait(self.options.wait_before_upload)
        global_start = time.monotonic()

        for entry in entries:
            start = time.monotonic()
            target_key = remote_key(prefix, entry.relative_path)
            log.pending(f"Uploading {target_key}...")

            try:
                headers = dict(self.options.headers)
                headers[ACL_HEADER] = AccessLevel(entry.access_level).value
                with open(entry.local_source_path, 'rb') as stream:
                    response = self.client.put_stream(target_key, stream, headers)
            except Exception as e:
                logger.debug(f"Upload of {target_key} raised {type(e).__name__}")
                log.error(target_key, str(e))
                continue

            if response.status == 200:
                log.success(target_key, f"{time.monotonic() - start:.2f}s")
            else:
                log.error(target_key, _raw(response))

        return _elapsed_ms(global_start)

    def list(self, prefix: str, log: SyncLog) -> List[str]:
        """
        List every key under prefix, relative to prefix.

        Pages are followed until no next marker is returned. A failed page
        stops the listing and the keys gathered so far are returned.

        Args:
            prefix: Key prefix to list
            log: Channels receiving listing errors

        Returns:
            List of keys with the first occurrence of prefix removed
        """
        marker = prefix
        existing: List[str] = []

        while marker is not None:
            try:
                result = self.client.list(prefix, marker)
            except Exception as e:
                log.error(str(e))
                break

            if result.response.status == 200:
                existing.extend(result.objects)
                marker = result.next_marker
            else:
                log.error(_raw(result.response))
                break

        return [key.replace(prefix, '', 1) for key in existing]

    def delete(self, prefix: str, relative_paths: Iterable[str], log: SyncLog) -> int:
        """
        Delete relative paths under prefix with one bulk request.

        Keys the store does not confirm as deleted are logged together in a
        single error message.

        Args:
            prefix: Key prefix prepended to each relative path
            relative_paths: Paths to delete
            log: Channels receiving delete errors

        Returns:
            int: Milliseconds spent deleting, excluding the initial wait
        """
        wait(self.options.wait_before_delete)
        global_start = time.monotonic()

        keys = [remote_key(prefix, path) for path in relative_paths]

        try:
            result = self.client.delete_multi(keys)
        except Exception as e:
            log.error(str(e))
            return _elapsed_ms(global_start)

        if result.response.status == 200:
            deleted = set(result.deleted)
            failed = [key for key in keys if key not in deleted]
            if failed:
                log.error("Delete failed:\n" + "\n".join(failed))
        else:
            log.error(_raw(result.response))

        return _elapsed_ms(global_start)
