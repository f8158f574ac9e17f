"""
Pytest configuration and fixtures for the bucket sync tests.
"""
from typing import Dict, List, Optional

import pytest

from bucket_sync.models.config import BucketConfig, SyncOptions
from bucket_sync.models.data_models import StorageResponse, ListResult, DeleteResult


class RecordingLog:
    """SyncLog that keeps every message for assertions."""

    def __init__(self):
        self.records = []

    def _record(self, channel, messages):
        self.records.append((channel, messages))

    def success(self, *messages):
        self._record('success', messages)

    def error(self, *messages):
        self._record('error', messages)

    def debug(self, *messages):
        self._record('debug', messages)

    def pending(self, *messages):
        self._record('pending', messages)

    def watch(self, *messages):
        self._record('watch', messages)

    def channel(self, name):
        return [messages for channel, messages in self.records if channel == name]


class InMemoryStorage:
    """Storage client keeping objects in a dict, with paged listing."""

    def __init__(self, page_size: int = 2):
        self.objects: Dict[str, bytes] = {}
        self.headers: Dict[str, Dict[str, str]] = {}
        self.page_size = page_size
        self.fail_keys = set()
        self.undeletable = set()
        self.list_calls: List[tuple] = []
        self.delete_calls: List[List[str]] = []

    def put_stream(self, key, stream, headers):
        if key in self.fail_keys:
            return StorageResponse(status=500, body={'Code': 'InternalError'})
        self.objects[key] = stream.read()
        self.headers[key] = dict(headers)
        return StorageResponse(status=200)

    def list(self, prefix, marker: Optional[str] = None):
        self.list_calls.append((prefix, marker))
        keys = sorted(k for k in self.objects if k.startswith(prefix) and (not marker or k > marker))
        page = keys[:self.page_size]
        next_marker = page[-1] if len(keys) > self.page_size else None
        return ListResult(response=StorageResponse(status=200), objects=page, next_marker=next_marker)

    def delete_multi(self, keys):
        self.delete_calls.append(list(keys))
        deleted = []
        for key in keys:
            if key in self.undeletable:
                continue
            self.objects.pop(key, None)
            deleted.append(key)
        return DeleteResult(response=StorageResponse(status=200), deleted=deleted)


@pytest.fixture
def sync_options():
    """Create test sync options without pacing waits."""
    return SyncOptions(
        bucket=BucketConfig(name='test-bucket', region='oss-cn-hangzhou'),
        access_key_id='test_key',
        access_key_secret='test_secret',
        headers={'Cache-Control': 'max-age=60'}
    )


@pytest.fixture
def recording_log():
    """Log collecting every channel call."""
    return RecordingLog()


@pytest.fixture
def memory_storage():
    """In-memory storage client with two keys per listing page."""
    return InMemoryStorage()


@pytest.fixture
def local_tree(tmp_path):
    """Create a small build output directory."""
    (tmp_path / 'static').mkdir()
    (tmp_path / 'static' / 'logo.png').write_bytes(b'png')
    (tmp_path / 'umi.js').write_text('console.log(1)')
    (tmp_path / 'index.html').write_text('<html></html>')
    return tmp_path
