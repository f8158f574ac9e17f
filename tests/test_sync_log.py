"""
Tests for the loguru-backed sync log.
"""
import pytest
from loguru import logger

from bucket_sync.services.sync_log import LoguruSyncLog


@pytest.fixture
def captured():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    logger.remove(handler_id)


def test_channels_map_to_levels(captured):
    """Test each channel logs at its loguru level."""
    log = LoguruSyncLog()

    log.success('site/a.js', '0.10s')
    log.error('Delete failed:\nsite/b.js')
    log.debug('debug line')
    log.pending('Uploading site/a.js...')
    log.watch('Listing remote files')

    levels = [(record['extra']['channel'], record['level'].name) for record in captured]
    assert levels == [
        ('success', 'SUCCESS'),
        ('error', 'ERROR'),
        ('debug', 'DEBUG'),
        ('pending', 'INFO'),
        ('watch', 'INFO'),
    ]
    assert captured[0]['message'] == 'site/a.js 0.10s'


def test_messages_with_braces_are_not_formatted(captured):
    """Test messages containing braces are logged verbatim."""
    LoguruSyncLog().error('{"status": 500}')

    assert captured[0]['message'] == '{"status": 500}'
