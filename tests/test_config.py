"""
Tests for configuration loading.
"""
import pytest

from bucket_sync.models.config import SyncConfig, SyncOptions


@pytest.fixture
def oss_env(monkeypatch):
    """Populate the environment with a complete configuration."""
    env = {
        'OSS_ACCESS_KEY_ID': 'id',
        'OSS_ACCESS_KEY_SECRET': 'secret',
        'OSS_BUCKET': 'site-bucket',
        'OSS_REGION': 'oss-cn-beijing',
        'OSS_INTERNAL': 'true',
        'OSS_SECURE': 'false',
        'OSS_TIMEOUT': '15',
        'OSS_CACHE_CONTROL': 'no-cache',
        'OSS_SSE': 'AES256',
        'SYNC_WAIT_BEFORE_UPLOAD': '2',
        'SYNC_WAIT_BEFORE_DELETE': '0.5',
        'SYNC_LOCAL_DIR': 'build',
        'SYNC_PREFIX': 'app/',
        'SYNC_EXCLUDE': '*.map, .DS_Store',
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env


class TestSyncOptions:
    """Test cases for SyncOptions.from_env."""

    def test_from_env(self, oss_env):
        """Test loading configuration from the environment."""
        options = SyncOptions.from_env()

        assert options.bucket.name == 'site-bucket'
        assert options.bucket.region == 'oss-cn-beijing'
        assert options.bucket.internal is True
        assert options.secure is False
        assert options.timeout == 15
        assert options.headers == {
            'Cache-Control': 'no-cache',
            'x-oss-server-side-encryption': 'AES256'
        }
        assert options.wait_before_upload == 2
        assert options.wait_before_delete == 0.5

    def test_defaults(self, monkeypatch):
        """Test defaults when optional variables are unset."""
        for key in ('OSS_SECURE', 'OSS_TIMEOUT', 'SYNC_WAIT_BEFORE_UPLOAD', 'SYNC_WAIT_BEFORE_DELETE',
                    'OSS_CACHE_CONTROL', 'OSS_SSE', 'OSS_OBJECT_ACL'):
            monkeypatch.delenv(key, raising=False)

        options = SyncOptions.from_env()

        assert options.secure is True
        assert options.timeout == 60
        assert options.wait_before_upload == 0
        assert options.wait_before_delete == 0

    def test_invalid_wait(self, oss_env, monkeypatch):
        """Test a non-numeric wait is rejected without a chained error."""
        monkeypatch.setenv('SYNC_WAIT_BEFORE_UPLOAD', 'soon')

        with pytest.raises(ValueError) as exc_info:
            SyncOptions.from_env()

        assert 'SYNC_WAIT_BEFORE_UPLOAD' in str(exc_info.value)
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

    def test_invalid_encryption_mode(self, oss_env, monkeypatch):
        """Test an unknown encryption mode is rejected."""
        monkeypatch.setenv('OSS_SSE', 'DES')

        with pytest.raises(ValueError):
            SyncOptions.from_env()


class TestSyncConfig:
    """Test cases for SyncConfig.from_env."""

    def test_from_env(self, oss_env):
        """Test loading configuration from the environment."""
        config = SyncConfig.from_env()

        assert config.local_dir == 'build'
        assert config.prefix == 'app/'
        assert config.exclude == ['*.map', '.DS_Store']
        assert config.options.bucket.name == 'site-bucket'
