"""
Configuration classes for the bucket sync service.
"""
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional


SERVER_SIDE_ENCRYPTION_MODES = ('AES256', 'KMS')


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return value.strip().lower() in ('true', '1', 'yes')


def _env_float(name: str, default: float = 0) -> float:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class BucketConfig:
    """Identity of the remote bucket."""
    name: str
    region: Optional[str] = None
    endpoint: Optional[str] = None
    internal: bool = False

    @classmethod
    def from_env(cls, prefix: str = 'OSS') -> 'BucketConfig':
        """Create BucketConfig from environment variables with given prefix."""
        return cls(
            name=os.getenv(f'{prefix}_BUCKET', ''),
            region=os.getenv(f'{prefix}_REGION') or None,
            endpoint=os.getenv(f'{prefix}_ENDPOINT') or None,
            internal=_env_bool(f'{prefix}_INTERNAL')
        )


def headers_from_env(prefix: str = 'OSS') -> Dict[str, str]:
    """Collect the recognised upload headers from environment variables."""
    mapping = {
        'Cache-Control': f'{prefix}_CACHE_CONTROL',
        'Content-Disposition': f'{prefix}_CONTENT_DISPOSITION',
        'Content-Encoding': f'{prefix}_CONTENT_ENCODING',
        'Expires': f'{prefix}_EXPIRES',
        'x-oss-server-side-encryption': f'{prefix}_SSE',
        'x-oss-server-side-encryption-key-id': f'{prefix}_SSE_KEY_ID',
        'x-oss-object-acl': f'{prefix}_OBJECT_ACL',
    }
    headers = {header: os.getenv(var) for header, var in mapping.items() if os.getenv(var)}

    sse = headers.get('x-oss-server-side-encryption')
    if sse and sse not in SERVER_SIDE_ENCRYPTION_MODES:
        raise ValueError(f"{prefix}_SSE must be one of {SERVER_SIDE_ENCRYPTION_MODES}, got {sse!r}")
    return headers


@dataclass
class SyncOptions:
    """Connection, header and pacing options for one sync session."""
    bucket: BucketConfig
    access_key_id: Optional[str] = None
    access_key_secret: Optional[str] = None
    sts_token: Optional[str] = None
    cname: bool = False
    secure: bool = True
    timeout: Optional[float] = None
    headers: Dict[str, str] = field(default_factory=dict)
    wait_before_upload: float = 0
    wait_before_delete: float = 0

    @classmethod
    def from_env(cls) -> 'SyncOptions':
        """Create SyncOptions from environment variables."""
        return cls(
            bucket=BucketConfig.from_env('OSS'),
            access_key_id=os.getenv('OSS_ACCESS_KEY_ID'),
            access_key_secret=os.getenv('OSS_ACCESS_KEY_SECRET'),
            sts_token=os.getenv('OSS_STS_TOKEN') or None,
            cname=_env_bool('OSS_CNAME'),
            secure=_env_bool('OSS_SECURE', default=True),
            timeout=_env_float('OSS_TIMEOUT', 60),
            headers=headers_from_env('OSS'),
            wait_before_upload=_env_float('SYNC_WAIT_BEFORE_UPLOAD'),
            wait_before_delete=_env_float('SYNC_WAIT_BEFORE_DELETE')
        )


@dataclass
class SyncConfig:
    """Main configuration for the sync command line workflow."""
    options: SyncOptions
    local_dir: str
    prefix: str
    exclude: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> 'SyncConfig':
        """Create SyncConfig from environment variables."""
        exclude = os.getenv('SYNC_EXCLUDE', '')
        return cls(
            options=SyncOptions.from_env(),
            local_dir=os.getenv('SYNC_LOCAL_DIR', 'dist'),
            prefix=os.getenv('SYNC_PREFIX', ''),
            exclude=[pattern.strip() for pattern in exclude.split(',') if pattern.strip()]
        )
