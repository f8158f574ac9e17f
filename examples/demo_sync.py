#!/usr/bin/env python3
"""
Demo of a full directory sync against a local S3-compatible server.

This script demonstrates:
- Building sync options for a MinIO endpoint
- Uploading a generated directory
- Listing the prefix and deleting a stale file
"""
import sys
import tempfile
from pathlib import Path

from loguru import logger

from bucket_sync.models.config import BucketConfig, SyncOptions
from bucket_sync.services.sync_service import SyncService


def build_options() -> SyncOptions:
    """Options for a MinIO server started with default credentials."""
    return SyncOptions(
        bucket=BucketConfig(name='demo-bucket', region='us-east-1', endpoint='http://localhost:9000'),
        access_key_id='minioadmin',
        access_key_secret='minioadmin',
        secure=False,
        timeout=10,
        headers={'Cache-Control': 'max-age=300'}
    )


def main():
    """Run sync demo."""
    logger.remove()
    logger.add(sys.stderr, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> - <level>{message}</level>", level="INFO")

    logger.info("🚀 Bucket Sync Demo")

    with tempfile.TemporaryDirectory() as tmp_dir:
        root = Path(tmp_dir)
        (root / 'static').mkdir()
        (root / 'index.html').write_text('<html><body>demo</body></html>')
        (root / 'app.js').write_text('console.log("demo")')
        (root / 'static' / 'style.css').write_text('body { margin: 0; }')

        service = SyncService(build_options())
        if not service.client.test_connection():
            logger.error("MinIO is not reachable on http://localhost:9000")
            return 1

        results = service.run_sync(str(root), 'demo/')
        logger.info(f"Uploaded {results['files_uploaded']} files in {results['upload_ms']} ms")

        (root / 'app.js').unlink()
        results = service.run_sync(str(root), 'demo/')
        logger.info(f"Second run deleted {results['files_deleted']} stale files")

        remote = service.syncer.list('demo/', service.log)
        logger.info(f"Remote files: {remote}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
