"""
Main entry point for the bucket sync service.
"""
import json
import sys
from pathlib import Path
from loguru import logger

from .models.config import SyncConfig
from .services.sync_service import SyncService


def setup_logging():
    """Configure logging for the bucket sync service."""
    # Remove default logger
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="INFO"
    )

    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)

    logger.add(
        "logs/bucket_sync.log",
        rotation="10 MB",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG"
    )


def run_sync(args):
    """Run a full synchronization of a local directory to a prefix."""
    config = SyncConfig.from_env()
    local_dir = args[0] if len(args) > 0 else config.local_dir
    prefix = args[1] if len(args) > 1 else config.prefix

    logger.info(f"Loaded configuration - Bucket: {config.options.bucket.name}")

    sync_service = SyncService(config.options)
    results = sync_service.run_sync(local_dir, prefix, exclude=config.exclude)
    logger.info(f"Sync Results: {json.dumps(results, indent=2, default=str)}")
    return results


def run_upload(args):
    """Upload every file of a local directory without deleting anything."""
    if not args:
        raise ValueError("upload requires LOCAL_DIR")

    config = SyncConfig.from_env()
    prefix = args[1] if len(args) > 1 else config.prefix

    sync_service = SyncService(config.options)
    entries = sync_service.collect(args[0], exclude=config.exclude)
    elapsed = sync_service.syncer.upload(prefix, entries, sync_service.log)
    logger.info(f"Uploaded {len(entries)} files in {elapsed} ms")
    return elapsed


def run_list(args):
    """Print the remote paths under a prefix."""
    config = SyncConfig.from_env()
    prefix = args[0] if args else config.prefix

    sync_service = SyncService(config.options)
    paths = sync_service.syncer.list(prefix, sync_service.log)
    for path in paths:
        print(path)
    logger.info(f"Found {len(paths)} remote files under '{prefix}'")
    return paths


def run_delete(args):
    """Delete relative paths under a prefix."""
    if len(args) < 2:
        raise ValueError("delete requires PREFIX and at least one PATH")

    config = SyncConfig.from_env()
    sync_service = SyncService(config.options)
    elapsed = sync_service.syncer.delete(args[0], args[1:], sync_service.log)
    logger.info(f"Delete request for {len(args) - 1} files finished in {elapsed} ms")
    return elapsed


def print_help():
    """Print help information for the CLI."""
    help_text = """
Bucket Sync - Command Line Interface

USAGE:
    python -m bucket_sync.main [COMMAND] [ARGS]

COMMANDS:
    sync [LOCAL_DIR] [PREFIX]   Upload local files and delete stale remote files (default)
    upload LOCAL_DIR [PREFIX]   Upload local files only
    list [PREFIX]               List remote files relative to PREFIX
    delete PREFIX PATH...       Delete remote files in one bulk request
    status                      Test the bucket connection
    help                        Show this help message

ENVIRONMENT VARIABLES:
    OSS_ACCESS_KEY_ID        Access key id
    OSS_ACCESS_KEY_SECRET    Access key secret
    OSS_STS_TOKEN            Optional session token
    OSS_BUCKET               Bucket name
    OSS_REGION               Bucket region
    OSS_ENDPOINT             Endpoint host or URL
    OSS_INTERNAL             Use the internal network endpoint (default: false)
    OSS_CNAME                Endpoint is a custom domain (default: false)
    OSS_SECURE               Use TLS (default: true)
    OSS_TIMEOUT              Request timeout in seconds (default: 60)
    OSS_CACHE_CONTROL, OSS_CONTENT_DISPOSITION, OSS_CONTENT_ENCODING,
    OSS_EXPIRES, OSS_SSE, OSS_SSE_KEY_ID, OSS_OBJECT_ACL
                             Headers sent with every upload
    SYNC_WAIT_BEFORE_UPLOAD  Seconds to wait before uploading (default: 0)
    SYNC_WAIT_BEFORE_DELETE  Seconds to wait before deleting (default: 0)
    SYNC_LOCAL_DIR           Local directory to sync (default: dist)
    SYNC_PREFIX              Remote key prefix (default: empty)
    SYNC_EXCLUDE             Comma-separated patterns to skip
"""
    print(help_text)


def main(argv=None):
    """Main entry point with command line argument handling."""
    setup_logging()

    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        logger.info("No command specified - running sync")
        command, args = "sync", []
    else:
        command, args = argv[0].lower(), argv[1:]

    try:
        if command in ["help", "--help", "-h"]:
            print_help()
        elif command == "sync":
            run_sync(args)
        elif command == "upload":
            run_upload(args)
        elif command == "list":
            run_list(args)
        elif command == "delete":
            run_delete(args)
        elif command == "status":
            config = SyncConfig.from_env()
            status = SyncService(config.options).get_sync_status()
            logger.info(f"Service Status: {json.dumps(status, indent=2)}")
            if status['service_status'] != 'healthy':
                sys.exit(1)
        else:
            logger.error(f"Unknown command: {command}")
            logger.error("Use 'help' to see available commands")
            print_help()
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down gracefully")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Command failed: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
