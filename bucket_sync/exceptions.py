"""
Exception hierarchy for the bucket sync service.
"""


class BucketSyncError(Exception):
    """Base class for errors raised by the bucket sync service."""
    pass


class LocalSourceError(BucketSyncError):
    """Raised when the local directory to sync cannot be used."""
    pass
