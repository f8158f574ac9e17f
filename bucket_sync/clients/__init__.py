# Client packages
from .base import StorageClient
from .s3_manager import S3Manager

__all__ = ['StorageClient', 'S3Manager']
