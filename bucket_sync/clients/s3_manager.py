"""
S3 client manager implementing the storage client interface on top of boto3.
"""
import mimetypes
from typing import Any, BinaryIO, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from loguru import logger

from ..models.config import SyncOptions
from ..models.data_models import StorageResponse, ListResult, DeleteResult


# Maximum number of keys accepted by a single DeleteObjects request
DELETE_BATCH_SIZE = 1000

HEADER_PARAMS = {
    'cache-control': 'CacheControl',
    'content-disposition': 'ContentDisposition',
    'content-encoding': 'ContentEncoding',
    'content-type': 'ContentType',
    'expires': 'Expires',
    'x-oss-server-side-encryption': 'ServerSideEncryption',
    'x-oss-server-side-encryption-key-id': 'SSEKMSKeyId',
    'x-oss-object-acl': 'ACL',
}

META_PREFIXES = ('x-oss-meta-', 'x-amz-meta-')


def headers_to_put_params(key: str, headers: Dict[str, str]) -> Dict[str, Any]:
    """
    Translate upload headers into put_object keyword arguments.

    Args:
        key: Target object key, used to guess the content type
        headers: Header map with case-insensitive names

    Returns:
        Dict of put_object parameters
    """
    params: Dict[str, Any] = {}
    metadata: Dict[str, str] = {}

    for name, value in headers.items():
        lowered = name.lower()
        if lowered in HEADER_PARAMS:
            param = HEADER_PARAMS[lowered]
            if param == 'ServerSideEncryption' and value == 'KMS':
                value = 'aws:kms'
            params[param] = value
        elif lowered.startswith(META_PREFIXES):
            metadata[lowered.split('-meta-', 1)[1]] = value
        else:
            logger.debug(f"Dropping unsupported upload header: {name}")

    if metadata:
        params['Metadata'] = metadata

    if 'ContentType' not in params:
        content_type, _ = mimetypes.guess_type(key)
        if content_type:
            params['ContentType'] = content_type

    return params


def _error_response(error: ClientError) -> StorageResponse:
    status = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode', 500)
    return StorageResponse(status=status, body=error.response.get('Error', {}))


def _status(response: Dict[str, Any]) -> int:
    return response.get('ResponseMetadata', {}).get('HTTPStatusCode', 200)


class S3Manager:
    """Manages bucket operations against an S3-compatible endpoint."""

    def __init__(self, options: SyncOptions):
        """Initialize S3Manager with sync options."""
        self.options = options
        self.bucket = options.bucket.name

        self.client = self._create_s3_client(options)

        logger.info(f"S3Manager initialized for bucket: {self.bucket}")

    @staticmethod
    def _resolve_endpoint(options: SyncOptions) -> Optional[str]:
        """Build the endpoint URL from the bucket configuration."""
        bucket = options.bucket
        endpoint = bucket.endpoint

        if not endpoint and bucket.region:
            region = bucket.region if bucket.region.startswith('oss-') else f'oss-{bucket.region}'
            suffix = '-internal' if bucket.internal else ''
            endpoint = f'{region}{suffix}.aliyuncs.com'

        if endpoint and '://' not in endpoint:
            scheme = 'https' if options.secure else 'http'
            endpoint = f'{scheme}://{endpoint}'

        return endpoint

    def _create_s3_client(self, options: SyncOptions):
        """Create an S3 client from configuration."""
        endpoint = self._resolve_endpoint(options)
        region = options.bucket.region
        if region and region.startswith('oss-'):
            region = region[len('oss-'):]

        config_kwargs = {
            'connect_timeout': options.timeout or 60,
            'read_timeout': options.timeout or 60,
            'retries': {'total_max_attempts': 1}
        }
        # Custom domains serve a single bucket from the host name
        if options.cname:
            config_kwargs['s3'] = {'addressing_style': 'virtual'}

        client_config = Config(**config_kwargs)

        try:
            client = boto3.client(
                's3',
                endpoint_url=endpoint,
                aws_access_key_id=options.access_key_id,
                aws_secret_access_key=options.access_key_secret,
                aws_session_token=options.sts_token,
                region_name=region or 'us-east-1',
                use_ssl=options.secure,
                config=client_config
            )
            logger.debug(f"Created S3 client for endpoint: {endpoint}")
            return client
        except Exception as e:
            logger.error(f"Failed to create S3 client for {endpoint}: {e}")
            raise

    def put_stream(self, key: str, stream: BinaryIO, headers: Dict[str, str]) -> StorageResponse:
        """
        Upload a stream to the bucket.

        Args:
            key: Object key in the bucket
            stream: Readable binary stream with the object data
            headers: Upload headers, translated to put_object parameters

        Returns:
            StorageResponse: HTTP status and response body
        """
        params = headers_to_put_params(key, headers)

        try:
            response = self.client.put_object(Bucket=self.bucket, Key=key, Body=stream, **params)
        except ClientError as e:
            logger.debug(f"put_object failed for key {key}: {e}")
            return _error_response(e)

        return StorageResponse(status=_status(response), body={'ETag': response.get('ETag')})

    def list(self, prefix: str, marker: Optional[str] = None) -> ListResult:
        """
        List one page of objects under prefix.

        Args:
            prefix: Key prefix to filter by
            marker: Key to start listing after

        Returns:
            ListResult: Object keys of the page and the marker of the next page
        """
        kwargs: Dict[str, Any] = {'Bucket': self.bucket, 'Prefix': prefix}
        if marker:
            kwargs['Marker'] = marker

        try:
            response = self.client.list_objects(**kwargs)
        except ClientError as e:
            logger.debug(f"list_objects failed for prefix {prefix}: {e}")
            return ListResult(response=_error_response(e))

        keys = [obj['Key'] for obj in response.get('Contents', [])]

        next_marker = None
        if response.get('IsTruncated'):
            next_marker = response.get('NextMarker') or (keys[-1] if keys else None)

        return ListResult(
            response=StorageResponse(status=_status(response)),
            objects=keys,
            next_marker=next_marker
        )

    def delete_multi(self, keys: List[str]) -> DeleteResult:
        """
        Delete keys from the bucket.

        Keys are sent in batches of at most DELETE_BATCH_SIZE and the
        results merged. The first failing batch ends the call.

        Args:
            keys: Object keys to delete

        Returns:
            DeleteResult: HTTP status and the keys reported as deleted
        """
        deleted: List[str] = []
        errors: List[Dict[str, Any]] = []

        for start in range(0, len(keys), DELETE_BATCH_SIZE):
            batch = keys[start:start + DELETE_BATCH_SIZE]
            try:
                response = self.client.delete_objects(
                    Bucket=self.bucket,
                    Delete={'Objects': [{'Key': key} for key in batch], 'Quiet': False}
                )
            except ClientError as e:
                logger.debug(f"delete_objects failed for {len(batch)} keys: {e}")
                return DeleteResult(response=_error_response(e), deleted=deleted)

            deleted.extend(item['Key'] for item in response.get('Deleted', []))
            errors.extend(response.get('Errors', []))

        body = {'Errors': errors} if errors else None
        return DeleteResult(response=StorageResponse(status=200, body=body), deleted=deleted)

    def test_connection(self) -> bool:
        """
        Test connection to the bucket.

        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            self.client.head_bucket(Bucket=self.bucket)
            logger.info("S3 connection test successful")
            return True
        except Exception as e:
            logger.error(f"S3 connection test failed: {e}")
            return False
