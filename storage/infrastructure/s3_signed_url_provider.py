"""
S3 implementation of SignedUrlProvider port.

Presigns ``get_object`` requests with boto3.
"""
import logging
from datetime import timedelta
from functools import lru_cache

import boto3
from asgiref.sync import sync_to_async
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from core.domain.exceptions import StorageUnavailableError
from storage.infrastructure.credentials import StorageCredentials
from storage.ports.signed_url_provider import SignedUrlProvider

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 3
READ_TIMEOUT_SECONDS = 5


@lru_cache(maxsize=8)
def _s3_client(credentials: StorageCredentials):
    """Build (and reuse) an S3 client for a set of credentials."""
    return boto3.client(
        "s3",
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        region_name=credentials.region,
        endpoint_url=credentials.endpoint_url,
        config=Config(
            signature_version="s3v4",
            connect_timeout=CONNECT_TIMEOUT_SECONDS,
            read_timeout=READ_TIMEOUT_SECONDS,
            retries={"max_attempts": 1},
        ),
    )


class S3SignedUrlProvider(SignedUrlProvider):
    """
    boto3 implementation of SignedUrlProvider.

    Presigning is computed locally from the credentials, so the
    provider never contacts S3 while handling a request.
    """

    def __init__(self, credentials: StorageCredentials):
        """Initialize provider with storage credentials."""
        self.credentials = credentials

    @classmethod
    def from_settings(cls) -> "S3SignedUrlProvider":
        """Create a provider from the settings store."""
        return cls(StorageCredentials.from_settings())

    @sync_to_async(thread_sensitive=False)
    def signed_url(self, bucket: str, object_name: str, ttl: timedelta) -> str:
        """
        Create a presigned GET URL for an object.

        Args:
            bucket: S3 bucket name
            object_name: Object key
            ttl: URL lifetime

        Returns:
            Presigned URL

        Raises:
            StorageUnavailableError: If credentials are missing or signing fails
        """
        if not self.credentials.is_configured():
            raise StorageUnavailableError("Storage credentials are not configured")

        try:
            url = _s3_client(self.credentials).generate_presigned_url(
                "get_object",
                Params={"Bucket": bucket, "Key": object_name},
                ExpiresIn=int(ttl.total_seconds()),
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageUnavailableError(f"Could not presign object URL: {e}") from e

        logger.debug("Presigned URL issued for bucket %s", bucket)
        return url
