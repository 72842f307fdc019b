"""
Signed URL provider port (interface).

This defines the contract for minting time-limited download URLs.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import timedelta


class SignedUrlProvider(ABC):
    """
    Abstract provider of time-limited object URLs.

    Issuing a URL must be free of side effects so it is safe to call
    repeatedly and concurrently for the same object.
    """

    @abstractmethod
    async def signed_url(self, bucket: str, object_name: str, ttl: timedelta) -> str:
        """
        Create a signed URL for downloading an object.

        Args:
            bucket: Storage bucket name
            object_name: Object key inside the bucket
            ttl: How long the URL stays valid

        Returns:
            Absolute URL granting temporary read access

        Raises:
            StorageUnavailableError: If the provider cannot issue the URL
        """
        pass
