"""
Storage credentials read from the settings store.
"""
from dataclasses import dataclass
from typing import Optional

from django.conf import settings


@dataclass(frozen=True)
class StorageCredentials:
    """Credentials and endpoint for the object storage provider."""

    access_key_id: str
    secret_access_key: str
    region: str
    endpoint_url: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"StorageCredentials(access_key_id={self.access_key_id[:4]!r}..., "
            f"region={self.region!r}, endpoint_url={self.endpoint_url!r})"
        )

    @classmethod
    def from_settings(cls) -> "StorageCredentials":
        """Load credentials from settings.LICENSE_MANAGER."""
        options = getattr(settings, "LICENSE_MANAGER", {})
        return cls(
            access_key_id=options.get("AWS_ACCESS_KEY_ID") or "",
            secret_access_key=options.get("AWS_SECRET_ACCESS_KEY") or "",
            region=options.get("AWS_REGION") or "us-east-1",
            endpoint_url=options.get("AWS_S3_ENDPOINT_URL") or None,
        )

    def is_configured(self) -> bool:
        """Both key and secret are required to sign URLs."""
        return bool(self.access_key_id.strip() and self.secret_access_key.strip())
