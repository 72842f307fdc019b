"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.utils import timezone


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Grants the holder of ``license_key`` (registered to ``email``) access
    to one product. ``valid_until`` of None means the license never expires.
    """

    id: Optional[int]
    product_id: int
    email: str
    license_key: str
    valid_until: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.product_id:
            raise ValueError("Product ID is required")
        if not self.email:
            raise ValueError("Email is required")
        if not self.license_key:
            raise ValueError("License key is required")

    @classmethod
    def create(
        cls,
        product_id: int,
        email: str,
        license_key: str,
        valid_until: Optional[datetime] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            product_id: Product ID
            email: Purchaser email
            license_key: License key
            valid_until: Optional expiration datetime (None = never expires)

        Returns:
            License entity instance
        """
        now = timezone.now()
        return cls(
            id=None,
            product_id=product_id,
            email=email,
            license_key=license_key,
            valid_until=valid_until,
            created_at=now,
            updated_at=now,
        )

    @property
    def never_expires(self) -> bool:
        return self.valid_until is None

    def is_valid(self, now: datetime) -> bool:
        """
        Check if license is valid at ``now``.

        A license is valid up to, but not including, ``valid_until``.

        Args:
            now: Validation time

        Returns:
            True if the license never expires or expires strictly after now
        """
        if self.never_expires:
            return True
        return self.valid_until > now
