"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
import secrets
import string
from datetime import datetime

from core.domain.value_objects import ValidationResult
from licenses.ports.license_store import LicenseStore

logger = logging.getLogger(__name__)

LICENSE_KEY_ALPHABET = string.ascii_letters + string.digits
LICENSE_KEY_LENGTH = 24


class LicenseKeyGenerator:
    """Domain service for license key generation."""

    @staticmethod
    def generate(length: int = LICENSE_KEY_LENGTH) -> str:
        """
        Generate a random alphanumeric license key.

        Args:
            length: Key length (the license table stores at most 48)

        Returns:
            Generated license key string
        """
        if length < 1 or length > 48:
            raise ValueError("License key length must be between 1 and 48")
        return "".join(secrets.choice(LICENSE_KEY_ALPHABET) for _ in range(length))


class LicenseValidator:
    """
    Domain service for license validation.

    The result is binary on purpose: an unknown key, a key registered to
    another email and an expired license all come back INVALID.
    """

    def __init__(self, license_store: LicenseStore):
        """Initialize validator with the license store."""
        self.license_store = license_store

    async def validate(
        self, product_id: int, email: str, license_key: str, now: datetime
    ) -> ValidationResult:
        """
        Validate a license for a product.

        Args:
            product_id: Internal product ID
            email: Purchaser email
            license_key: License key
            now: Validation time

        Returns:
            ValidationResult.VALID or ValidationResult.INVALID
        """
        license = await self.license_store.find(product_id, email, license_key)
        if license is None:
            logger.debug("No license matched for product %s", product_id)
            return ValidationResult.INVALID

        if not license.is_valid(now):
            logger.debug("License %s for product %s has expired", license.id, product_id)
            return ValidationResult.INVALID

        return ValidationResult.VALID
