"""
License store port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licenses.domain.license import License


class LicenseStore(ABC):
    """
    Abstract store of License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Concurrent lookups must see consistent reads; the entitlement
    API takes no locks of its own.
    """

    @abstractmethod
    async def find(self, product_id: int, email: str, license_key: str) -> Optional[License]:
        """
        Find a license by exact match on all three fields.

        Args:
            product_id: Internal product ID
            email: Purchaser email
            license_key: License key

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def save(self, license: License) -> License:
        """
        Save a license entity.

        Used by administrative tooling only; the entitlement API never writes.

        Args:
            license: License entity to save

        Returns:
            Saved license entity (with its assigned ID)
        """
        pass
