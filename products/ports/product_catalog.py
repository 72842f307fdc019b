"""
Product catalog port (interface).

This defines the contract for product lookups.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from products.domain.product import Product


class ProductCatalog(ABC):
    """
    Abstract read-only catalog of Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_published(self, slug: str) -> Optional[Product]:
        """
        Find a published product by slug.

        Args:
            slug: Product slug (the public identifier, not the numeric id)

        Returns:
            Product entity or None if no published product matches
        """
        pass
