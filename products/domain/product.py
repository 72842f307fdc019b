"""
Product domain entity.

This is the core domain entity representing a product in the catalog.
It is read-only to the entitlement API and independent of infrastructure.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.domain.value_objects import ProductSlug


class ProductStatus(Enum):
    """Publication status of a catalog product."""

    DRAFT = "draft"
    PUBLISH = "publish"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Holds the metadata served by the ``info`` action and the storage
    location of the distributable file served by ``get``.
    """

    id: int
    slug: ProductSlug
    title: str
    status: ProductStatus
    description: str = ""
    version: str = ""
    tested: str = ""
    author: str = ""
    last_updated: Optional[datetime] = None
    banner_low: str = ""
    banner_high: str = ""
    file_bucket: str = ""
    file_name: str = ""
    permalink: str = ""

    def __post_init__(self):
        """Validate product entity."""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Product title cannot be empty")
        if len(self.title) > 255:
            raise ValueError("Product title too long")

    def is_published(self) -> bool:
        """Only published products resolve through the entitlement API."""
        return self.status is ProductStatus.PUBLISH

    def has_download(self) -> bool:
        """Check whether a distributable file is configured."""
        return bool(self.file_bucket and self.file_name)

    @property
    def description_url(self) -> str:
        """Product page link pinned to the current version."""
        return f"{self.permalink}#v={self.version}"
