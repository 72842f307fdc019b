"""
Django implementation of ProductCatalog port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import Optional

from asgiref.sync import sync_to_async

from core.domain.value_objects import ProductSlug
from core.infrastructure.database import bounded_query
from products.domain.product import Product, ProductStatus
from products.infrastructure.models import Product as ProductModel
from products.ports.product_catalog import ProductCatalog


class DjangoProductCatalog(ProductCatalog):
    """
    Django ORM implementation of ProductCatalog.

    This adapter:
    1. Converts Django models to domain entities
    2. Hides products that are not published
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            slug=ProductSlug(model.slug),
            title=model.title,
            status=ProductStatus(model.status),
            description=model.description,
            version=model.version,
            tested=model.tested,
            author=model.author,
            last_updated=model.last_updated,
            banner_low=model.banner_low,
            banner_high=model.banner_high,
            file_bucket=model.file_bucket,
            file_name=model.file_name,
            permalink=model.permalink,
        )

    @sync_to_async
    def find_published(self, slug: str) -> Optional[Product]:
        """
        Find a published product by slug.

        Args:
            slug: Product slug

        Returns:
            Product entity or None if not found or not published

        Raises:
            CollaboratorTimeoutError: If the query hits the statement timeout
        """
        with bounded_query("product catalog"):
            model = ProductModel.objects.filter(slug=slug).first()
        if model is None:
            return None

        product = self._to_domain(model)
        if not product.is_published():
            return None
        return product
