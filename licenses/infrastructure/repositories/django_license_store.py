"""
Django implementation of LicenseStore port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from core.infrastructure.database import bounded_query
from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_store import LicenseStore


class DjangoLicenseStore(LicenseStore):
    """
    Django ORM implementation of LicenseStore.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements the store interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            product_id=model.product_id,
            email=model.email,
            license_key=model.license_key,
            valid_until=model.valid_until,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @sync_to_async
    def find(self, product_id: int, email: str, license_key: str) -> Optional[License]:
        """
        Find a license by exact match on product, email and key.

        Keys are not unique at the data layer; the oldest match wins.

        Args:
            product_id: Internal product ID
            email: Purchaser email
            license_key: License key

        Returns:
            License entity or None if not found

        Raises:
            CollaboratorTimeoutError: If the query hits the statement timeout
        """
        with bounded_query("license store"):
            model = (
                LicenseModel.objects.filter(
                    product_id=product_id, email=email, license_key=license_key
                )
                .order_by("id")
                .first()
            )
        if model is None:
            return None
        return self._to_domain(model)

    @sync_to_async
    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        if license.id is None:
            model = LicenseModel(
                product_id=license.product_id,
                email=license.email,
                license_key=license.license_key,
                valid_until=license.valid_until,
            )
        else:
            model = LicenseModel.objects.get(id=license.id)
            model.product_id = license.product_id
            model.email = license.email
            model.license_key = license.license_key
            model.valid_until = license.valid_until
        model.save()
        return self._to_domain(model)
