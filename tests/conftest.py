"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone
from unittest.mock import AsyncMock

import pytest
from asgiref.sync import async_to_sync
from django.utils import timezone

from core.domain.value_objects import ProductSlug
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_store import DjangoLicenseStore
from products.domain.product import Product, ProductStatus
from products.infrastructure.repositories.django_product_catalog import DjangoProductCatalog

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=dt_timezone.utc)
DOWNLOAD_ENDPOINT = "https://shop.example.com/api/license-manager/get"
SIGNED_URL = (
    "https://plugins.s3.amazonaws.com/acme-seo/acme-seo-2.1.0.zip"
    "?X-Amz-Algorithm=AWS4-HMAC-SHA256&X-Amz-Expires=600"
)


@pytest.fixture
def product_catalog():
    """Fixture for ProductCatalog."""
    return DjangoProductCatalog()


@pytest.fixture
def license_store():
    """Fixture for LicenseStore."""
    return DjangoLicenseStore()


@pytest.fixture
def sample_product():
    """Fixture for a sample published Product entity."""
    return Product(
        id=7,
        slug=ProductSlug("acme-seo"),
        title="Acme SEO Pro",
        status=ProductStatus.PUBLISH,
        description="Search engine tooling for WordPress sites.",
        version="2.1.0",
        tested="6.5",
        author="Acme Plugins",
        last_updated=datetime(2024, 5, 20, 9, 30, 15, tzinfo=dt_timezone.utc),
        banner_low="https://cdn.example.com/acme-seo-772x250.png",
        banner_high="https://cdn.example.com/acme-seo-1544x500.png",
        file_bucket="plugins",
        file_name="acme-seo/acme-seo-2.1.0.zip",
        permalink="https://shop.example.com/products/acme-seo/",
    )


@pytest.fixture
def sample_license(sample_product):
    """Fixture for a sample License entity valid for another month."""
    return License(
        id=11,
        product_id=sample_product.id,
        email="buyer@example.com",
        license_key="Ab3dE5gH7jK9mN1pQ3sT5vW7",
        valid_until=FIXED_NOW + timedelta(days=30),
        created_at=FIXED_NOW - timedelta(days=335),
        updated_at=FIXED_NOW - timedelta(days=335),
    )


@pytest.fixture
def valid_params(sample_product, sample_license):
    """Request parameters matching sample_license."""
    return {
        "p": sample_product.slug.value,
        "e": sample_license.email,
        "l": sample_license.license_key,
    }


@pytest.fixture
def mock_catalog(sample_product):
    """ProductCatalog double resolving sample_product."""
    catalog = AsyncMock()
    catalog.find_published.return_value = sample_product
    return catalog


@pytest.fixture
def mock_store(sample_license):
    """LicenseStore double returning sample_license."""
    store = AsyncMock()
    store.find.return_value = sample_license
    return store


@pytest.fixture
def mock_signer():
    """SignedUrlProvider double."""
    signer = AsyncMock()
    signer.signed_url.return_value = SIGNED_URL
    return signer


@pytest.fixture
def db_product(db):
    """Fixture for a published Product saved in database."""
    from products.infrastructure.models import Product as ProductModel

    return ProductModel.objects.create(
        title="Acme SEO Pro",
        slug="acme-seo",
        status="publish",
        description="Search engine tooling for WordPress sites.",
        version="2.1.0",
        tested="6.5",
        author="Acme Plugins",
        last_updated=datetime(2024, 5, 20, 9, 30, 15, tzinfo=dt_timezone.utc),
        banner_low="https://cdn.example.com/acme-seo-772x250.png",
        banner_high="https://cdn.example.com/acme-seo-1544x500.png",
        file_bucket="plugins",
        file_name="acme-seo/acme-seo-2.1.0.zip",
    )


@pytest.fixture
def db_draft_product(db):
    """Fixture for a draft Product saved in database."""
    from products.infrastructure.models import Product as ProductModel

    return ProductModel.objects.create(
        title="Acme Forms",
        slug="acme-forms",
        status="draft",
        version="0.9.0",
        file_bucket="plugins",
        file_name="acme-forms/acme-forms-0.9.0.zip",
    )


@pytest.fixture
def db_license(db, db_product, license_store):
    """Fixture for a License saved in database, valid for another year."""
    license = License.create(
        product_id=db_product.id,
        email="buyer@example.com",
        license_key="Ab3dE5gH7jK9mN1pQ3sT5vW7",
        valid_until=timezone.now() + timedelta(days=365),
    )
    return async_to_sync(license_store.save)(license)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def now():
    """Fixed validation time."""
    return FIXED_NOW
