"""
Unit tests for Product domain entity.
"""
from dataclasses import replace

import pytest

from core.domain.value_objects import ProductSlug
from products.domain.product import Product, ProductStatus


class TestProduct:
    """Tests for Product entity."""

    def test_published(self, sample_product):
        """Test published product."""
        assert sample_product.is_published() is True

    def test_draft(self, sample_product):
        """Test draft product is not published."""
        draft = replace(sample_product, status=ProductStatus.DRAFT)
        assert draft.is_published() is False

    def test_description_url(self, sample_product):
        """Test description URL is the permalink pinned to the version."""
        assert sample_product.description_url == "https://shop.example.com/products/acme-seo/#v=2.1.0"

    def test_description_url_without_version(self, sample_product):
        """Test description URL with an empty version."""
        product = replace(sample_product, version="")
        assert product.description_url == "https://shop.example.com/products/acme-seo/#v="

    def test_has_download(self, sample_product):
        """Test file location detection."""
        assert sample_product.has_download() is True
        assert replace(sample_product, file_name="").has_download() is False
        assert replace(sample_product, file_bucket="").has_download() is False

    def test_empty_title_rejected(self):
        """Test empty title is rejected."""
        with pytest.raises(ValueError, match="title cannot be empty"):
            Product(id=1, slug=ProductSlug("acme"), title="  ", status=ProductStatus.PUBLISH)

    def test_status_values(self):
        """Test status values match stored values."""
        assert ProductStatus("publish") is ProductStatus.PUBLISH
        assert str(ProductStatus.DRAFT) == "draft"
