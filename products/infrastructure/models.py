"""
Product model.
"""
from django.conf import settings
from django.db import models


class Product(models.Model):
    """
    A product that can be licensed and downloaded (e.g., a plugin or theme).
    """

    STATUS_CHOICES = [
        ("draft", "Draft"),
        ("publish", "Published"),
    ]

    title = models.CharField(max_length=255, help_text="Product display name")
    slug = models.SlugField(max_length=100, unique=True, help_text="Public product identifier")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft")
    description = models.TextField(blank=True, default="")
    version = models.CharField(max_length=32, blank=True, default="")
    tested = models.CharField(
        max_length=32, blank=True, default="", help_text="Host version tested up to"
    )
    author = models.CharField(max_length=255, blank=True, default="")
    last_updated = models.DateTimeField(null=True, blank=True)
    banner_low = models.CharField(max_length=500, blank=True, default="")
    banner_high = models.CharField(max_length=500, blank=True, default="")
    file_bucket = models.CharField(
        max_length=255, blank=True, default="", help_text="Storage bucket of the distributable"
    )
    file_name = models.CharField(
        max_length=1024, blank=True, default="", help_text="Object name of the distributable"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["title"]
        indexes = [
            models.Index(fields=["slug", "status"]),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.slug:
            raise ValidationError("Slug is required")
        if not self.title:
            raise ValidationError("Title is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title

    @property
    def permalink(self) -> str:
        """Public product page URL."""
        template = settings.LICENSE_MANAGER.get("PRODUCT_PAGE_URL", "/products/{slug}/")
        return template.format(slug=self.slug)
