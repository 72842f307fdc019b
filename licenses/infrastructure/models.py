"""
License model.
"""
from django.db import models


class License(models.Model):
    """
    A license granting one purchaser access to one product.

    ``valid_until`` is NULL for licenses that never expire.
    """

    product = models.ForeignKey(
        "products.Product", on_delete=models.CASCADE, related_name="licenses"
    )
    license_key = models.CharField(max_length=48)
    email = models.CharField(max_length=48)
    valid_until = models.DateTimeField(
        null=True, blank=True, help_text="Leave empty for a license that never expires"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product_licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["product", "email", "license_key"]),
            models.Index(fields=["valid_until"]),
        ]

    def __str__(self):
        return f"{self.email} - {self.product_id}"
