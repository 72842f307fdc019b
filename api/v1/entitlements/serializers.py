"""
Serializers for Entitlement API endpoints.
"""

from rest_framework import serializers


class ProductInfoResponseSerializer(serializers.Serializer):
    """Serializer for the ``info`` action response."""

    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    version = serializers.CharField(allow_blank=True)
    tested = serializers.CharField(allow_blank=True)
    author = serializers.CharField(allow_blank=True)
    last_updated = serializers.CharField(allow_blank=True)
    banner_low = serializers.CharField(allow_blank=True)
    banner_high = serializers.CharField(allow_blank=True)
    package_url = serializers.CharField()
    description_url = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    """Serializer for error responses."""

    error = serializers.CharField()


class EntitlementParamsSerializer(serializers.Serializer):
    """Serializer describing the entitlement request parameters."""

    p = serializers.CharField(help_text="Product slug")
    e = serializers.CharField(help_text="Purchaser email")
    l = serializers.CharField(help_text="License key")  # noqa: E741
