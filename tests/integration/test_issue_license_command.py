"""
Integration tests for the issue_license management command.
"""

from datetime import datetime
from io import StringIO

import pytest
from django.core.management import CommandError, call_command
from django.utils import timezone

from licenses.infrastructure.models import License as LicenseModel


@pytest.mark.django_db
@pytest.mark.integration
class TestIssueLicenseCommand:
    """Integration tests for issue_license."""

    def test_issue_generated_key(self, db_product):
        """Test issuing a perpetual license with a generated key."""
        out = StringIO()

        call_command("issue_license", product="acme-seo", email="buyer@example.com", stdout=out)

        license = LicenseModel.objects.get()
        assert license.product_id == db_product.id
        assert license.email == "buyer@example.com"
        assert len(license.license_key) == 24
        assert license.valid_until is None
        assert license.license_key in out.getvalue()
        assert "expires: never" in out.getvalue()

    def test_issue_with_key_and_expiry(self, db_product):
        """Test issuing a license with an explicit key and expiry date."""
        call_command(
            "issue_license",
            product="acme-seo",
            email="buyer@example.com",
            key="CUSTOM-KEY-0001",
            valid_until="2030-01-31",
            stdout=StringIO(),
        )

        license = LicenseModel.objects.get()
        assert license.license_key == "CUSTOM-KEY-0001"
        expected = timezone.make_aware(datetime(2030, 1, 31))
        assert license.valid_until == expected

    def test_unknown_product(self, db):
        """Test issuing for an unknown product fails."""
        with pytest.raises(CommandError, match="does not exist"):
            call_command("issue_license", product="nope", email="a@example.com")

    def test_email_too_long(self, db_product):
        """Test the email must fit the license table."""
        with pytest.raises(CommandError, match="Email"):
            call_command("issue_license", product="acme-seo", email="a" * 40 + "@example.com")

    def test_invalid_expiry(self, db_product):
        """Test an unparseable expiry."""
        with pytest.raises(CommandError, match="Invalid --valid-until"):
            call_command(
                "issue_license", product="acme-seo", email="a@example.com", valid_until="soon"
            )
        assert LicenseModel.objects.count() == 0
