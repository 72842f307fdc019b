"""
Django management command to issue a license for a product.
"""

import logging
from datetime import datetime, time

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from licenses.domain.license import License
from licenses.domain.services import LicenseKeyGenerator
from licenses.infrastructure.repositories.django_license_store import DjangoLicenseStore
from products.infrastructure.models import Product as ProductModel

logger = logging.getLogger(__name__)


def parse_valid_until(raw: str) -> datetime:
    """
    Parse an expiry given as a date or datetime.

    A bare date means midnight at the start of that day, in the
    current time zone.
    """
    parsed = parse_datetime(raw)
    if parsed is None:
        day = parse_date(raw)
        if day is None:
            raise CommandError(f"Invalid --valid-until value: {raw!r}")
        parsed = datetime.combine(day, time.min)
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


class Command(BaseCommand):
    """Command to create a license record."""

    help = "Issue a license key for a product and purchaser email"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--product", required=True, help="Product slug")
        parser.add_argument("--email", required=True, help="Purchaser email")
        parser.add_argument(
            "--valid-until",
            help="Expiry date (YYYY-MM-DD) or datetime; omit for a license that never expires",
        )
        parser.add_argument("--key", help="Use this license key instead of generating one")

    def handle(self, *args, **options):
        """Execute the command."""
        # pylint: disable=no-member
        product = ProductModel.objects.filter(slug=options["product"]).first()
        if product is None:
            raise CommandError(f"Product {options['product']!r} does not exist")

        email = options["email"].strip()
        if not email or len(email) > 48:
            raise CommandError("Email must be between 1 and 48 characters")

        license_key = options["key"] or LicenseKeyGenerator.generate()
        if len(license_key) > 48:
            raise CommandError("License key must be at most 48 characters")

        valid_until = None
        if options["valid_until"]:
            valid_until = parse_valid_until(options["valid_until"])

        license = License.create(
            product_id=product.id,
            email=email,
            license_key=license_key,
            valid_until=valid_until,
        )
        saved = async_to_sync(DjangoLicenseStore().save)(license)
        logger.info("Issued license %s for product %s", saved.id, product.slug)

        expiry = saved.valid_until.isoformat() if saved.valid_until else "never"
        self.stdout.write(
            self.style.SUCCESS(  # pylint: disable=no-member
                f"License {saved.id} issued for {product.slug}: {saved.license_key} "
                f"(expires: {expiry})"
            )
        )
