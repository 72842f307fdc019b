"""
App configuration for License Manager Service.
"""

from django.apps import AppConfig


class LicenseManagerServiceConfig(AppConfig):
    """App configuration for LicenseManagerService."""

    name = "LicenseManagerService"
    verbose_name = "License Manager Service"

    def ready(self):
        """Called when Django starts."""
        import logging
        import os

        from django.conf import settings

        # Registers the storage credentials check
        from core import checks  # noqa: F401

        if not getattr(settings, "OBSERVABILITY_ENABLED", False):
            return

        # RUN_MAIN is "false" only in the autoreloader's parent process
        if os.environ.get("RUN_MAIN") == "false":
            return

        if not hasattr(self, "_initialized"):
            from core.instrumentation import setup_opentelemetry

            logger = logging.getLogger(__name__)
            logger.info("Setting up observability...")
            setup_opentelemetry()
            self._initialized = True
            logger.info("Observability setup complete")
