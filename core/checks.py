"""
Django system checks for license manager configuration.
"""

from django.core.checks import Warning, register

from storage.infrastructure.credentials import StorageCredentials


@register()
def storage_credentials_check(app_configs, **kwargs):
    """Warn when downloads cannot be signed because credentials are missing."""
    if StorageCredentials.from_settings().is_configured():
        return []
    return [
        Warning(
            "Object storage credentials are not configured; "
            "'get' requests will fail until they are.",
            hint=(
                "Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY in the environment "
                "or in settings.LICENSE_MANAGER."
            ),
            id="license_manager.W001",
        )
    ]
