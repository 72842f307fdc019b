"""
Base Django settings for LicenseManagerService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "django-insecure-9k#2v@l7q!m0x$w4r^8e1t(z5c)3y_u6n-o&p*s+h2j%b4a!f"

# Application definition
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "LicenseManagerService.apps.LicenseManagerServiceConfig",
    "core",
    "products",
    "licenses",
    "storage",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
]

ROOT_URLCONF = "LicenseManagerService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "LicenseManagerService.wsgi.application"

# Time budget for each catalog, license store or storage call
CALL_TIMEOUT_SECONDS = float(os.environ.get("LICENSE_MANAGER_CALL_TIMEOUT", "5"))

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
# Postgres cancels any statement running past the call budget
POSTGRES_OPTIONS = {
    "connect_timeout": max(1, int(CALL_TIMEOUT_SECONDS)),
    "options": f"-c statement_timeout={int(CALL_TIMEOUT_SECONDS * 1000)}",
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": "license_manager",
        "USER": "postgres",
        "PASSWORD": "postgres",
        "HOST": "localhost",
        "PORT": "5432",
        "OPTIONS": POSTGRES_OPTIONS,
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "api.renderers.NewlineJSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "License Manager API",
    "DESCRIPTION": (
        "License validation and entitlement API. "
        "Returns product update information or redirects to a "
        "short-lived download URL for holders of a valid license."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "TAGS": [
        {"name": "Entitlement API", "description": "License-gated product info and downloads"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# License manager options. Storage credentials are the "settings store"
# consumed by storage.infrastructure.credentials.
LICENSE_MANAGER = {
    "AWS_ACCESS_KEY_ID": os.environ.get("AWS_ACCESS_KEY_ID", ""),
    "AWS_SECRET_ACCESS_KEY": os.environ.get("AWS_SECRET_ACCESS_KEY", ""),
    "AWS_REGION": os.environ.get("AWS_REGION", "us-east-1"),
    "AWS_S3_ENDPOINT_URL": os.environ.get("AWS_S3_ENDPOINT_URL") or None,
    "CALL_TIMEOUT_SECONDS": CALL_TIMEOUT_SECONDS,
    "PRODUCT_PAGE_URL": os.environ.get("PRODUCT_PAGE_URL", "/products/{slug}/"),
}

# Observability
OBSERVABILITY_ENABLED = os.environ.get("OBSERVABILITY_ENABLED", "false").lower() == "true"

LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
