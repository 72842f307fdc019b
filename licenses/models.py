"""
Model registration for the licenses app.
"""
from licenses.infrastructure.models import License  # noqa: F401
