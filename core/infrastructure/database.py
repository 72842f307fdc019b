"""
Database utilities for the ORM adapters.
"""

import contextlib
from typing import Iterator

from django.db import OperationalError
from psycopg2 import errors as pg_errors

from core.domain.exceptions import CollaboratorTimeoutError, InfrastructureError


@contextlib.contextmanager
def bounded_query(collaborator: str) -> Iterator[None]:
    """
    Translate database failures into infrastructure errors.

    Queries are bounded server-side by ``statement_timeout`` (see the
    ``DATABASES`` options in settings); a cancelled statement surfaces as
    CollaboratorTimeoutError.

    Usage:
        with bounded_query("product catalog"):
            # ORM calls
            pass
    """
    try:
        yield
    except OperationalError as e:
        if isinstance(e.__cause__, pg_errors.QueryCanceled):
            raise CollaboratorTimeoutError(
                f"{collaborator} query exceeded the statement timeout"
            ) from e
        raise InfrastructureError(f"{collaborator} unavailable: {e}") from e
