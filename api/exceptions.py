"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error leaves the API as ``{"error": "<message>"}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    MethodNotAllowed,
    NotAcceptable,
    ParseError,
    UnsupportedMediaType,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ActionExecutionError,
    DomainException,
    MalformedRequestError,
    UnknownActionError,
)
from licenses.application.dto.entitlement_dto import ErrorResponse

logger = logging.getLogger(__name__)

# Framework errors reuse the entitlement API messages
FRAMEWORK_ERROR_MESSAGES = {
    MethodNotAllowed: UnknownActionError.default_message,
    ParseError: MalformedRequestError.default_message,
    UnsupportedMediaType: MalformedRequestError.default_message,
    NotAcceptable: MalformedRequestError.default_message,
}


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, Http404):
        response = Response({"error": "Resource not found"}, status=status.HTTP_404_NOT_FOUND)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        response.data = {"error": _framework_error_message(exc)}
    else:
        response = _handle_unexpected_exception(exc, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", None) or getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    error = ErrorResponse.from_exception(exc)
    logger.warning("Domain exception: %s", error.code, extra={"trace_id": trace_id})
    return Response(error.to_payload(), status=error.status_code)


def _handle_unexpected_exception(exc: Exception, trace_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions without leaking their text."""
    logger.error("Unexpected error: %s", type(exc).__name__, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        {"error": ActionExecutionError.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _framework_error_message(exc: APIException) -> str:
    """Client message for a framework error."""
    for exc_class, message in FRAMEWORK_ERROR_MESSAGES.items():
        if isinstance(exc, exc_class):
            return message
    detail = exc.detail if isinstance(exc.detail, str) else exc.default_detail
    return str(detail)
