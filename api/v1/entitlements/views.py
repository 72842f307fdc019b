"""
Entitlement API views.

These endpoints are used by installed plugins to:
- Fetch update metadata for a licensed product (``info``)
- Download the licensed package (``get``)
"""

from typing import Dict

from asgiref.sync import async_to_sync
from django.conf import settings
from django.http import HttpResponseBase, HttpResponseRedirect
from django.urls import reverse
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.entitlements.serializers import (
    EntitlementParamsSerializer,
    ErrorResponseSerializer,
    ProductInfoResponseSerializer,
)
from licenses.application.dto.entitlement_dto import (
    DownloadRedirectResponse,
    EntitlementResponse,
    ErrorResponse,
)
from licenses.application.handlers.entitlement_dispatcher import (
    DEFAULT_CALL_TIMEOUT,
    EntitlementDispatcher,
)
from licenses.application.queries.entitlement_request import (
    EMAIL_PARAM,
    LICENSE_KEY_PARAM,
    PRODUCT_PARAM,
)
from licenses.infrastructure.repositories.django_license_store import DjangoLicenseStore
from products.infrastructure.repositories.django_product_catalog import DjangoProductCatalog
from storage.infrastructure.s3_signed_url_provider import S3SignedUrlProvider

# Initialize repositories (in production, use DI container)
_product_catalog = DjangoProductCatalog()
_license_store = DjangoLicenseStore()


class EntitlementAPIView(APIView):
    """View for the license-gated ``info`` and ``get`` actions."""

    @extend_schema(
        operation_id="entitlement_action",
        summary="Run Entitlement Action",
        description=(
            "Validate the license for a product and run the requested action. "
            "``info`` returns update metadata for the product; ``get`` redirects "
            "to a download URL that stays valid for ten minutes."
        ),
        tags=["Entitlement API"],
        parameters=[
            OpenApiParameter(
                name="action",
                type=str,
                location=OpenApiParameter.PATH,
                enum=["info", "get"],
                description="API action",
            ),
            OpenApiParameter(
                name=PRODUCT_PARAM,
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Product slug",
            ),
            OpenApiParameter(
                name=EMAIL_PARAM,
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Purchaser email",
            ),
            OpenApiParameter(
                name=LICENSE_KEY_PARAM,
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="License key",
            ),
        ],
        responses={
            200: ProductInfoResponseSerializer,
            302: OpenApiResponse(description="Redirect to the package download URL"),
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
            503: ErrorResponseSerializer,
        },
    )
    def get(self, request: Request, action: str = None) -> HttpResponseBase:
        """Run an entitlement action."""
        return async_to_sync(self._handle_action)(request, action)

    @extend_schema(
        operation_id="entitlement_action_post",
        summary="Run Entitlement Action (form post)",
        description="Same as GET, with ``p``, ``e`` and ``l`` sent in the request body.",
        tags=["Entitlement API"],
        request=EntitlementParamsSerializer,
        responses={
            200: ProductInfoResponseSerializer,
            302: OpenApiResponse(description="Redirect to the package download URL"),
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def post(self, request: Request, action: str = None) -> HttpResponseBase:
        """Run an entitlement action with parameters from the body."""
        return async_to_sync(self._handle_action)(request, action)

    @staticmethod
    def _params(request: Request) -> Dict[str, object]:
        """Query string parameters, overridden by body parameters on POST."""
        params = dict(request.query_params.items())
        if request.method == "POST" and hasattr(request.data, "items"):
            params.update(request.data.items())
        return params

    async def _handle_action(self, request: Request, action: str) -> HttpResponseBase:
        """Async handler for entitlement actions."""
        options = getattr(settings, "LICENSE_MANAGER", {})
        dispatcher = EntitlementDispatcher(
            product_catalog=_product_catalog,
            license_store=_license_store,
            signed_url_provider=S3SignedUrlProvider.from_settings(),
            download_endpoint=request.build_absolute_uri(
                reverse("entitlements:api-action", kwargs={"action": "get"})
            ),
            call_timeout=float(options.get("CALL_TIMEOUT_SECONDS", DEFAULT_CALL_TIMEOUT)),
        )

        result = await dispatcher.handle(action, self._params(request))
        return self._render(result)

    def _render(self, result: EntitlementResponse) -> HttpResponseBase:
        if isinstance(result, ErrorResponse):
            response = Response(result.to_payload(), status=result.status_code)
            response.entitlement_code = result.code
            return response

        if isinstance(result, DownloadRedirectResponse):
            return HttpResponseRedirect(result.url)

        serializer = ProductInfoResponseSerializer(result.to_payload())
        return Response(serializer.data, status=status.HTTP_200_OK)
