"""
EntitlementDispatcher.

Handler for the license-gated ``info`` and ``get`` API actions.

Every request runs the same prefix (action, parameters, product, license)
before the action-specific arm. Any failure short-circuits to an error
response; nothing is retried and nothing propagates to the caller.
"""

import asyncio
import logging
import time
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Dict, Mapping, Optional, TypeVar
from urllib.parse import quote, quote_plus

from django.utils import timezone

from core.domain.exceptions import (
    ActionExecutionError,
    CollaboratorTimeoutError,
    DomainException,
    InfrastructureError,
    ProductNotFoundError,
    UnauthorizedError,
)
from core.domain.value_objects import ApiAction, ValidationResult
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import (
    entitlement_request_duration_seconds,
    entitlement_requests_total,
    signed_urls_issued_total,
)
from licenses.application.dto.entitlement_dto import (
    LAST_UPDATED_FORMAT,
    DownloadRedirectResponse,
    EntitlementResponse,
    ErrorResponse,
    ProductInfoResponse,
)
from licenses.application.queries.entitlement_request import EntitlementRequest
from licenses.domain.services import LicenseValidator
from licenses.ports.license_store import LicenseStore
from products.domain.product import Product
from products.ports.product_catalog import ProductCatalog
from storage.ports.signed_url_provider import SignedUrlProvider

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

# Fixed lifetime of issued download URLs
DOWNLOAD_URL_TTL = timedelta(minutes=10)
DEFAULT_CALL_TIMEOUT = 5.0

T = TypeVar("T")
ActionHandler = Callable[[EntitlementRequest, Product], Awaitable[EntitlementResponse]]


class EntitlementDispatcher:
    """Dispatcher for entitlement API actions."""

    def __init__(
        self,
        product_catalog: ProductCatalog,
        license_store: LicenseStore,
        signed_url_provider: SignedUrlProvider,
        download_endpoint: str,
        clock: Callable[[], datetime] = timezone.now,
        call_timeout: float = DEFAULT_CALL_TIMEOUT,
    ):
        """
        Initialize dispatcher with its collaborators.

        Args:
            product_catalog: Catalog used to resolve the ``p`` parameter
            license_store: Store queried by the license validator
            signed_url_provider: Issues download URLs for ``get``
            download_endpoint: Absolute URL of the ``get`` action, used
                to build ``package_url``
            clock: Source of the validation time
            call_timeout: Seconds allowed for each external call. Database
                calls are also bounded server-side by statement_timeout
        """
        self.product_catalog = product_catalog
        self.license_validator = LicenseValidator(license_store)
        self.signed_url_provider = signed_url_provider
        self.download_endpoint = download_endpoint
        self.clock = clock
        self.call_timeout = call_timeout

        self._action_handlers: Dict[ApiAction, ActionHandler] = {
            ApiAction.INFO: self._product_info,
            ApiAction.GET: self._download,
        }

    async def handle(self, action: Optional[str], params: Mapping[str, str]) -> EntitlementResponse:
        """
        Handle an entitlement API call.

        Args:
            action: Raw action name (``info`` or ``get``)
            params: Request parameters

        Returns:
            ProductInfoResponse, DownloadRedirectResponse or ErrorResponse
        """
        action_label = action if action in {a.value for a in ApiAction} else "unknown"
        start_time = time.monotonic()

        with tracer.start_as_current_span("entitlement_dispatch") as span:
            span.set_attribute("entitlement.action", action_label)

            try:
                response = await self._dispatch(action, params)
            except InfrastructureError as e:
                logger.error(
                    "Entitlement action failed on an external call: %s",
                    e.message,
                    extra={"error_code": e.code, "action": action_label},
                )
                response = ErrorResponse.from_exception(e)
            except DomainException as e:
                response = ErrorResponse.from_exception(e)
            except Exception:  # pylint: disable=broad-exception-caught
                logger.exception(
                    "Unexpected error executing entitlement action",
                    extra={"action": action_label},
                )
                response = ErrorResponse.from_exception(ActionExecutionError())

            outcome = response.code if isinstance(response, ErrorResponse) else "ok"
            span.set_attribute("entitlement.outcome", outcome)
            if isinstance(response, ErrorResponse) and response.status_code >= 500:
                span.set_status(Status(StatusCode.ERROR, outcome))
            else:
                span.set_status(Status(StatusCode.OK))

        entitlement_requests_total.labels(action=action_label, outcome=outcome).inc()
        entitlement_request_duration_seconds.labels(action=action_label).observe(
            time.monotonic() - start_time
        )
        return response

    async def _dispatch(
        self, action: Optional[str], params: Mapping[str, str]
    ) -> EntitlementResponse:
        """Run the shared checks, then the action arm."""
        api_action = ApiAction.parse(action)
        request = EntitlementRequest.from_params(api_action, params)

        product = await self._bounded(
            self.product_catalog.find_published(request.product_slug), "product catalog"
        )
        if product is None:
            raise ProductNotFoundError()

        result = await self._bounded(
            self.license_validator.validate(
                product.id, request.email, request.license_key, self.clock()
            ),
            "license store",
        )
        if result is not ValidationResult.VALID:
            raise UnauthorizedError()

        handler = self._action_handlers.get(api_action)
        if handler is None:
            raise ActionExecutionError()
        return await handler(request, product)

    async def _product_info(
        self, request: EntitlementRequest, product: Product
    ) -> ProductInfoResponse:
        """Collect the product metadata for the ``info`` action."""
        last_updated = (
            product.last_updated.strftime(LAST_UPDATED_FORMAT) if product.last_updated else ""
        )
        return ProductInfoResponse(
            name=product.title,
            description=product.description,
            version=product.version,
            tested=product.tested,
            author=product.author,
            last_updated=last_updated,
            banner_low=product.banner_low,
            banner_high=product.banner_high,
            package_url=self._package_url(request),
            description_url=product.description_url,
        )

    async def _download(
        self, request: EntitlementRequest, product: Product
    ) -> DownloadRedirectResponse:
        """Issue a short-lived download URL for the ``get`` action."""
        if not product.has_download():
            logger.error("Product %s has no distributable file configured", product.slug)
            raise ActionExecutionError()

        url = await self._bounded(
            self.signed_url_provider.signed_url(
                product.file_bucket, product.file_name, DOWNLOAD_URL_TTL
            ),
            "object storage",
        )
        signed_urls_issued_total.labels(bucket=product.file_bucket).inc()
        return DownloadRedirectResponse(url=url)

    def _package_url(self, request: EntitlementRequest) -> str:
        """URL of the ``get`` action for the same product, email and key."""
        return (
            f"{self.download_endpoint}"
            f"?p={quote(request.product_slug)}"
            f"&e={quote(request.email, safe='@')}"
            f"&l={quote_plus(request.license_key)}"
        )

    async def _bounded(self, call: Awaitable[T], collaborator: str) -> T:
        """Await an external call within the per-call time budget."""
        try:
            return await asyncio.wait_for(call, timeout=self.call_timeout)
        except asyncio.TimeoutError:
            raise CollaboratorTimeoutError(
                f"{collaborator} did not answer within {self.call_timeout}s"
            ) from None
