"""
Entitlement DTOs for API responses.
"""
from dataclasses import asdict, dataclass
from typing import Dict, Union

from core.domain.exceptions import DomainException, InfrastructureError

LAST_UPDATED_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class ProductInfoResponse:
    """DTO for the ``info`` action."""

    name: str
    description: str
    version: str
    tested: str
    author: str
    last_updated: str
    banner_low: str
    banner_high: str
    package_url: str
    description_url: str

    def to_payload(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class DownloadRedirectResponse:
    """DTO for the ``get`` action: a redirect, not a JSON body."""

    url: str
    status_code: int = 302


@dataclass(frozen=True)
class ErrorResponse:
    """DTO for every failed request."""

    message: str
    code: str
    status_code: int

    @classmethod
    def from_exception(cls, exc: DomainException) -> "ErrorResponse":
        """
        Build the client-facing error for a domain exception.

        Infrastructure failures only expose their public message.
        """
        message = exc.public_message if isinstance(exc, InfrastructureError) else exc.message
        return cls(message=message, code=exc.code, status_code=exc.status_code)

    def to_payload(self) -> Dict[str, str]:
        return {"error": self.message}


EntitlementResponse = Union[ProductInfoResponse, DownloadRedirectResponse, ErrorResponse]
