"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. Each carries the exact
client-facing message; the entitlement API depends on these
strings staying stable.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    default_message = "Error executing API action."
    default_code = "DOMAIN_ERROR"
    status_code = 400

    def __init__(self, message: str = None, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class MalformedRequestError(DomainException):
    """Raised when a required request parameter is absent."""

    default_message = "Invalid request"
    default_code = "MALFORMED_REQUEST"
    status_code = 400


class UnknownActionError(DomainException):
    """Raised when the requested API action is not supported."""

    default_message = "No such API action"
    default_code = "UNKNOWN_ACTION"
    status_code = 404


class ProductNotFoundError(DomainException):
    """Raised when a product slug does not resolve to a published product."""

    default_message = "Product not found."
    default_code = "PRODUCT_NOT_FOUND"
    status_code = 404


class UnauthorizedError(DomainException):
    """
    Raised when no license matches or the matching license has expired.

    Missing license, wrong email and expiry all share this error so the
    API cannot be used to enumerate keys or addresses.
    """

    default_message = "Invalid license or license expired."
    default_code = "UNAUTHORIZED"
    status_code = 403


class ActionExecutionError(DomainException):
    """Raised when an action handler cannot produce a result."""

    default_message = "Error executing API action."
    default_code = "ACTION_FAILED"
    status_code = 500


class InfrastructureError(ActionExecutionError):
    """
    Base exception for failures of external collaborators.

    The constructor message is internal detail for logs; clients only
    ever see ``public_message``.
    """

    default_code = "INFRASTRUCTURE_ERROR"
    status_code = 503

    @property
    def public_message(self) -> str:
        return ActionExecutionError.default_message


class CollaboratorTimeoutError(InfrastructureError):
    """Raised when a catalog, store or storage call exceeds its time budget."""

    default_message = "External call timed out"
    default_code = "COLLABORATOR_TIMEOUT"


class StorageUnavailableError(InfrastructureError):
    """Raised when the object storage provider cannot issue a signed URL."""

    default_message = "Object storage unavailable"
    default_code = "STORAGE_UNAVAILABLE"
