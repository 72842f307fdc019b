"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.domain.exceptions import UnknownActionError


@dataclass(frozen=True)
class ProductSlug:
    """Product slug value object."""

    value: str

    def __post_init__(self):
        """Validate slug format."""
        if not self.value:
            raise ValueError("Product slug cannot be empty")
        if not self.value.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid product slug format: {self.value}")

    def __str__(self) -> str:
        """Return slug as string."""
        return self.value


class ApiAction(Enum):
    """Actions supported by the entitlement API."""

    INFO = "info"
    GET = "get"

    def __str__(self) -> str:
        """Return action as string."""
        return self.value

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ApiAction":
        """
        Resolve a raw action name.

        Args:
            raw: Action name from the request path (may be None)

        Returns:
            Matching ApiAction

        Raises:
            UnknownActionError: If the name is missing or not supported
        """
        try:
            return cls(raw)
        except ValueError:
            raise UnknownActionError() from None


class ValidationResult(Enum):
    """Outcome of license validation. Deliberately binary."""

    VALID = "valid"
    INVALID = "invalid"

    def __str__(self) -> str:
        """Return result as string."""
        return self.value
