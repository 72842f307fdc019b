"""
EntitlementRequest query.

The parameter set of an ``info`` or ``get`` call.
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from core.domain.exceptions import MalformedRequestError
from core.domain.value_objects import ApiAction

PRODUCT_PARAM = "p"
EMAIL_PARAM = "e"
LICENSE_KEY_PARAM = "l"
REQUIRED_PARAMS = (PRODUCT_PARAM, EMAIL_PARAM, LICENSE_KEY_PARAM)


@dataclass(frozen=True)
class EntitlementRequest:
    """Query to validate a license and run an entitlement action."""

    action: ApiAction
    product_slug: str
    email: str
    license_key: str

    def __repr__(self) -> str:
        # Keep the email and key out of tracebacks and debug output
        return f"EntitlementRequest(action={self.action}, product_slug={self.product_slug!r})"

    @classmethod
    def from_params(cls, action: ApiAction, params: Mapping[str, object]) -> "EntitlementRequest":
        """
        Build a request from raw API parameters.

        Args:
            action: Parsed API action
            params: Request parameters (``p``, ``e``, ``l``)

        Returns:
            EntitlementRequest

        Raises:
            MalformedRequestError: If any required parameter is missing
        """
        values = {name: _param(params, name) for name in REQUIRED_PARAMS}
        if any(value is None for value in values.values()):
            raise MalformedRequestError()

        return cls(
            action=action,
            product_slug=values[PRODUCT_PARAM],
            email=values[EMAIL_PARAM],
            license_key=values[LICENSE_KEY_PARAM],
        )


def _param(params: Mapping[str, object], name: str) -> Optional[str]:
    # Empty strings count as present
    value = params.get(name)
    if not isinstance(value, str):
        return None
    return value
