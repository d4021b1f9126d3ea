"""
Order mappers

The order endpoints don't return the site ID, so it is injected via the
validation context.
"""
from dataclasses import dataclass
from typing import List

from storefront.core.exceptions import DecodingError
from storefront.domain.order import Order
from storefront.mappers.base import unwrap_envelope, validate_entity


@dataclass(frozen=True)
class OrderMapper:
    """Single order (retrieve / update endpoints)"""

    site_id: int

    def map(self, response: bytes) -> Order:
        payload = unwrap_envelope(response)
        return validate_entity(Order, payload, context={"site_id": self.site_id})


@dataclass(frozen=True)
class OrderListMapper:
    """List of orders (orders endpoint)"""

    site_id: int

    def map(self, response: bytes) -> List[Order]:
        payload = unwrap_envelope(response)
        if not isinstance(payload, list):
            raise DecodingError("Expected a list of orders")
        return [validate_entity(Order, item, context={"site_id": self.site_id}) for item in payload]
