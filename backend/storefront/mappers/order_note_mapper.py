"""
Order note mappers

Site and parent order IDs are injected; the notes endpoints omit both.
"""
from dataclasses import dataclass
from typing import List

from storefront.core.exceptions import DecodingError
from storefront.domain.order_note import OrderNote
from storefront.mappers.base import unwrap_envelope, validate_entity


@dataclass(frozen=True)
class OrderNoteMapper:
    """Single note (add note endpoint)"""

    site_id: int
    order_id: int

    def map(self, response: bytes) -> OrderNote:
        payload = unwrap_envelope(response)
        return validate_entity(OrderNote, payload, context=self._context())

    def _context(self) -> dict:
        return {"site_id": self.site_id, "order_id": self.order_id}


@dataclass(frozen=True)
class OrderNotesMapper(OrderNoteMapper):
    """All notes of an order"""

    def map(self, response: bytes) -> List[OrderNote]:
        payload = unwrap_envelope(response)
        if not isinstance(payload, list):
            raise DecodingError("Expected a list of order notes")
        context = self._context()
        return [validate_entity(OrderNote, item, context=context) for item in payload]
