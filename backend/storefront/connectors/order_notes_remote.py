"""
Order notes endpoints: sites/{site_id}/orders/{order_id}/notes
"""
from typing import List

from storefront.connectors.network import Request
from storefront.connectors.remote import Remote
from storefront.domain.order_note import OrderNote
from storefront.mappers.order_note_mapper import OrderNoteMapper, OrderNotesMapper


class OrderNotesRemote(Remote):

    async def load_order_notes(self, site_id: int, order_id: int) -> List[OrderNote]:
        request = Request('GET', f'sites/{site_id}/orders/{order_id}/notes')
        return await self.enqueue(request, OrderNotesMapper(site_id=site_id, order_id=order_id))

    async def add_order_note(self, site_id: int, order_id: int, is_customer_note: bool, note: str) -> OrderNote:
        """
        Create a note on an order

        Args:
            is_customer_note: True to notify the customer, False for a private note
            note: Note text
        """
        request = Request(
            'POST',
            f'sites/{site_id}/orders/{order_id}/notes',
            body={'note': note, 'customer_note': is_customer_note},
        )
        return await self.enqueue(request, OrderNoteMapper(site_id=site_id, order_id=order_id))
