"""
OrderNoteStore - order notes family
"""
import asyncio
from typing import Optional

from storefront.actions.base import Action
from storefront.actions.order_note_actions import AddOrderNote, OrderNoteAction, RetrieveOrderNotes
from storefront.connectors.order_notes_remote import OrderNotesRemote
from storefront.repositories.order_repository import OrderRepository
from storefront.stores.base import Store


class OrderNoteStore(Store):

    def __init__(self, dispatcher, storage, network):
        self.remote = OrderNotesRemote(network)
        self.repository = OrderRepository(storage)
        super().__init__(dispatcher, storage, network)

    def register_supported_actions(self, dispatcher) -> None:
        dispatcher.register(self, OrderNoteAction)

    def on_action(self, action: Action) -> Optional[asyncio.Task]:
        if isinstance(action, RetrieveOrderNotes):
            return self._schedule(
                action,
                lambda: self.remote.load_order_notes(action.site_id, action.order_id),
                lambda notes: self.repository.upsert_notes(action.site_id, action.order_id, notes),
            )
        if isinstance(action, AddOrderNote):
            return self._schedule(
                action,
                lambda: self.remote.add_order_note(
                    action.site_id, action.order_id, action.is_customer_note, action.note
                ),
                self.repository.upsert_note,
            )

        self._ignore(action)
        return None
