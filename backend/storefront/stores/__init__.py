"""
Stores - execute Actions against the network and local storage
"""
from storefront.stores.base import Store
from storefront.stores.order_store import OrderStore
from storefront.stores.order_note_store import OrderNoteStore
from storefront.stores.order_stats_store import OrderStatsStore

__all__ = [
    'Store',
    'OrderStore',
    'OrderNoteStore',
    'OrderStatsStore',
]
