"""
Connectors - network transport and Remotes for the storefront REST API
"""
from storefront.connectors.network import HttpxNetwork, Network, Request
from storefront.connectors.remote import Remote
from storefront.connectors.orders_remote import OrdersRemote
from storefront.connectors.order_notes_remote import OrderNotesRemote
from storefront.connectors.order_stats_remote import OrderStatsRemote

__all__ = [
    'HttpxNetwork',
    'Network',
    'Request',
    'Remote',
    'OrdersRemote',
    'OrderNotesRemote',
    'OrderStatsRemote',
]
