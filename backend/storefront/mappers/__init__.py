"""
Mappers - decode raw response bytes into domain entities
"""
from storefront.mappers.base import Mapper
from storefront.mappers.error_mapper import RemoteErrorMapper
from storefront.mappers.order_mapper import OrderListMapper, OrderMapper
from storefront.mappers.order_note_mapper import OrderNoteMapper, OrderNotesMapper
from storefront.mappers.stats_mapper import OrderStatsMapper, SiteVisitStatsMapper, TopEarnerStatsMapper

__all__ = [
    'Mapper',
    'RemoteErrorMapper',
    'OrderMapper',
    'OrderListMapper',
    'OrderNoteMapper',
    'OrderNotesMapper',
    'OrderStatsMapper',
    'SiteVisitStatsMapper',
    'TopEarnerStatsMapper',
]
