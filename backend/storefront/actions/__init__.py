"""
Actions - one dataclass per operation, grouped by family
"""
from storefront.actions.base import Action, Completion
from storefront.actions.order_actions import (
    OrderAction,
    ResetStoredOrders,
    RetrieveOrder,
    SynchronizeOrders,
    UpdateOrderStatus,
)
from storefront.actions.order_note_actions import AddOrderNote, OrderNoteAction, RetrieveOrderNotes
from storefront.actions.order_stats_actions import (
    OrderStatsAction,
    RetrieveOrderStats,
    RetrieveSiteVisitStats,
    RetrieveTopEarnerStats,
)

__all__ = [
    'Action',
    'Completion',
    'OrderAction',
    'SynchronizeOrders',
    'RetrieveOrder',
    'UpdateOrderStatus',
    'ResetStoredOrders',
    'OrderNoteAction',
    'RetrieveOrderNotes',
    'AddOrderNote',
    'OrderStatsAction',
    'RetrieveOrderStats',
    'RetrieveSiteVisitStats',
    'RetrieveTopEarnerStats',
]
