"""
Domain Layer - Business Entities

Pydantic models for the entities exchanged with the storefront API and
cached in local storage.

Author: TM3
Date: 2026-10-19
"""
from storefront.domain.order import Address, Order, OrderCouponLine, OrderItem, OrderStatus
from storefront.domain.order_note import OrderNote
from storefront.domain.stats import (
    OrderStats,
    OrderStatsItem,
    SiteVisitStats,
    SiteVisitStatsItem,
    StatGranularity,
    TopEarnerStats,
    TopEarnerStatsItem,
)

__all__ = [
    'Address',
    'Order',
    'OrderCouponLine',
    'OrderItem',
    'OrderStatus',
    'OrderNote',
    'OrderStats',
    'OrderStatsItem',
    'SiteVisitStats',
    'SiteVisitStatsItem',
    'StatGranularity',
    'TopEarnerStats',
    'TopEarnerStatsItem',
]
