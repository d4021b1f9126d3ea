"""
Modelos de base de datos
"""
from .order import Order, OrderItem, OrderCoupon, OrderNote

__all__ = [
    "Order",
    "OrderItem",
    "OrderCoupon",
    "OrderNote",
]
