"""
Order actions
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

from storefront.actions.base import Action
from storefront.domain.order import Order


class OrderAction(Action):
    """Order family"""


@dataclass
class SynchronizeOrders(OrderAction):
    """Fetch one page of orders and upsert them"""

    site_id: int
    on_completion: Callable[[Optional[List[Order]], Optional[Exception]], None]
    page: int = 1
    page_size: int = 25
    status: Optional[str] = None


@dataclass
class RetrieveOrder(OrderAction):
    site_id: int
    order_id: int
    on_completion: Callable[[Optional[Order], Optional[Exception]], None]


@dataclass
class UpdateOrderStatus(OrderAction):
    """Change an order's status remotely, then mirror it locally"""

    site_id: int
    order_id: int
    status: str
    on_completion: Callable[[Optional[Order], Optional[Exception]], None]


@dataclass
class ResetStoredOrders(OrderAction):
    """Drop every cached order (and its notes). No network call."""

    on_completion: Callable[[Optional[int], Optional[Exception]], None]
    site_id: Optional[int] = None
