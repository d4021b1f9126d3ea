"""
Order note actions
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

from storefront.actions.base import Action
from storefront.domain.order_note import OrderNote


class OrderNoteAction(Action):
    """Order note family"""


@dataclass
class RetrieveOrderNotes(OrderNoteAction):
    site_id: int
    order_id: int
    on_completion: Callable[[Optional[List[OrderNote]], Optional[Exception]], None]


@dataclass
class AddOrderNote(OrderNoteAction):
    """
    Add a note to an order

    is_customer_note=True notifies the customer; False keeps it private.
    """

    site_id: int
    order_id: int
    is_customer_note: bool
    note: str
    on_completion: Callable[[Optional[OrderNote], Optional[Exception]], None]
