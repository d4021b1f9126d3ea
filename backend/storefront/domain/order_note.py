"""
Order Note Domain Model

Notes are immutable once created and belong to a single order.
"""
from datetime import datetime

from pydantic import Field, field_validator

from storefront.domain.base import SiteScopedModel
from storefront.domain.dates import parse_date_time


class OrderNote(SiteScopedModel):
    """
    Note attached to an order

    Fields:
        site_id / order_id: Parent order identity (injected by the mapper)
        note_id: Remote note ID
        date_created: Creation timestamp (GMT)
        note: Note text (may contain HTML)
        is_customer_note: True when the customer can see it, False for private notes
        author: Who wrote it ('system' for automatic notes)
    """

    site_id: int
    order_id: int
    note_id: int = Field(..., alias="id")
    date_created: datetime = Field(..., alias="date_created_gmt")
    note: str = ""
    is_customer_note: bool = Field(False, alias="customer_note")
    author: str = ""

    @field_validator("date_created", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date_time(value)

    @property
    def is_system_note(self) -> bool:
        return self.author in ("", "system")
