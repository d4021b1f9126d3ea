"""
Order Domain Models

Represents a storefront order as returned by the remote API and as cached
in local storage.

Author: TM3
Date: 2026-10-19
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.domain.base import SiteScopedModel
from storefront.domain.dates import parse_date_time


class OrderStatus(str, Enum):
    """Built-in order statuses. Stores may define custom ones."""

    PENDING = "pending"
    PROCESSING = "processing"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    FAILED = "failed"

    @classmethod
    def from_raw(cls, raw: str) -> Optional["OrderStatus"]:
        """Known status for a raw value, None for custom statuses"""
        try:
            return cls(raw)
        except ValueError:
            return None


class Address(BaseModel):
    """Billing or shipping address"""

    first_name: str = ""
    last_name: str = ""
    company: Optional[str] = None
    address_1: str = ""
    address_2: Optional[str] = None
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class OrderItem(BaseModel):
    """
    Order line item

    Fields:
        item_id: Line item ID (remote 'id')
        name: Product name at order time
        product_id / variation_id: Catalog references
        quantity: Units ordered
        price: Unit price
        sku: Product SKU at order time
        subtotal / subtotal_tax: Before discounts
        total / total_tax: After discounts
    """

    item_id: int = Field(..., alias="id", description="Line item ID")
    name: str = Field(..., description="Product name at order time")
    product_id: int = Field(0, description="Product catalog ID")
    variation_id: int = Field(0, description="Variation ID (0 when not a variation)")
    quantity: int = Field(..., description="Quantity ordered")
    price: Decimal = Field(Decimal("0"), description="Price per unit")
    sku: Optional[str] = Field(None, description="Product SKU")
    subtotal: Decimal = Field(Decimal("0"), description="Subtotal before discounts")
    subtotal_tax: Decimal = Field(Decimal("0"), description="Subtotal tax")
    total: Decimal = Field(Decimal("0"), description="Line total")
    total_tax: Decimal = Field(Decimal("0"), description="Line tax")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class OrderCouponLine(BaseModel):
    """Coupon applied to an order"""

    coupon_id: int = Field(..., alias="id")
    code: str
    discount: Decimal = Decimal("0")
    discount_tax: Decimal = Decimal("0")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class Order(SiteScopedModel):
    """
    Order domain model

    Identity is (site_id, order_id). site_id is injected by the mapper since
    the API payload doesn't carry it.
    """

    site_id: int = Field(..., description="Site the order belongs to")
    order_id: int = Field(..., alias="id", description="Remote order ID")
    parent_id: int = Field(0, description="Parent order ID (refunds)")
    number: str = Field(..., description="Human readable order number")
    status: str = Field(..., description="Raw order status")
    currency: str = Field("", description="ISO currency code")
    customer_note: Optional[str] = Field(None, description="Note left by the customer at checkout")

    date_created: datetime = Field(..., alias="date_created_gmt")
    date_modified: Optional[datetime] = Field(None, alias="date_modified_gmt")
    date_paid: Optional[datetime] = Field(None, alias="date_paid_gmt")

    discount_total: Decimal = Decimal("0")
    discount_tax: Decimal = Decimal("0")
    shipping_total: Decimal = Decimal("0")
    shipping_tax: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    total_tax: Decimal = Decimal("0")
    payment_method_title: str = ""

    billing_address: Optional[Address] = Field(None, alias="billing")
    shipping_address: Optional[Address] = Field(None, alias="shipping")
    items: List[OrderItem] = Field(default_factory=list, alias="line_items")
    coupons: List[OrderCouponLine] = Field(default_factory=list, alias="coupon_lines")

    @field_validator("date_created", "date_modified", "date_paid", mode="before")
    @classmethod
    def _parse_dates(cls, value):
        return parse_date_time(value)

    @field_validator("number", mode="before")
    @classmethod
    def _number_as_string(cls, value):
        # Some stores send the order number as an int
        return str(value) if value is not None else value

    @property
    def known_status(self) -> Optional[OrderStatus]:
        return OrderStatus.from_raw(self.status)

    @property
    def item_count(self) -> int:
        """Total quantity across line items"""
        return sum(item.quantity for item in self.items)

    @property
    def is_paid(self) -> bool:
        return self.date_paid is not None
