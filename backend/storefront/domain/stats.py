"""
Stats Domain Models

Order stats, site visit stats and top earners for a site.

The stats endpoints encode each period as a row of values aligned
positionally with a list of field names. Rows are decoded into typed records
here: every known field becomes an attribute, while the original
field_names / raw_data pair stays available for fields we don't model.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from storefront.domain.base import SiteScopedModel


class StatGranularity(str, Enum):
    """Size of each stats bucket (the API calls it 'unit')"""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class StatsItem(BaseModel):
    """
    One time bucket of a stats response

    Built from {"field_names": [...], "raw_data": [...]}. Both sequences must
    have the same length; known fields are copied onto typed attributes.
    """

    field_names: Tuple[str, ...] = Field(..., description="Field names, aligned with raw_data")
    raw_data: Tuple[Any, ...] = Field(..., description="Raw values, aligned with field_names")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _expand_row(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        field_names = data.get("field_names")
        raw_data = data.get("raw_data")
        if field_names is None or raw_data is None:
            return data
        if not all(isinstance(name, str) for name in field_names):
            raise ValueError("Stats field names must be strings")

        if len(field_names) != len(raw_data):
            raise ValueError(
                f"Stats row has {len(raw_data)} values for {len(field_names)} fields"
            )

        expanded = dict(zip(field_names, raw_data))
        typed = {name: value for name, value in expanded.items() if name in cls.model_fields}
        return {**typed, **data}

    def value_for(self, field_name: str) -> Any:
        """Raw value of a field, None when the field isn't present"""
        try:
            index = self.field_names.index(field_name)
        except ValueError:
            return None
        return self.raw_data[index]

    def as_dict(self) -> dict:
        return dict(zip(self.field_names, self.raw_data))


class OrderStatsItem(StatsItem):
    """Order metrics for one period"""

    period: str = ""
    orders: int = 0
    products: int = 0
    coupons: int = 0
    coupon_discount: float = 0.0
    total_sales: float = 0.0
    total_tax: float = 0.0
    total_shipping: float = 0.0
    total_shipping_tax: float = 0.0
    total_refund: float = 0.0
    total_tax_refund: float = 0.0
    total_shipping_refund: float = 0.0
    total_shipping_tax_refund: float = 0.0
    currency: str = ""
    gross_sales: float = 0.0
    net_sales: float = 0.0
    avg_order_value: float = 0.0
    avg_products_per_order: float = 0.0


class SiteVisitStatsItem(StatsItem):
    """Visitor metrics for one period"""

    period: str = ""
    views: int = 0
    visitors: int = 0


def _rows_to_items(data: Any) -> Any:
    """Turn the API's 'fields' + 'data' rows into item dicts"""
    if not isinstance(data, dict) or "items" in data:
        return data

    fields = data.get("fields")
    rows = data.get("data")
    if fields is None or rows is None:
        return data
    if not isinstance(fields, list) or not isinstance(rows, list):
        raise ValueError("Stats 'fields' and 'data' must be lists")

    items = []
    for row in rows:
        if not isinstance(row, list):
            raise ValueError(f"Stats row must be a list, got {type(row).__name__}")
        items.append({"field_names": fields, "raw_data": row})
    return {**data, "items": items}


class OrderStats(SiteScopedModel):
    """
    Order stats for a date range

    Recreated on every fetch, never merged incrementally.
    """

    site_id: int
    date: str = Field(..., description="Latest period included")
    granularity: StatGranularity = Field(..., alias="unit")
    quantity: int = Field(..., description="Number of periods")
    field_names: List[str] = Field(default_factory=list, alias="fields")
    items: List[OrderStatsItem] = Field(default_factory=list)

    total_gross_sales: float = 0.0
    total_net_sales: float = 0.0
    total_orders: int = 0
    total_products: int = 0
    average_gross_sales: float = Field(0.0, alias="avg_gross_sales")
    average_net_sales: float = Field(0.0, alias="avg_net_sales")
    average_orders: float = Field(0.0, alias="avg_orders")
    average_products: float = Field(0.0, alias="avg_products")

    @model_validator(mode="before")
    @classmethod
    def _build_items(cls, data: Any) -> Any:
        return _rows_to_items(data)


class SiteVisitStats(SiteScopedModel):
    """Visitors per period for a date range"""

    site_id: int
    date: str
    granularity: StatGranularity = Field(..., alias="unit")
    field_names: List[str] = Field(default_factory=list, alias="fields")
    items: List[SiteVisitStatsItem] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _build_items(cls, data: Any) -> Any:
        return _rows_to_items(data)

    @property
    def total_visitors(self) -> int:
        return sum(item.visitors for item in self.items)


class TopEarnerStatsItem(BaseModel):
    """Best selling product in the period"""

    product_id: int = Field(..., alias="ID")
    product_name: str = Field(..., alias="name")
    quantity: int = 0
    price: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    currency: str = ""
    image_url: Optional[str] = Field(None, alias="image")

    model_config = ConfigDict(populate_by_name=True)


class TopEarnerStats(SiteScopedModel):
    """Top earning products for a period"""

    site_id: int
    date: str
    granularity: StatGranularity = Field(..., alias="unit")
    limit: Optional[int] = None
    items: List[TopEarnerStatsItem] = Field(default_factory=list, alias="data")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value):
        return value or []
