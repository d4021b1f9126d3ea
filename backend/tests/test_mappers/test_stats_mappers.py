"""
Unit tests for stats mappers

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal

import pytest

from storefront.core.exceptions import DecodingError
from storefront.domain.stats import OrderStatsItem, StatGranularity
from storefront.mappers import OrderStatsMapper, SiteVisitStatsMapper, TopEarnerStatsMapper

ORDER_STATS_FIELDS = (
    "period", "orders", "products", "coupons", "coupon_discount", "total_sales", "total_tax",
    "total_shipping", "total_shipping_tax", "total_refund", "total_tax_refund", "total_shipping_refund",
    "total_shipping_tax_refund", "currency", "gross_sales", "net_sales", "avg_order_value",
    "avg_products_per_order",
)


class TestOrderStatsMapper:
    """Test OrderStatsMapper"""

    def test_n_rows_yield_n_items_with_aligned_fields(self, load_response):
        """Each row becomes one item whose field_names and raw_data line up"""
        stats = OrderStatsMapper(site_id=123).map(load_response("order-stats"))

        assert len(stats.items) == 2
        for item in stats.items:
            assert isinstance(item, OrderStatsItem)
            assert len(item.field_names) == len(item.raw_data)
            assert item.field_names == ORDER_STATS_FIELDS

    def test_map_decodes_header_and_totals(self, load_response):
        stats = OrderStatsMapper(site_id=123).map(load_response("order-stats"))

        assert stats.site_id == 123
        assert stats.date == "2018-06-02"
        assert stats.granularity == StatGranularity.DAY
        assert stats.quantity == 2
        assert stats.field_names == list(ORDER_STATS_FIELDS)
        assert stats.total_gross_sales == pytest.approx(439.23)
        assert stats.total_net_sales == pytest.approx(438.24)
        assert stats.total_orders == 9
        assert stats.total_products == 13
        assert stats.average_gross_sales == pytest.approx(14.1687)
        assert stats.average_net_sales == pytest.approx(14.1368)
        assert stats.average_orders == pytest.approx(0.2903)
        assert stats.average_products == pytest.approx(0.4194)

    def test_items_expose_typed_fields(self, load_response):
        stats = OrderStatsMapper(site_id=123).map(load_response("order-stats"))
        first, second = stats.items

        assert first.period == "2018-06-01"
        assert first.orders == 2
        assert first.total_sales == pytest.approx(14.24)
        assert first.total_shipping == pytest.approx(9.98)
        assert first.currency == "USD"
        assert first.avg_order_value == pytest.approx(7.12)
        assert second.period == "2018-06-02"
        assert second.net_sales == pytest.approx(30.0)

    def test_items_keep_raw_values(self, load_response):
        stats = OrderStatsMapper(site_id=123).map(load_response("order-stats"))
        item = stats.items[0]

        assert item.raw_data[0] == "2018-06-01"
        assert item.value_for("currency") == "USD"
        assert item.value_for("orders") == 2
        assert item.value_for("not_a_field") is None
        assert item.as_dict()["gross_sales"] == pytest.approx(14.24)

    def test_row_length_mismatch_raises_decoding_error(self, load_response):
        with pytest.raises(DecodingError):
            OrderStatsMapper(site_id=123).map(load_response("order-stats-mismatched-row"))

    @pytest.mark.parametrize("fields", [b'[["period"]]', b'[{"name": "period"}]', b'[1]'])
    def test_non_string_field_names_raise_decoding_error(self, fields):
        payload = b'{"data": {"date": "2018-06-02", "unit": "day", "quantity": 1, "fields": ' + fields + b', "data": [["2018-06-01"]]}}'

        with pytest.raises(DecodingError):
            OrderStatsMapper(site_id=123).map(payload)

    def test_error_payload_raises_decoding_error(self, load_response):
        with pytest.raises(DecodingError):
            OrderStatsMapper(site_id=123).map(load_response("generic_error"))


class TestSiteVisitStatsMapper:

    def test_map_decodes_visitors_per_period(self, load_response):
        stats = SiteVisitStatsMapper(site_id=123).map(load_response("site-visits"))

        assert stats.site_id == 123
        assert stats.granularity == StatGranularity.DAY
        assert [item.period for item in stats.items] == ["2018-08-04", "2018-08-05", "2018-08-06"]
        assert [item.visitors for item in stats.items] == [3, 12, 7]
        assert stats.total_visitors == 22
        # 'views' isn't in the response
        assert stats.items[0].views == 0


class TestTopEarnerStatsMapper:

    def test_map_decodes_products(self, load_response):
        stats = TopEarnerStatsMapper(site_id=123).map(load_response("top-earners"))

        assert stats.site_id == 123
        assert stats.date == "2018-W31"
        assert stats.granularity == StatGranularity.WEEK
        assert stats.limit == 2
        assert len(stats.items) == 2

        hoodie = stats.items[0]
        assert hoodie.product_id == 296
        assert hoodie.product_name == "Funky Hoodie"
        assert hoodie.quantity == 5
        assert hoodie.total == Decimal("200")
        assert hoodie.image_url.endswith("hoodie.jpg")
        assert stats.items[1].image_url is None
