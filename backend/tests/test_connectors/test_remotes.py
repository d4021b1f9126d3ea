"""
Unit tests for the Remotes (request construction + decoding)

Author: TM3
Date: 2026-10-19
"""
import asyncio

import pytest

from storefront.connectors import OrderNotesRemote, OrderStatsRemote, OrdersRemote
from storefront.core.exceptions import DecodingError, NetworkError, RemoteError
from storefront.domain.stats import StatGranularity


class TestOrdersRemote:
    """Test OrdersRemote"""

    def test_load_all_orders_builds_paged_request(self, network, sample_site_id):
        # Arrange
        network.simulate_response("orders", "orders-load-all")
        remote = OrdersRemote(network)

        # Act
        orders = asyncio.run(remote.load_all_orders(sample_site_id, status="processing", page=2, page_size=50))

        # Assert
        assert len(orders) == 3
        request = network.requests[0]
        assert request.method == "GET"
        assert request.path == "sites/123/orders"
        assert request.parameters == {"page": 2, "per_page": 50, "status": "processing"}

    def test_load_all_orders_defaults_to_any_status(self, network, sample_site_id):
        network.simulate_response("orders", "orders-load-all")

        asyncio.run(OrdersRemote(network).load_all_orders(sample_site_id))

        assert network.requests[0].parameters["status"] == "any"

    def test_load_order(self, network, sample_site_id):
        network.simulate_response("orders/963", "order")

        order = asyncio.run(OrdersRemote(network).load_order(sample_site_id, 963))

        assert order.order_id == 963
        assert network.requests[0].path == "sites/123/orders/963"

    def test_update_order_sends_status_body(self, network, sample_site_id):
        network.simulate_response("orders/963", "order")

        asyncio.run(OrdersRemote(network).update_order(sample_site_id, 963, "completed"))

        request = network.requests[0]
        assert request.method == "PUT"
        assert request.body == {"status": "completed"}

    def test_error_payload_raises_remote_error(self, network, sample_site_id):
        network.simulate_response("orders/963", "rest_error")

        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(OrdersRemote(network).load_order(sample_site_id, 963))

        assert exc_info.value.status == 404

    def test_no_response_raises_network_error(self, network, sample_site_id):
        with pytest.raises(NetworkError):
            asyncio.run(OrdersRemote(network).load_order(sample_site_id, 963))

    def test_makes_exactly_one_attempt(self, network, sample_site_id):
        with pytest.raises(NetworkError):
            asyncio.run(OrdersRemote(network).load_all_orders(sample_site_id))

        assert len(network.requests) == 1


class TestOrderNotesRemote:

    def test_load_order_notes(self, network, sample_site_id):
        network.simulate_response("orders/963/notes", "order-notes")

        notes = asyncio.run(OrderNotesRemote(network).load_order_notes(sample_site_id, 963))

        assert len(notes) == 3
        assert network.requests[0].path == "sites/123/orders/963/notes"

    def test_add_order_note_posts_note(self, network, sample_site_id):
        network.simulate_response("orders/963/notes", "new-order-note")

        note = asyncio.run(
            OrderNotesRemote(network).add_order_note(sample_site_id, 963, True, "Ketchup")
        )

        request = network.requests[0]
        assert request.method == "POST"
        assert request.body == {"note": "Ketchup", "customer_note": True}
        assert note.order_id == 963


class TestOrderStatsRemote:

    def test_load_order_stats_builds_query(self, network, sample_site_id):
        network.simulate_response("stats/orders/", "order-stats")

        stats = asyncio.run(
            OrderStatsRemote(network).load_order_stats(sample_site_id, StatGranularity.DAY, "2018-06-23", 2)
        )

        assert len(stats.items) == 2
        request = network.requests[0]
        assert request.path == "sites/123/stats/orders/"
        assert request.parameters == {"unit": "day", "date": "2018-06-23", "quantity": 2}

    def test_load_site_visit_stats(self, network, sample_site_id):
        network.simulate_response("stats/visits/", "site-visits")

        stats = asyncio.run(
            OrderStatsRemote(network).load_site_visit_stats(sample_site_id, StatGranularity.DAY, "2018-08-06", 3)
        )

        assert stats.total_visitors == 22
        assert network.requests[0].parameters["stat_fields"] == "visitors"

    def test_load_top_earner_stats(self, network, sample_site_id):
        network.simulate_response("stats/top-earners/", "top-earners")

        stats = asyncio.run(
            OrderStatsRemote(network).load_top_earner_stats(sample_site_id, StatGranularity.WEEK, "2018-W31", 2)
        )

        assert len(stats.items) == 2
        assert network.requests[0].parameters == {"unit": "week", "date": "2018-W31", "limit": 2}

    def test_error_payload_raises_remote_error(self, network, sample_site_id):
        network.simulate_response("stats/orders/", "generic_error")

        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(
                OrderStatsRemote(network).load_order_stats(sample_site_id, StatGranularity.DAY, "2018-06-23", 2)
            )

        assert exc_info.value.code == "unauthorized"

    def test_malformed_payload_raises_decoding_error(self, network, sample_site_id):
        network.simulate_raw_response("stats/orders/", b'{"data": {"unit": "fortnight"}}')

        with pytest.raises(DecodingError):
            asyncio.run(
                OrderStatsRemote(network).load_order_stats(sample_site_id, StatGranularity.DAY, "2018-06-23", 2)
            )
