"""
Tests for the storefront-sync command line

Author: TM3
Date: 2026-10-19
"""
from unittest.mock import patch

import pytest

from storefront.cli import build_parser, main
from storefront.repositories import OrderRepository


class TestCli:
    """Test main() end to end against the mock network"""

    def test_orders_command_syncs_and_prints_summary(self, network, storage, capsys):
        # Arrange
        network.simulate_response("sites/123/orders", "orders-load-all")

        # Act
        exit_code = main(["orders", "--site-id", "123", "--page-size", "10"], network=network, storage=storage)

        # Assert
        assert exit_code == 0
        output = capsys.readouterr().out
        assert "Synchronized 3 orders" in output
        assert "#964 completed 64.00 USD" in output
        assert network.requests[0].parameters["per_page"] == 10
        assert len(OrderRepository(storage).find_orders(123)) == 3

    def test_notes_command_lists_notes(self, network, storage, capsys):
        network.simulate_response("orders/963/notes", "order-notes")

        exit_code = main(["notes", "--site-id", "123", "--order-id", "963"], network=network, storage=storage)

        assert exit_code == 0
        assert "3 note(s)" in capsys.readouterr().out

    def test_notes_command_adds_customer_note(self, network, storage, capsys):
        network.simulate_response("orders/963/notes", "new-order-note")

        exit_code = main(
            ["notes", "--site-id", "123", "--order-id", "963", "--add", "Ketchup", "--customer"],
            network=network,
            storage=storage,
        )

        assert exit_code == 0
        assert network.requests[0].method == "POST"
        assert network.requests[0].body == {"note": "Ketchup", "customer_note": True}
        assert "(customer)" in capsys.readouterr().out

    def test_notes_command_adds_empty_note(self, network, storage):
        network.simulate_response("orders/963/notes", "new-order-note")

        exit_code = main(
            ["notes", "--site-id", "123", "--order-id", "963", "--add", ""], network=network, storage=storage
        )

        assert exit_code == 0
        assert network.requests[0].method == "POST"
        assert network.requests[0].body == {"note": "", "customer_note": False}

    def test_storage_built_by_main_is_closed(self, network, storage, monkeypatch):
        network.simulate_response("orders/963/notes", "order-notes")
        monkeypatch.setattr("storefront.cli.StorageManager", lambda url: storage)

        with patch.object(storage, "close", wraps=storage.close) as close:
            exit_code = main(["notes", "--site-id", "123", "--order-id", "963"], network=network)

        assert exit_code == 0
        close.assert_called_once()

    def test_stats_command(self, network, storage, capsys):
        network.simulate_response("stats/orders/", "order-stats")

        exit_code = main(
            ["stats", "--site-id", "123", "--date", "2018-06-02", "--quantity", "2"],
            network=network,
            storage=storage,
        )

        assert exit_code == 0
        assert network.requests[0].parameters == {"unit": "day", "date": "2018-06-02", "quantity": 2}
        assert "day stats up to 2018-06-02" in capsys.readouterr().out

    def test_remote_error_returns_non_zero(self, network, storage, capsys):
        network.simulate_response("orders", "generic_error")

        exit_code = main(["orders", "--site-id", "123"], network=network, storage=storage)

        assert exit_code == 1
        assert "unauthorized" in capsys.readouterr().err

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_parser_rejects_unknown_granularity(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["stats", "--site-id", "1", "--granularity", "hour"])
