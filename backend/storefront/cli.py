"""
storefront-sync - command line entry point

Usage:
    storefront-sync orders --site-id 123 [--status processing] [--page 1] [--page-size 25]
    storefront-sync notes --site-id 123 --order-id 963 [--add "Text" [--customer]]
    storefront-sync stats --site-id 123 [--granularity day] [--date 2018-06-23] [--quantity 7]

Loads .env, wires Dispatcher + Stores against the configured API and local
database, dispatches one action and prints a summary.

Author: TM3
Date: 2026-10-19
"""
import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from typing import Any, List, Optional

from dotenv import load_dotenv

from storefront.actions import (
    AddOrderNote,
    RetrieveOrderNotes,
    RetrieveOrderStats,
    SynchronizeOrders,
)
from storefront.connectors.network import HttpxNetwork, Network
from storefront.core.config import get_settings
from storefront.core.database import StorageManager
from storefront.core.logging import configure_logging
from storefront.dispatcher import Dispatcher
from storefront.domain.stats import StatGranularity
from storefront.stores import OrderNoteStore, OrderStatsStore, OrderStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront-sync", description="Sync storefront data")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    orders = subparsers.add_parser("orders", help="Synchronize one page of orders")
    orders.add_argument("--site-id", type=int, required=True)
    orders.add_argument("--status", default=None)
    orders.add_argument("--page", type=int, default=1)
    orders.add_argument("--page-size", type=int, default=None)

    notes = subparsers.add_parser("notes", help="Retrieve or add order notes")
    notes.add_argument("--site-id", type=int, required=True)
    notes.add_argument("--order-id", type=int, required=True)
    notes.add_argument("--add", dest="note", default=None, help="Add this note instead of listing")
    notes.add_argument("--customer", action="store_true", help="Make the added note visible to the customer")

    stats = subparsers.add_parser("stats", help="Retrieve order stats")
    stats.add_argument("--site-id", type=int, required=True)
    stats.add_argument("--granularity", choices=[g.value for g in StatGranularity], default="day")
    stats.add_argument("--date", type=lambda s: datetime.strptime(s, "%Y-%m-%d").date(), default=None)
    stats.add_argument("--quantity", type=int, default=7)

    return parser


def _build_action(args: argparse.Namespace, outcome: dict):
    def on_completion(result: Any, error: Optional[Exception]) -> None:
        outcome["result"] = result
        outcome["error"] = error

    if args.command == "orders":
        return SynchronizeOrders(
            site_id=args.site_id,
            page=args.page,
            page_size=args.page_size or get_settings().DEFAULT_PAGE_SIZE,
            status=args.status,
            on_completion=on_completion,
        )
    if args.command == "notes":
        if args.note is not None:
            return AddOrderNote(
                site_id=args.site_id,
                order_id=args.order_id,
                is_customer_note=args.customer,
                note=args.note,
                on_completion=on_completion,
            )
        return RetrieveOrderNotes(site_id=args.site_id, order_id=args.order_id, on_completion=on_completion)

    return RetrieveOrderStats(
        site_id=args.site_id,
        granularity=StatGranularity(args.granularity),
        latest_date_to_include=args.date or date.today(),
        quantity=args.quantity,
        on_completion=on_completion,
    )


def _summarize(command: str, result: Any) -> List[str]:
    if command == "orders":
        lines = [f"Synchronized {len(result)} orders"]
        lines += [f"  #{order.number} {order.status} {order.total} {order.currency}" for order in result]
        return lines
    if command == "notes":
        notes = result if isinstance(result, list) else [result]
        lines = [f"{len(notes)} note(s)"]
        for note in notes:
            visibility = "customer" if note.is_customer_note else "private"
            lines.append(f"  [{note.date_created:%Y-%m-%d %H:%M}] ({visibility}) {note.note}")
        return lines

    lines = [
        f"{result.granularity.value} stats up to {result.date}: "
        f"{result.total_orders} orders, gross {result.total_gross_sales}, net {result.total_net_sales}"
    ]
    lines += [f"  {item.period}: {item.orders} orders, {item.gross_sales} {item.currency}" for item in result.items]
    return lines


async def _run(action, dispatcher: Dispatcher) -> None:
    task = dispatcher.dispatch(action)
    if task is not None:
        await task


def main(argv: Optional[List[str]] = None, network: Optional[Network] = None,
         storage: Optional[StorageManager] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    owns_storage = storage is None
    storage = storage or StorageManager(get_settings().DATABASE_URL)
    network = network or HttpxNetwork()

    dispatcher = Dispatcher()
    OrderStore(dispatcher, storage, network)
    OrderNoteStore(dispatcher, storage, network)
    OrderStatsStore(dispatcher, storage, network)

    outcome = {"result": None, "error": None}
    action = _build_action(args, outcome)
    try:
        asyncio.run(_run(action, dispatcher))
    finally:
        if owns_storage:
            storage.close()

    if outcome["error"] is not None:
        logger.error(f"{args.command} failed: {outcome['error']}")
        print(f"Error: {outcome['error']}", file=sys.stderr)
        return 1

    for line in _summarize(args.command, outcome["result"]):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
