"""
OrderStatsStore - stats family

Stats are rebuilt on every fetch and handed to the callback; nothing is
persisted.
"""
import asyncio
from typing import Optional

from storefront.actions.base import Action
from storefront.actions.order_stats_actions import (
    OrderStatsAction,
    RetrieveOrderStats,
    RetrieveSiteVisitStats,
    RetrieveTopEarnerStats,
)
from storefront.connectors.order_stats_remote import OrderStatsRemote
from storefront.domain.dates import format_stats_date
from storefront.stores.base import Store


class OrderStatsStore(Store):

    def __init__(self, dispatcher, storage, network):
        self.remote = OrderStatsRemote(network)
        super().__init__(dispatcher, storage, network)

    def register_supported_actions(self, dispatcher) -> None:
        dispatcher.register(self, OrderStatsAction)

    def on_action(self, action: Action) -> Optional[asyncio.Task]:
        if isinstance(action, RetrieveOrderStats):
            latest = format_stats_date(action.latest_date_to_include, action.granularity.value)
            return self._schedule(
                action,
                lambda: self.remote.load_order_stats(action.site_id, action.granularity, latest, action.quantity),
            )
        if isinstance(action, RetrieveSiteVisitStats):
            latest = format_stats_date(action.latest_date_to_include, action.granularity.value)
            return self._schedule(
                action,
                lambda: self.remote.load_site_visit_stats(action.site_id, action.granularity, latest, action.quantity),
            )
        if isinstance(action, RetrieveTopEarnerStats):
            latest = format_stats_date(action.latest_date_to_include, action.granularity.value)
            return self._schedule(
                action,
                lambda: self.remote.load_top_earner_stats(action.site_id, action.granularity, latest, action.limit),
            )

        self._ignore(action)
        return None
