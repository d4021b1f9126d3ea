"""
OrderStore - orders family
"""
import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from storefront.actions.base import Action
from storefront.actions.order_actions import (
    OrderAction,
    ResetStoredOrders,
    RetrieveOrder,
    SynchronizeOrders,
    UpdateOrderStatus,
)
from storefront.connectors.orders_remote import OrdersRemote
from storefront.core.exceptions import StorageError, StorefrontError
from storefront.domain.order import Order
from storefront.repositories.order_repository import OrderRepository
from storefront.stores.base import Store

logger = logging.getLogger(__name__)


class OrderStore(Store):

    def __init__(self, dispatcher, storage, network):
        self.remote = OrdersRemote(network)
        self.repository = OrderRepository(storage)
        super().__init__(dispatcher, storage, network)

    def register_supported_actions(self, dispatcher) -> None:
        dispatcher.register(self, OrderAction)

    def on_action(self, action: Action) -> Optional[asyncio.Task]:
        if isinstance(action, SynchronizeOrders):
            return self._schedule(
                action,
                lambda: self.remote.load_all_orders(
                    action.site_id, status=action.status, page=action.page, page_size=action.page_size
                ),
                self.repository.upsert_orders,
            )
        if isinstance(action, RetrieveOrder):
            return self._schedule(
                action,
                lambda: self.remote.load_order(action.site_id, action.order_id),
                self.repository.upsert_order,
            )
        if isinstance(action, UpdateOrderStatus):
            return self._schedule(action, lambda: self._update_order_status(action), self.repository.upsert_order)
        if isinstance(action, ResetStoredOrders):
            return self._schedule(action, lambda: self._delete_orders(action.site_id))

        self._ignore(action)
        return None

    async def _update_order_status(self, action: UpdateOrderStatus) -> Order:
        """
        Apply the new status locally, then remotely

        The stored status is put back when the remote update fails.
        """
        try:
            previous = await asyncio.to_thread(self.repository.find_order, action.site_id, action.order_id)
            if previous is not None:
                await asyncio.to_thread(
                    self.repository.update_order_status, action.site_id, action.order_id, action.status
                )
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        try:
            return await self.remote.update_order(action.site_id, action.order_id, action.status)
        except StorefrontError:
            if previous is not None:
                logger.info(f"Reverting order {action.order_id} to '{previous.status}'")
                try:
                    await asyncio.to_thread(
                        self.repository.update_order_status, action.site_id, action.order_id, previous.status
                    )
                except SQLAlchemyError as e:
                    logger.error(f"Could not revert status of order {action.order_id}: {e}")
            raise

    async def _delete_orders(self, site_id: Optional[int]) -> int:
        # Local only, no network call
        try:
            return await asyncio.to_thread(self.repository.delete_orders, site_id)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
