"""
Orders endpoints: sites/{site_id}/orders
"""
from typing import List, Optional

from storefront.connectors.network import Request
from storefront.connectors.remote import Remote
from storefront.domain.order import Order
from storefront.mappers.order_mapper import OrderListMapper, OrderMapper


class OrdersRemote(Remote):
    """Order retrieval and status updates"""

    async def load_all_orders(self, site_id: int, status: Optional[str] = None,
                              page: int = 1, page_size: int = 25) -> List[Order]:
        """
        Get one page of orders

        Args:
            site_id: Site to query
            status: Only orders with this status (None for any)
            page: 1-based page number
            page_size: Orders per page (max 100)
        """
        parameters = {
            'page': page,
            'per_page': page_size,
            'status': status or 'any',
        }
        request = Request('GET', f'sites/{site_id}/orders', parameters=parameters)
        return await self.enqueue(request, OrderListMapper(site_id=site_id))

    async def load_order(self, site_id: int, order_id: int) -> Order:
        request = Request('GET', f'sites/{site_id}/orders/{order_id}')
        return await self.enqueue(request, OrderMapper(site_id=site_id))

    async def update_order(self, site_id: int, order_id: int, status: str) -> Order:
        """Set the status of an order, returning the updated order"""
        request = Request('PUT', f'sites/{site_id}/orders/{order_id}', body={'status': status})
        return await self.enqueue(request, OrderMapper(site_id=site_id))
