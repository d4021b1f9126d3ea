"""
Stats endpoints: sites/{site_id}/stats/{orders,visits,top-earners}
"""
from storefront.connectors.network import Request
from storefront.connectors.remote import Remote
from storefront.domain.stats import OrderStats, SiteVisitStats, StatGranularity, TopEarnerStats
from storefront.mappers.stats_mapper import OrderStatsMapper, SiteVisitStatsMapper, TopEarnerStatsMapper


class OrderStatsRemote(Remote):
    """
    Stats queries

    latest_date_to_include is already formatted for the granularity
    (see storefront.domain.dates.format_stats_date).
    """

    async def load_order_stats(self, site_id: int, unit: StatGranularity,
                               latest_date_to_include: str, quantity: int) -> OrderStats:
        parameters = {
            'unit': unit.value,
            'date': latest_date_to_include,
            'quantity': quantity,
        }
        request = Request('GET', f'sites/{site_id}/stats/orders/', parameters=parameters)
        return await self.enqueue(request, OrderStatsMapper(site_id=site_id))

    async def load_site_visit_stats(self, site_id: int, unit: StatGranularity,
                                    latest_date_to_include: str, quantity: int) -> SiteVisitStats:
        parameters = {
            'unit': unit.value,
            'date': latest_date_to_include,
            'quantity': quantity,
            'stat_fields': 'visitors',
        }
        request = Request('GET', f'sites/{site_id}/stats/visits/', parameters=parameters)
        return await self.enqueue(request, SiteVisitStatsMapper(site_id=site_id))

    async def load_top_earner_stats(self, site_id: int, unit: StatGranularity,
                                    latest_date_to_include: str, limit: int) -> TopEarnerStats:
        parameters = {
            'unit': unit.value,
            'date': latest_date_to_include,
            'limit': limit,
        }
        request = Request('GET', f'sites/{site_id}/stats/top-earners/', parameters=parameters)
        return await self.enqueue(request, TopEarnerStatsMapper(site_id=site_id))
