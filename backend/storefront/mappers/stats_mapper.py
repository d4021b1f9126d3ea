"""
Stats mappers (orders, site visits, top earners)
"""
from dataclasses import dataclass

from storefront.domain.stats import OrderStats, SiteVisitStats, TopEarnerStats
from storefront.mappers.base import unwrap_envelope, validate_entity


@dataclass(frozen=True)
class OrderStatsMapper:
    site_id: int

    def map(self, response: bytes) -> OrderStats:
        return validate_entity(OrderStats, unwrap_envelope(response), context={"site_id": self.site_id})


@dataclass(frozen=True)
class SiteVisitStatsMapper:
    site_id: int

    def map(self, response: bytes) -> SiteVisitStats:
        return validate_entity(SiteVisitStats, unwrap_envelope(response), context={"site_id": self.site_id})


@dataclass(frozen=True)
class TopEarnerStatsMapper:
    site_id: int

    def map(self, response: bytes) -> TopEarnerStats:
        return validate_entity(TopEarnerStats, unwrap_envelope(response), context={"site_id": self.site_id})
