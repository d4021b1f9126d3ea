"""
Stats actions
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from storefront.actions.base import Action
from storefront.domain.stats import OrderStats, SiteVisitStats, StatGranularity, TopEarnerStats


class OrderStatsAction(Action):
    """Stats family"""


@dataclass
class RetrieveOrderStats(OrderStatsAction):
    """Order stats for `quantity` periods ending at latest_date_to_include"""

    site_id: int
    granularity: StatGranularity
    latest_date_to_include: date
    quantity: int
    on_completion: Callable[[Optional[OrderStats], Optional[Exception]], None]


@dataclass
class RetrieveSiteVisitStats(OrderStatsAction):
    site_id: int
    granularity: StatGranularity
    latest_date_to_include: date
    quantity: int
    on_completion: Callable[[Optional[SiteVisitStats], Optional[Exception]], None]


@dataclass
class RetrieveTopEarnerStats(OrderStatsAction):
    site_id: int
    granularity: StatGranularity
    latest_date_to_include: date
    limit: int
    on_completion: Callable[[Optional[TopEarnerStats], Optional[Exception]], None]
