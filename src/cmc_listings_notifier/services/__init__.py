# -*- coding: utf-8 -*-
"""Application services."""

from cmc_listings_notifier.services.dedup import NotificationWindowPolicy
from cmc_listings_notifier.services.dispatch import DispatchReport, ListingDispatcher
from cmc_listings_notifier.services.notification_store import NotificationStore
from cmc_listings_notifier.services.scheduler import (
    ListingsNotifierJob,
    ListingsNotifierRunner,
    ListingsSource,
    RunResult,
)

__all__ = [
    "DispatchReport",
    "ListingDispatcher",
    "ListingsNotifierJob",
    "ListingsNotifierRunner",
    "ListingsSource",
    "NotificationStore",
    "NotificationWindowPolicy",
    "RunResult",
]
