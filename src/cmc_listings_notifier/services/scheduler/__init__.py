from cmc_listings_notifier.services.scheduler.listings_job import (
    ListingsNotifierJob,
    ListingsSource,
    RunResult,
)
from cmc_listings_notifier.services.scheduler.runner import ListingsNotifierRunner

__all__ = [
    "ListingsNotifierJob",
    "ListingsNotifierRunner",
    "ListingsSource",
    "RunResult",
]
