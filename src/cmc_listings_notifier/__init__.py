"""CoinMarketCap new-listings notifier: fetch, deduplicate and notify on a timer."""

from cmc_listings_notifier.clients import AsyncHttpClient, CoinMarketCapClient
from cmc_listings_notifier.config import get_settings
from cmc_listings_notifier.DI import Container
from cmc_listings_notifier.services import ListingsNotifierJob, ListingsNotifierRunner

__version__ = "0.1.0"
__all__ = [
    "AsyncHttpClient",
    "CoinMarketCapClient",
    "Container",
    "ListingsNotifierJob",
    "ListingsNotifierRunner",
    "get_settings",
]
