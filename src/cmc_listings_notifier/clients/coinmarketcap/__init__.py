from cmc_listings_notifier.clients.coinmarketcap.listings_client import CoinMarketCapClient
from cmc_listings_notifier.clients.coinmarketcap.schema import (
    ListingSchema,
    ListingsLatestResponseSchema,
)

__all__ = ["CoinMarketCapClient", "ListingSchema", "ListingsLatestResponseSchema"]
