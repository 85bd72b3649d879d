"""HTTP and API clients."""

from cmc_listings_notifier.clients.coinmarketcap import CoinMarketCapClient
from cmc_listings_notifier.clients.http import AsyncHttpClient
from cmc_listings_notifier.clients.twilio import TwilioMessagesClient

__all__ = [
    "AsyncHttpClient",
    "CoinMarketCapClient",
    "TwilioMessagesClient",
]
