"""Token: one cryptocurrency listing from the CoinMarketCap latest-listings endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from cmc_listings_notifier.utils.timestamps import parse_utc

if TYPE_CHECKING:
    from cmc_listings_notifier.clients.coinmarketcap.schema import ListingSchema


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class Token:
    """A listing as needed for notification (USD quote only).

    slug is the unique external identifier; date_added is aware UTC.
    """

    name: str
    symbol: str
    slug: str
    date_added: datetime
    price_usd: float | None = None
    percent_change_1h: float | None = None
    percent_change_24h: float | None = None
    platform_name: str | None = None
    """Name of the host chain for tokens (e.g. Ethereum); None for native coins."""

    @property
    def url(self) -> str:
        """CoinMarketCap page for this token."""
        return f"https://coinmarketcap.com/currencies/{self.slug}"

    @classmethod
    def from_response(cls, item: ListingSchema) -> Token | None:
        """Build from one item of the API `data` array.

        Returns None when slug or date_added is missing or unparseable.
        """
        slug = item.get("slug")
        date_added = parse_utc(item.get("date_added"))
        if not isinstance(slug, str) or not slug.strip() or date_added is None:
            return None

        quote = item.get("quote")
        usd = quote.get("USD") if isinstance(quote, dict) else None
        if not isinstance(usd, dict):
            usd = {}
        platform = item.get("platform")
        platform_name = platform.get("name") if isinstance(platform, dict) else None

        return cls(
            name=str(item.get("name") or slug),
            symbol=str(item.get("symbol") or ""),
            slug=slug.strip(),
            date_added=date_added,
            price_usd=_float_or_none(usd.get("price")),
            percent_change_1h=_float_or_none(usd.get("percent_change_1h")),
            percent_change_24h=_float_or_none(usd.get("percent_change_24h")),
            platform_name=str(platform_name) if platform_name else None,
        )
