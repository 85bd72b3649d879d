"""CoinMarketCap response types for GET /v1/cryptocurrency/listings/latest."""

from __future__ import annotations

from typing import TypedDict


class UsdQuoteSchema(TypedDict, total=False):
    """quote.USD object. Keys match API response (snake_case)."""

    price: float
    volume_24h: float
    percent_change_1h: float
    percent_change_24h: float
    percent_change_7d: float
    market_cap: float
    last_updated: str


class QuoteSchema(TypedDict, total=False):
    USD: UsdQuoteSchema


class PlatformSchema(TypedDict, total=False):
    id: int
    name: str
    symbol: str
    slug: str
    token_address: str


class ListingSchema(TypedDict, total=False):
    """One item of the `data` array."""

    id: int
    name: str
    symbol: str
    slug: str
    date_added: str
    platform: PlatformSchema | None
    quote: QuoteSchema


class StatusSchema(TypedDict, total=False):
    timestamp: str
    error_code: int
    error_message: str | None
    credit_count: int


class ListingsLatestResponseSchema(TypedDict, total=False):
    status: StatusSchema
    data: list[ListingSchema]
