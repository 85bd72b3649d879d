# -*- coding: utf-8 -*-
"""Unit tests for CoinMarketCapClient."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock

import pytest

from cmc_listings_notifier.clients.coinmarketcap import CoinMarketCapClient
from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.exceptions import ApiRequestError, ListingsFetchError


def _listing(slug: str, date_added: str = "2026-02-13T11:30:00.000Z") -> dict[str, Any]:
    return {
        "name": slug.title(),
        "symbol": slug.upper(),
        "slug": slug,
        "date_added": date_added,
        "platform": None,
        "quote": {"USD": {"price": 1.0, "percent_change_1h": 0.1, "percent_change_24h": 0.2}},
    }


def _client(settings: Settings, http: SimpleNamespace) -> CoinMarketCapClient:
    return CoinMarketCapClient(http_client=cast(Any, http), settings=settings)


async def test_get_latest_listings_calls_endpoint_sorted_by_date_added(settings: Settings) -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"data": [_listing("abc")]}))

    tokens = await _client(settings, http).get_latest_listings()

    assert [t.slug for t in tokens] == ["abc"]
    args, kwargs = http.get.call_args
    assert args[0] == "https://pro-api.coinmarketcap.com/v1/cryptocurrency/listings/latest"
    assert kwargs["params"] == {"sort": "date_added", "sort_dir": "desc", "limit": 30}
    assert kwargs["headers"]["X-CMC_PRO_API_KEY"] == "test-cmc-key"


async def test_limit_argument_overrides_settings(settings: Settings) -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"data": []}))

    await _client(settings, http).get_latest_listings(limit=5)

    assert http.get.call_args.kwargs["params"]["limit"] == 5


async def test_items_without_required_fields_are_skipped(settings: Settings) -> None:
    broken = _listing("broken")
    del broken["date_added"]
    http = SimpleNamespace(
        get=AsyncMock(return_value={"data": [_listing("ok"), broken, "junk"]})
    )

    tokens = await _client(settings, http).get_latest_listings()

    assert [t.slug for t in tokens] == ["ok"]


async def test_http_failure_raises_listings_fetch_error(settings: Settings) -> None:
    http = SimpleNamespace(
        get=AsyncMock(side_effect=ApiRequestError("unauthorized", url="u", status_code=401))
    )

    with pytest.raises(ListingsFetchError) as exc_info:
        await _client(settings, http).get_latest_listings()

    assert exc_info.value.status_code == 401


async def test_body_without_data_list_raises_listings_fetch_error(settings: Settings) -> None:
    http = SimpleNamespace(
        get=AsyncMock(return_value={"status": {"error_code": 1002, "error_message": "bad key"}})
    )

    with pytest.raises(ListingsFetchError):
        await _client(settings, http).get_latest_listings()
