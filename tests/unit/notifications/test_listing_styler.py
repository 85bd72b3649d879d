# -*- coding: utf-8 -*-
"""Unit tests for ListingNotificationStyler."""

from __future__ import annotations

from collections.abc import Callable

from cmc_listings_notifier.models.token import Token
from cmc_listings_notifier.notifications.stylers import ListingNotificationStyler


def test_render_full_message(token_factory: Callable[..., Token]) -> None:
    token = token_factory(
        "moon-dog",
        name="Moon Dog",
        symbol="MDOG",
        platform_name="Ethereum",
        price_usd=1234.5,
        percent_change_1h=2.0,
        percent_change_24h=-10.126,
    )

    text = ListingNotificationStyler().render(token)

    assert text.splitlines() == [
        "Hi! A new token has recently been added to CoinMarketCap.",
        "Token: Moon Dog (MDOG)",
        "Platform: Ethereum",
        "Price: $1,234.50",
        "1h Change: +2.00%",
        "24h Change: -10.13%",
        "Visit https://coinmarketcap.com/currencies/moon-dog for more information.",
    ]


def test_render_missing_platform_and_quote(token_factory: Callable[..., Token]) -> None:
    token = token_factory(
        "x", platform_name=None, price_usd=None, percent_change_1h=None, percent_change_24h=None
    )

    text = ListingNotificationStyler().render(token)

    assert "Platform: Not specified" in text
    assert "Price: N/A" in text
    assert "1h Change: N/A" in text


def test_small_prices_keep_significant_digits(token_factory: Callable[..., Token]) -> None:
    token = token_factory("tiny", price_usd=0.000012345678)

    assert "Price: $0.00001235" in ListingNotificationStyler().render(token)


def test_build_sets_subject_and_payload(token_factory: Callable[..., Token]) -> None:
    token = token_factory("moon-dog", name="Moon Dog", symbol="MDOG")

    message = ListingNotificationStyler().build(token)

    assert message.event_type == "new_listing"
    assert message.title == "New CoinMarketCap listing: Moon Dog (MDOG)"
    assert message.payload == {"slug": "moon-dog", "symbol": "MDOG"}
