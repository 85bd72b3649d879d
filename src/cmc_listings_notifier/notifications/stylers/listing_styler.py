# -*- coding: utf-8 -*-
"""Plain-text styler for new-listing notifications (fits SMS and email bodies)."""

from __future__ import annotations

from typing import Any

from cmc_listings_notifier.models.token import Token
from cmc_listings_notifier.notifications.types import NotificationMessage, NotificationStyler

NEW_LISTING_EVENT = "new_listing"


class ListingNotificationStyler(NotificationStyler):
    """Render a Token as a short plain-text announcement."""

    def build(self, token: Token) -> NotificationMessage:
        return NotificationMessage(
            event_type=NEW_LISTING_EVENT,
            title=f"New CoinMarketCap listing: {token.name} ({token.symbol})",
            message=self.render(token),
            payload={"slug": token.slug, "symbol": token.symbol},
        )

    def render(self, token: Token) -> str:
        lines = [
            "Hi! A new token has recently been added to CoinMarketCap.",
            f"Token: {token.name} ({token.symbol})",
            f"Platform: {token.platform_name or 'Not specified'}",
            f"Price: {self._format_price(token.price_usd)}",
            f"1h Change: {self._format_percent(token.percent_change_1h)}",
            f"24h Change: {self._format_percent(token.percent_change_24h)}",
            f"Visit {token.url} for more information.",
        ]
        return "\n".join(lines)

    @staticmethod
    def _format_price(value: Any) -> str:
        """USD price: 2 decimals from $1 up, up to 8 decimals below."""
        if value is None:
            return "N/A"
        try:
            number = float(value)
        except (TypeError, ValueError):
            return str(value)
        if abs(number) >= 1:
            return f"${number:,.2f}"
        return "$" + f"{number:.8f}".rstrip("0").rstrip(".")

    @staticmethod
    def _format_percent(value: Any) -> str:
        if value is None:
            return "N/A"
        try:
            number = float(value)
        except (TypeError, ValueError):
            return str(value)
        return f"{number:+.2f}%"
