"""NotifiedRecord: persisted marker that a token has already been notified.

Identity is (slug, date_added). Records are pruned once older than the
retention window; see services.dedup.window_policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from cmc_listings_notifier.utils.timestamps import format_utc, parse_utc

if TYPE_CHECKING:
    from cmc_listings_notifier.models.token import Token


@dataclass(frozen=True, slots=True)
class NotifiedRecord:
    """Record that a token was sent (for deduplication across runs)."""

    slug: str
    date_added: datetime
    """When the token was added to CoinMarketCap (aware UTC); drives retention."""

    @classmethod
    def from_token(cls, token: Token) -> NotifiedRecord:
        return cls(slug=token.slug, date_added=token.date_added)

    def to_dict(self) -> dict[str, str]:
        """JSON shape stored in the blob: {"slug": ..., "date_added": ISO-8601}."""
        return {"slug": self.slug, "date_added": format_utc(self.date_added)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NotifiedRecord | None:
        """Build from a stored item. Returns None if a field is missing or invalid."""
        slug = data.get("slug")
        date_added = parse_utc(data.get("date_added"))
        if not isinstance(slug, str) or not slug.strip() or date_added is None:
            return None
        return cls(slug=slug.strip(), date_added=date_added)
