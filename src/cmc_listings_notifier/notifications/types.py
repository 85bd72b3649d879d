"""Notification message types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cmc_listings_notifier.models.token import Token


@dataclass(frozen=True)
class NotificationMessage:
    """Message to be sent to one recipient via a notification channel."""

    event_type: str
    message: str
    title: str | None = None
    payload: dict[str, Any] | None = None


class NotificationStyler(Protocol):
    """Turn a listing into a deliverable message."""

    def build(self, token: "Token") -> NotificationMessage:
        """Return the message (plain-text body plus title used as email subject)."""
        ...
