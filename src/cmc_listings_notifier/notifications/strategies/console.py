# -*- coding: utf-8 -*-
"""Console notifier (print-based, for dry runs)."""

from __future__ import annotations

from cmc_listings_notifier.notifications.types import NotificationMessage
from cmc_listings_notifier.notifications.strategies.base import BaseNotificationStrategy
from cmc_listings_notifier.config import Settings


class ConsoleNotifier(BaseNotificationStrategy):
    """Print notifications to stdout."""

    channel = "console"

    def __init__(self, settings: "Settings") -> None:
        super().__init__(settings)
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send_notification(self, recipient: str, message: NotificationMessage) -> None:
        """Print the message, prefixed with its recipient."""
        if not self.is_running:
            return
        print(f"[to {recipient}] {message.title or message.event_type}\n{message.message}\n")
