# -*- coding: utf-8 -*-
"""Base notification strategy (one channel, one recipient per send)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cmc_listings_notifier.notifications.types import NotificationMessage

if TYPE_CHECKING:  # pragma: no cover
    from cmc_listings_notifier.config.config import Settings


class BaseNotificationStrategy(ABC):
    """Abstract base class for notification channels."""

    channel: str = "base"

    def __init__(self, settings: "Settings"):
        """
        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the strategy has been initialized and not shut down."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the channel (clients, credentials)."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Release channel resources."""
        pass

    @abstractmethod
    async def send_notification(
        self,
        recipient: str,
        message: NotificationMessage,
    ) -> None:
        """
        Deliver one message to one recipient.

        Args:
            recipient: Phone number or email address.
            message: Message to send.

        Raises:
            NotificationSendError: If the provider rejects or cannot deliver the message.
        """
        pass
