"""Notification subsystem."""

from cmc_listings_notifier.notifications.strategies import (
    BaseNotificationStrategy,
    ConsoleNotifier,
    SmtpEmailNotifier,
    TwilioSmsNotifier,
)
from cmc_listings_notifier.notifications.stylers import ListingNotificationStyler
from cmc_listings_notifier.notifications.types import (
    NotificationMessage,
    NotificationStyler,
)

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "ListingNotificationStyler",
    "NotificationMessage",
    "NotificationStyler",
    "SmtpEmailNotifier",
    "TwilioSmsNotifier",
]
