"""Notification strategies."""

from cmc_listings_notifier.notifications.strategies.base import BaseNotificationStrategy
from cmc_listings_notifier.notifications.strategies.console import ConsoleNotifier
from cmc_listings_notifier.notifications.strategies.smtp import SmtpEmailNotifier
from cmc_listings_notifier.notifications.strategies.sms import TwilioSmsNotifier

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "SmtpEmailNotifier",
    "TwilioSmsNotifier",
]
