"""Dedup policy (pure logic, no I/O)."""

from cmc_listings_notifier.services.dedup.window_policy import NotificationWindowPolicy

__all__ = ["NotificationWindowPolicy"]
