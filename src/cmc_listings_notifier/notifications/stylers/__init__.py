"""Notification stylers."""

from cmc_listings_notifier.notifications.stylers.listing_styler import ListingNotificationStyler

__all__ = ["ListingNotificationStyler"]
