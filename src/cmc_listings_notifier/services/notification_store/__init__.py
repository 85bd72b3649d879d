from cmc_listings_notifier.services.notification_store.notification_store import NotificationStore

__all__ = ["NotificationStore"]
