"""Exceptions subpackage."""

from cmc_listings_notifier.exceptions.exceptions import (
    ApiRequestError,
    ListingsFetchError,
    MissingRequiredConfigError,
    NotificationSendError,
    NotifierError,
    StoreUnavailableError,
)

__all__ = [
    "ApiRequestError",
    "ListingsFetchError",
    "MissingRequiredConfigError",
    "NotificationSendError",
    "NotifierError",
    "StoreUnavailableError",
]
