"""Custom exceptions for the listings API, notification channels and the store."""

from __future__ import annotations


class NotifierError(Exception):
    """Base exception for listings-notifier errors."""

    pass


class MissingRequiredConfigError(NotifierError):
    """Raised when a required configuration value is missing."""

    pass


class ApiRequestError(NotifierError):
    """Raised when an outbound HTTP request fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ListingsFetchError(ApiRequestError):
    """Raised when the latest listings cannot be fetched. Fatal for the run."""


class NotificationSendError(NotifierError):
    """Raised when a single notification could not be delivered to a recipient."""

    def __init__(
        self,
        message: str,
        *,
        channel: str,
        error_code: str | int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.channel = channel
        self.error_code = error_code
        self.cause = cause


class StoreUnavailableError(NotifierError):
    """Raised when the notified-records store cannot be written."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
