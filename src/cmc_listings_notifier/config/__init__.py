"""Configuration subpackage."""

from cmc_listings_notifier.config.config import (
    AppSettings,
    CoinMarketCapSettings,
    LoggingSettings,
    NotifySettings,
    ScheduleSettings,
    Settings,
    SmtpSettings,
    StorageSettings,
    TwilioSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "CoinMarketCapSettings",
    "LoggingSettings",
    "NotifySettings",
    "ScheduleSettings",
    "Settings",
    "SmtpSettings",
    "StorageSettings",
    "TwilioSettings",
    "get_settings",
]
