# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, CMC__API_KEY.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmc_listings_notifier.exceptions import MissingRequiredConfigError
from cmc_listings_notifier.utils.recipients import split_recipients


class AppSettings(BaseModel):
    """General application configuration."""

    model_config = ConfigDict(extra="ignore")

    app_name: str = "cmc-listings-notifier"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseModel):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = ConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/cmc_listings_notifier.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class CoinMarketCapSettings(BaseModel):
    """CoinMarketCap Pro API access (from env CMC__*)."""

    model_config = ConfigDict(extra="ignore")

    api_key: Optional[str] = Field(default=None, description="CoinMarketCap Pro API key.")
    host: str = Field(
        default="https://pro-api.coinmarketcap.com",
        description="CoinMarketCap Pro API base URL.",
    )
    listings_limit: int = Field(
        default=30,
        ge=1,
        le=5000,
        description="Number of most recently added listings fetched per run.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )


class ScheduleSettings(BaseModel):
    """Run interval and the time windows used for candidate filtering and dedup."""

    model_config = ConfigDict(extra="ignore")

    interval_minutes: float = Field(
        default=10.0,
        ge=5.0,
        le=10.0,
        description="Minutes between two runs of the notifier job.",
    )
    candidate_window_minutes: int = Field(
        default=120,
        ge=1,
        description="Listings added within this many minutes are candidates for notification.",
    )
    retention_minutes: int = Field(
        default=200,
        ge=1,
        description="Notified records older than this are dropped on save.",
    )


class StorageSettings(BaseModel):
    """Where the notified-records JSON blob lives (from env STORAGE__*)."""

    model_config = ConfigDict(extra="ignore")

    backend: Literal["azure_blob", "file", "memory"] = "azure_blob"
    connection_string: Optional[str] = Field(
        default=None,
        description="Azure storage account connection string.",
    )
    container_name: Optional[str] = Field(default=None, description="Blob container name.")
    blob_name: str = Field(default="notifications", description="Blob holding the records.")
    file_path: str = Field(
        default="data/notifications.json",
        description="JSON file used by the 'file' backend.",
    )


class NotifySettings(BaseModel):
    """Notification channel and recipients (from env NOTIFY__*)."""

    model_config = ConfigDict(extra="ignore")

    channel: Literal["sms", "email", "console"] = "sms"
    # Raw string from env so pydantic-settings does not try to JSON-decode it.
    recipients_raw: str = Field(
        default="",
        description="Phone numbers or email addresses, ';' or ',' separated. Env: NOTIFY__RECIPIENTS.",
        validation_alias="recipients",
    )

    @computed_field
    @property
    def recipients(self) -> list[str]:
        """Parse recipients_raw into a list of stripped, de-duplicated strings."""
        return split_recipients(self.recipients_raw)


class TwilioSettings(BaseModel):
    """Twilio SMS credentials (from env TWILIO__*)."""

    model_config = ConfigDict(extra="ignore")

    account_sid: Optional[str] = Field(default=None, description="Twilio account SID.")
    auth_token: Optional[str] = Field(default=None, description="Twilio auth token.")
    sender: Optional[str] = Field(default=None, description="Sending phone number (E.164).")
    api_host: str = Field(
        default="https://api.twilio.com",
        description="Twilio REST API base URL.",
    )


class SmtpSettings(BaseModel):
    """SMTP credentials for the email channel (from env SMTP__*)."""

    model_config = ConfigDict(extra="ignore")

    host: str = "smtp.gmail.com"
    port: int = Field(default=587, ge=1, le=65535)
    username: Optional[str] = None
    password: Optional[str] = None
    sender: Optional[str] = Field(
        default=None,
        description="From address; defaults to username when unset.",
    )
    use_tls: bool = True
    timeout_seconds: float = Field(default=30.0, ge=1.0, le=300.0)


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, STORAGE__BACKEND.
    Sections are plain models: only the prefixed names are read from the
    environment, never bare ones such as HOST or PASSWORD.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cmc: CoinMarketCapSettings = Field(default_factory=CoinMarketCapSettings)
    schedule: ScheduleSettings = Field(default_factory=ScheduleSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    notify: NotifySettings = Field(default_factory=NotifySettings)
    twilio: TwilioSettings = Field(default_factory=TwilioSettings)
    smtp: SmtpSettings = Field(default_factory=SmtpSettings)

    def validate_required(self) -> None:
        """Check the values needed by the configured backend and channel.

        Raises:
            MissingRequiredConfigError: Naming the first missing env var.
        """
        if not self.cmc.api_key:
            raise MissingRequiredConfigError("CMC__API_KEY")
        if self.storage.backend == "azure_blob":
            if not self.storage.connection_string:
                raise MissingRequiredConfigError("STORAGE__CONNECTION_STRING")
            if not self.storage.container_name:
                raise MissingRequiredConfigError("STORAGE__CONTAINER_NAME")
        if self.notify.channel != "console" and not self.notify.recipients:
            raise MissingRequiredConfigError("NOTIFY__RECIPIENTS")
        if self.notify.channel == "sms":
            for name, value in (
                ("TWILIO__ACCOUNT_SID", self.twilio.account_sid),
                ("TWILIO__AUTH_TOKEN", self.twilio.auth_token),
                ("TWILIO__SENDER", self.twilio.sender),
            ):
                if not value:
                    raise MissingRequiredConfigError(name)
        if self.notify.channel == "email":
            if not self.smtp.username:
                raise MissingRequiredConfigError("SMTP__USERNAME")
            if not self.smtp.password:
                raise MissingRequiredConfigError("SMTP__PASSWORD")


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from cmc_listings_notifier.config import get_settings

        settings = get_settings()
        limit = settings.cmc.listings_limit
    """
    return Settings()
