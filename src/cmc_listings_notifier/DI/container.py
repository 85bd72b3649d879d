# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from cmc_listings_notifier.config import Settings, get_settings
from cmc_listings_notifier.clients.coinmarketcap import CoinMarketCapClient
from cmc_listings_notifier.clients.http import AsyncHttpClient
from cmc_listings_notifier.clients.twilio import TwilioMessagesClient
from cmc_listings_notifier.notifications.strategies.base import BaseNotificationStrategy
from cmc_listings_notifier.notifications.strategies.console import ConsoleNotifier
from cmc_listings_notifier.notifications.strategies.sms import TwilioSmsNotifier
from cmc_listings_notifier.notifications.strategies.smtp import SmtpEmailNotifier
from cmc_listings_notifier.notifications.stylers.listing_styler import ListingNotificationStyler
from cmc_listings_notifier.persistence.repositories.interfaces import INotifiedRecordRepository
from cmc_listings_notifier.persistence.repositories.in_memory import (
    InMemoryNotifiedRecordRepository,
)
from cmc_listings_notifier.persistence.repositories.file import JsonFileNotifiedRecordRepository
from cmc_listings_notifier.services.dedup import NotificationWindowPolicy
from cmc_listings_notifier.services.dispatch import ListingDispatcher
from cmc_listings_notifier.services.notification_store import NotificationStore
from cmc_listings_notifier.services.scheduler import ListingsNotifierJob, ListingsNotifierRunner

CONSOLE_RECIPIENT = "stdout"


def _build_repository(settings: Settings) -> INotifiedRecordRepository:
    """Pick the store backend from settings.storage.backend."""
    backend = settings.storage.backend
    if backend == "memory":
        return InMemoryNotifiedRecordRepository()
    if backend == "file":
        return JsonFileNotifiedRecordRepository(settings.storage.file_path)
    # Imported lazily so file/memory deployments do not need the Azure SDK configured
    from cmc_listings_notifier.persistence.repositories.azure_blob import (
        AzureBlobNotifiedRecordRepository,
    )

    return AzureBlobNotifiedRecordRepository(settings)


def _build_notifier(
    settings: Settings,
    http_client: AsyncHttpClient,
) -> BaseNotificationStrategy:
    """Pick the channel from settings.notify.channel."""
    channel = settings.notify.channel
    if channel == "sms":
        return TwilioSmsNotifier(
            settings=settings,
            messages_client=TwilioMessagesClient(http_client=http_client, settings=settings),
        )
    if channel == "email":
        return SmtpEmailNotifier(settings=settings)
    return ConsoleNotifier(settings=settings)


def _build_recipients(settings: Settings) -> list[str]:
    recipients = settings.notify.recipients
    if not recipients and settings.notify.channel == "console":
        return [CONSOLE_RECIPIENT]
    return recipients


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, API client, store, notifier, job."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    listings_client = providers.Singleton(
        CoinMarketCapClient,
        http_client=http_client,
        settings=config,
    )

    window_policy = providers.Singleton(
        NotificationWindowPolicy.from_settings,
        providers.Callable(lambda s: s.schedule, config),
    )

    notified_record_repository = providers.Singleton(_build_repository, config)

    notification_store = providers.Singleton(
        NotificationStore,
        repository=notified_record_repository,
        policy=window_policy,
    )

    notification_styler = providers.Singleton(ListingNotificationStyler)

    notifier = providers.Singleton(_build_notifier, config, http_client)

    dispatcher = providers.Singleton(
        ListingDispatcher,
        notifier=notifier,
        styler=notification_styler,
        recipients=providers.Callable(_build_recipients, config),
    )

    listings_job = providers.Singleton(
        ListingsNotifierJob,
        listings_source=listings_client,
        store=notification_store,
        dispatcher=dispatcher,
        policy=window_policy,
    )

    runner = providers.Singleton(
        ListingsNotifierRunner,
        job=listings_job,
        settings=config,
    )
