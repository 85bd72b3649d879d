# -*- coding: utf-8 -*-
"""Notified-record repository backed by one Azure Storage block blob."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import structlog
from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient
from structlog.contextvars import bound_contextvars

from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.exceptions import MissingRequiredConfigError, StoreUnavailableError
from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.persistence.repositories.interfaces.notified_record_repository import (
    INotifiedRecordRepository,
)
from cmc_listings_notifier.persistence.serialization import decode_records, encode_records


class AzureBlobNotifiedRecordRepository(INotifiedRecordRepository):
    """Reads/overwrites a JSON blob (settings.storage.blob_name) in settings.storage.container_name.

    A client is opened per call; the job touches the blob at most twice per run.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        service_client_factory: Callable[[str], BlobServiceClient] = BlobServiceClient.from_connection_string,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            settings: Application settings (uses settings.storage).
            service_client_factory: Builds a BlobServiceClient from a connection string.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        cfg = settings.storage
        if not cfg.connection_string:
            raise MissingRequiredConfigError("STORAGE__CONNECTION_STRING")
        if not cfg.container_name:
            raise MissingRequiredConfigError("STORAGE__CONTAINER_NAME")
        self._connection_string = cfg.connection_string
        self._container_name = cfg.container_name
        self._blob_name = cfg.blob_name
        self._service_client_factory = service_client_factory
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def load(self) -> set[NotifiedRecord]:
        with bound_contextvars(
            blob_container=self._container_name,
            blob_name=self._blob_name,
        ):
            try:
                async with self._service_client_factory(self._connection_string) as service:
                    blob = service.get_blob_client(self._container_name, self._blob_name)
                    downloader = await blob.download_blob()
                    data = await downloader.readall()
            except ResourceNotFoundError:
                self._logger.info("blob_store_not_found")
                return set()
            # ValueError: malformed connection string.
            except (AzureError, ValueError) as e:
                raise StoreUnavailableError(
                    f"Cannot read blob {self._container_name}/{self._blob_name}: {e}",
                    cause=e,
                ) from e
            try:
                return decode_records(data)
            except ValueError as e:
                raise StoreUnavailableError(
                    f"Blob {self._container_name}/{self._blob_name} is not a JSON array: {e}",
                    cause=e,
                ) from e

    async def save(self, records: Iterable[NotifiedRecord]) -> None:
        payload = encode_records(records).encode("utf-8")
        content_settings = ContentSettings(content_type="application/json")
        with bound_contextvars(
            blob_container=self._container_name,
            blob_name=self._blob_name,
        ):
            try:
                async with self._service_client_factory(self._connection_string) as service:
                    container = service.get_container_client(self._container_name)
                    try:
                        await container.create_container()
                        self._logger.info("blob_store_container_created")
                    except ResourceExistsError:
                        pass
                    await container.upload_blob(
                        self._blob_name,
                        payload,
                        overwrite=True,
                        content_settings=content_settings,
                    )
            except (AzureError, ValueError) as e:
                raise StoreUnavailableError(
                    f"Cannot write blob {self._container_name}/{self._blob_name}: {e}",
                    cause=e,
                ) from e
            self._logger.debug("blob_store_written", blob_size_bytes=len(payload))
