"""Azure Blob Storage repository implementations."""

from cmc_listings_notifier.persistence.repositories.azure_blob.notified_record_repository import (
    AzureBlobNotifiedRecordRepository,
)

__all__ = ["AzureBlobNotifiedRecordRepository"]
