"""Local file repository implementations."""

from cmc_listings_notifier.persistence.repositories.file.notified_record_repository import (
    JsonFileNotifiedRecordRepository,
)

__all__ = ["JsonFileNotifiedRecordRepository"]
