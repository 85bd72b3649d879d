"""In-memory repository implementations."""

from cmc_listings_notifier.persistence.repositories.in_memory.notified_record_repository import (
    InMemoryNotifiedRecordRepository,
)

__all__ = ["InMemoryNotifiedRecordRepository"]
