"""Abstract interface for notified-record storage (blob, file, in-memory)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from cmc_listings_notifier.models.notified_record import NotifiedRecord


class INotifiedRecordRepository(ABC):
    """Interface for persisting the set of NotifiedRecord as one document."""

    @abstractmethod
    async def load(self) -> set[NotifiedRecord]:
        """Return the stored records; empty set if nothing has been stored yet.

        Raises:
            StoreUnavailableError: If the store exists but cannot be read or parsed.
        """
        ...

    @abstractmethod
    async def save(self, records: Iterable[NotifiedRecord]) -> None:
        """Overwrite the stored document with exactly `records`.

        Raises:
            StoreUnavailableError: If the store cannot be written.
        """
        ...
