# -*- coding: utf-8 -*-
"""In-memory notified-record repository."""

from __future__ import annotations

from collections.abc import Iterable

from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.persistence.repositories.interfaces.notified_record_repository import (
    INotifiedRecordRepository,
)


class InMemoryNotifiedRecordRepository(INotifiedRecordRepository):
    """In-memory implementation of INotifiedRecordRepository (tests and dry runs)."""

    def __init__(self, records: Iterable[NotifiedRecord] | None = None) -> None:
        self._records: set[NotifiedRecord] | None = set(records) if records is not None else None
        self.save_count = 0

    async def load(self) -> set[NotifiedRecord]:
        return set(self._records) if self._records is not None else set()

    async def save(self, records: Iterable[NotifiedRecord]) -> None:
        self._records = set(records)
        self.save_count += 1
