# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, file/, azure_blob/."""

from cmc_listings_notifier.persistence.repositories.interfaces.notified_record_repository import (
    INotifiedRecordRepository,
)

__all__ = ["INotifiedRecordRepository"]
