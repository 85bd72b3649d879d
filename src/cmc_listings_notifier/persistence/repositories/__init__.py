# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, file, azure_blob)."""

from cmc_listings_notifier.persistence.repositories.interfaces import INotifiedRecordRepository
from cmc_listings_notifier.persistence.repositories.in_memory import (
    InMemoryNotifiedRecordRepository,
)
from cmc_listings_notifier.persistence.repositories.file import JsonFileNotifiedRecordRepository

__all__ = [
    "INotifiedRecordRepository",
    "InMemoryNotifiedRecordRepository",
    "JsonFileNotifiedRecordRepository",
]
