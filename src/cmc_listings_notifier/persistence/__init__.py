"""Persistence layer (repositories, serialization)."""

from cmc_listings_notifier.persistence.repositories import (
    INotifiedRecordRepository,
    InMemoryNotifiedRecordRepository,
    JsonFileNotifiedRecordRepository,
)
from cmc_listings_notifier.persistence.serialization import decode_records, encode_records

__all__ = [
    "INotifiedRecordRepository",
    "InMemoryNotifiedRecordRepository",
    "JsonFileNotifiedRecordRepository",
    "decode_records",
    "encode_records",
]
