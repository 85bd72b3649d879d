"""JSON (de)serialization of the notified-records blob: [{"slug", "date_added"}, ...]."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, cast

from cmc_listings_notifier.models.notified_record import NotifiedRecord


def encode_records(records: Iterable[NotifiedRecord]) -> str:
    """Serialize records as a JSON array, oldest first (stable output)."""
    ordered = sorted(records, key=lambda r: (r.date_added, r.slug))
    return json.dumps([r.to_dict() for r in ordered])


def decode_records(text: str | bytes) -> set[NotifiedRecord]:
    """Parse a JSON array of records. Items with missing fields are skipped.

    Raises:
        ValueError: If the text is not JSON or not a JSON array.
    """
    data = json.loads(text) if text else []
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    records: set[NotifiedRecord] = set()
    for item in cast(list[Any], data):
        if not isinstance(item, dict):
            continue
        record = NotifiedRecord.from_dict(cast(dict[str, Any], item))
        if record is not None:
            records.add(record)
    return records
