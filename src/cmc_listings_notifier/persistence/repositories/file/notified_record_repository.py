# -*- coding: utf-8 -*-
"""Notified-record repository backed by a local JSON file."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import structlog

from cmc_listings_notifier.exceptions import StoreUnavailableError
from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.persistence.repositories.interfaces.notified_record_repository import (
    INotifiedRecordRepository,
)
from cmc_listings_notifier.persistence.serialization import decode_records, encode_records


class JsonFileNotifiedRecordRepository(INotifiedRecordRepository):
    """Stores the records as a JSON array in one file; writes go through a temp file + rename."""

    def __init__(
        self,
        path: str | Path,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._path = Path(path)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> set[NotifiedRecord]:
        return await asyncio.to_thread(self._load_sync)

    async def save(self, records: Iterable[NotifiedRecord]) -> None:
        text = encode_records(records)
        await asyncio.to_thread(self._write_sync, text)

    def _load_sync(self) -> set[NotifiedRecord]:
        if not self._path.exists():
            return set()
        try:
            return decode_records(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreUnavailableError(
                f"Cannot read notified records from {self._path}: {e}",
                cause=e,
            ) from e

    def _write_sync(self, text: str) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StoreUnavailableError(
                f"Cannot write notified records to {self._path}: {e}",
                cause=e,
            ) from e
        self._logger.debug("file_store_written", store_path=str(self._path))
