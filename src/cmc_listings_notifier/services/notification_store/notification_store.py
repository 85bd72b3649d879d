"""NotificationStore: load/save the notified-record set with first-run and expiry semantics."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import structlog

from cmc_listings_notifier.exceptions import StoreUnavailableError
from cmc_listings_notifier.models.notified_record import NotifiedRecord

if TYPE_CHECKING:
    from cmc_listings_notifier.persistence.repositories.interfaces import (
        INotifiedRecordRepository,
    )
    from cmc_listings_notifier.services.dedup import NotificationWindowPolicy


class NotificationStore:
    """Wraps a repository: unreadable store reads as empty; saves prune expired records."""

    def __init__(
        self,
        repository: INotifiedRecordRepository,
        policy: NotificationWindowPolicy,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Backend holding the JSON document (blob, file, in-memory).
            policy: Window policy (uses its retention for pruning).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._repository = repository
        self._policy = policy
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def load(self) -> set[NotifiedRecord]:
        """Return stored records, or an empty set if the store is missing or unreadable."""
        try:
            records = await self._repository.load()
        except StoreUnavailableError as e:
            self._logger.warning(
                "notification_store_unreadable_treated_as_empty",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return set()
        self._logger.debug("notification_store_loaded", store_records_count=len(records))
        return records

    async def save(
        self,
        previous: Iterable[NotifiedRecord],
        sent: Iterable[NotifiedRecord],
        *,
        now: datetime | None = None,
    ) -> set[NotifiedRecord]:
        """Overwrite the store with unexpired `previous` plus `sent`.

        Returns:
            The record set that was written.

        Raises:
            StoreUnavailableError: If the repository cannot be written.
        """
        now = now or datetime.now(UTC)
        previous = set(previous)
        merged = self._policy.merge(previous, sent, now)
        await self._repository.save(merged)
        self._logger.info(
            "notification_store_saved",
            store_records_count=len(merged),
            store_records_pruned=len(previous - merged),
        )
        return merged
