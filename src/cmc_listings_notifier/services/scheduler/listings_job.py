# -*- coding: utf-8 -*-
"""ListingsNotifierJob: one tick of fetch -> window -> dedup -> dispatch -> persist."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol

import structlog
from structlog.contextvars import bound_contextvars

if TYPE_CHECKING:
    from cmc_listings_notifier.models.token import Token
    from cmc_listings_notifier.services.dedup import NotificationWindowPolicy
    from cmc_listings_notifier.services.dispatch import ListingDispatcher
    from cmc_listings_notifier.services.notification_store import NotificationStore


class ListingsSource(Protocol):
    """Anything that returns the latest listings (CoinMarketCapClient in production)."""

    async def get_latest_listings(self, *, limit: int | None = None) -> list["Token"]: ...


@dataclass(frozen=True)
class RunResult:
    """Counts for one tick (for logging and the --once exit code)."""

    fetched_count: int = 0
    candidate_count: int = 0
    new_count: int = 0
    delivered_count: int = 0
    failed_sends: int = 0
    store_written: bool = False


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ListingsNotifierJob:
    """Linear pipeline run once per scheduled tick. Holds no state between ticks."""

    def __init__(
        self,
        listings_source: ListingsSource,
        store: NotificationStore,
        dispatcher: ListingDispatcher,
        policy: NotificationWindowPolicy,
        *,
        clock: Callable[[], datetime] = _utc_now,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the job.

        Args:
            listings_source: Fetches latest listings (raises ListingsFetchError on failure).
            store: Notified-record store.
            dispatcher: Sends notifications.
            policy: Candidate window and retention.
            clock: Returns aware UTC "now"; read once per tick.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._source = listings_source
        self._store = store
        self._dispatcher = dispatcher
        self._policy = policy
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def run_once(self) -> RunResult:
        """Run one tick.

        Raises:
            ListingsFetchError: Listings could not be fetched; nothing was sent or written.
            StoreUnavailableError: Notifications went out but the store write failed.
        """
        now = self._clock()
        with bound_contextvars(run_at=now.isoformat()):
            tokens = await self._source.get_latest_listings()
            candidates = self._policy.select_candidates(tokens, now)
            if not candidates:
                self._logger.info(
                    "listings_job_no_new_tokens",
                    listings_fetched_count=len(tokens),
                )
                return RunResult(fetched_count=len(tokens))

            previous = await self._store.load()
            new_tokens = self._policy.exclude_notified(candidates, previous)
            if not new_tokens:
                self._logger.info(
                    "listings_job_all_already_notified",
                    listings_candidate_count=len(candidates),
                )
                return RunResult(
                    fetched_count=len(tokens),
                    candidate_count=len(candidates),
                )

            self._logger.info(
                "listings_job_dispatching",
                listings_new_count=len(new_tokens),
                listings_new_slugs=[t.slug for t in new_tokens],
            )
            report = await self._dispatcher.dispatch(new_tokens)

            store_written = False
            if report.delivered:
                await self._store.save(previous, report.records, now=now)
                store_written = True

            result = RunResult(
                fetched_count=len(tokens),
                candidate_count=len(candidates),
                new_count=len(new_tokens),
                delivered_count=len(report.delivered),
                failed_sends=report.failed_count,
                store_written=store_written,
            )
            self._logger.info(
                "listings_job_complete",
                listings_delivered_count=result.delivered_count,
                listings_failed_sends=result.failed_sends,
                store_written=store_written,
            )
            return result
