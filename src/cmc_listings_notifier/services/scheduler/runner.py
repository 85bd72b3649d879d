"""Interval runner: runs ListingsNotifierJob every N minutes until shutdown."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from cmc_listings_notifier.exceptions import NotifierError

if TYPE_CHECKING:
    from cmc_listings_notifier.config import Settings
    from cmc_listings_notifier.services.scheduler.listings_job import (
        ListingsNotifierJob,
        RunResult,
    )


class ListingsNotifierRunner:
    """Fires the job immediately, then every settings.schedule.interval_minutes.

    Ticks never overlap: the next wait starts after the previous tick returns.
    A failed tick is logged and the loop continues.
    """

    def __init__(
        self,
        job: ListingsNotifierJob,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._job = job
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def tick(self) -> RunResult | None:
        """Run the job once. Returns None when the tick failed (already logged)."""
        try:
            return await self._job.run_once()
        except NotifierError as e:
            self._logger.exception(
                "listings_job_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return None
        except Exception as e:
            self._logger.exception(
                "listings_job_unexpected_error",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return None

    async def run(self, shutdown_event: asyncio.Event) -> None:
        """Tick until shutdown_event is set (or the task is cancelled)."""
        interval_seconds = self._settings.schedule.interval_minutes * 60
        self._logger.info(
            "listings_runner_started",
            schedule_interval_minutes=self._settings.schedule.interval_minutes,
        )
        while not shutdown_event.is_set():
            await self.tick()
            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=interval_seconds)
            except asyncio.TimeoutError:
                continue
        self._logger.info("listings_runner_stopped")
