# -*- coding: utf-8 -*-
"""
Entry point for the CoinMarketCap new-listings notifier.

Orchestrates: logging, settings, container, notifier lifecycle, interval runner, shutdown (SIGINT/SIGTERM).
Each tick: fetch listings -> 120-minute window -> dedup against store -> dispatch -> persist.

Run with: python -m cmc_listings_notifier.main            (loop every SCHEDULE__INTERVAL_MINUTES)
      or: python -m cmc_listings_notifier.main --once     (single tick, for an external cron)
"""
from __future__ import annotations

import asyncio
import signal
import sys
import click
import structlog
from typing import Any

from cmc_listings_notifier.DI import Container
from cmc_listings_notifier.config import get_settings
from cmc_listings_notifier.logging.config import configure_logging


def _setup_signals(shutdown_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:
            pass  # Windows has no add_signal_handler


async def run(*, once: bool = False) -> bool:
    """Run the notifier. Returns False when a single (--once) tick failed."""
    configure_logging()
    logger: Any = structlog.get_logger("main")
    settings = get_settings()
    settings.validate_required()

    container = Container()
    notifier = container.notifier()
    http_client = container.http_client()
    try:
        await notifier.initialize()
        logger.info(
            "main_started",
            notify_channel=settings.notify.channel,
            notify_recipients_count=len(container.dispatcher().recipients),
            storage_backend=settings.storage.backend,
            run_once=once,
        )
        runner = container.runner()
        if once:
            return await runner.tick() is not None

        shutdown_event = asyncio.Event()
        _setup_signals(shutdown_event)
        await runner.run(shutdown_event)
        return True
    finally:
        await notifier.shutdown()
        await http_client.aclose()
        logger.info("main_shutdown_complete")


@click.command()
@click.option("--once", is_flag=True, help="Run a single tick and exit (for cron).")
def main(once: bool) -> None:
    """Notify recipients about tokens newly listed on CoinMarketCap."""
    ok = asyncio.run(run(once=once))
    if not ok:
        sys.exit(1)


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
