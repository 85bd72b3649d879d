# -*- coding: utf-8 -*-
"""Unit tests for ListingsNotifierJob (one tick of the pipeline)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock

import pytest

from cmc_listings_notifier.exceptions import ListingsFetchError, NotificationSendError
from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token
from cmc_listings_notifier.notifications.stylers import ListingNotificationStyler
from cmc_listings_notifier.persistence.repositories.in_memory import (
    InMemoryNotifiedRecordRepository,
)
from cmc_listings_notifier.services.dedup import NotificationWindowPolicy
from cmc_listings_notifier.services.dispatch import ListingDispatcher
from cmc_listings_notifier.services.notification_store import NotificationStore
from cmc_listings_notifier.services.scheduler import ListingsNotifierJob


def _source(tokens: list[Token] | None = None, side_effect: Any = None) -> SimpleNamespace:
    return SimpleNamespace(
        get_latest_listings=AsyncMock(return_value=tokens or [], side_effect=side_effect)
    )


def _notifier(side_effect: Any = None) -> SimpleNamespace:
    return SimpleNamespace(channel="sms", send_notification=AsyncMock(side_effect=side_effect))


def _job(
    *,
    source: SimpleNamespace,
    repo: InMemoryNotifiedRecordRepository,
    notifier: SimpleNamespace,
    policy: NotificationWindowPolicy,
    now: datetime,
    recipients: list[str] | None = None,
) -> ListingsNotifierJob:
    dispatcher = ListingDispatcher(
        notifier=cast(Any, notifier),
        styler=ListingNotificationStyler(),
        recipients=recipients or ["+15550001111"],
    )
    return ListingsNotifierJob(
        listings_source=cast(Any, source),
        store=NotificationStore(repo, policy),
        dispatcher=dispatcher,
        policy=policy,
        clock=lambda: now,
    )


def _sent_slugs(notifier: SimpleNamespace) -> list[str]:
    return [c.args[1].payload["slug"] for c in notifier.send_notification.await_args_list]


async def test_only_unstored_token_is_dispatched(
    token_factory: Callable[..., Token],
    record_factory: Callable[..., NotifiedRecord],
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    repo = InMemoryNotifiedRecordRepository([record_factory("x", minutes_ago=20)])
    notifier = _notifier()
    job = _job(
        source=_source([token_factory("x", minutes_ago=20), token_factory("y", minutes_ago=5)]),
        repo=repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    result = await job.run_once()

    assert _sent_slugs(notifier) == ["y"]
    assert result.new_count == 1
    assert result.delivered_count == 1


async def test_tokens_older_than_window_are_never_dispatched(
    token_factory: Callable[..., Token],
    memory_repo: InMemoryNotifiedRecordRepository,
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    notifier = _notifier()
    job = _job(
        source=_source([token_factory("old", minutes_ago=121)]),
        repo=memory_repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    result = await job.run_once()

    notifier.send_notification.assert_not_called()
    assert result.candidate_count == 0
    assert memory_repo.save_count == 0


async def test_empty_fetch_writes_nothing_and_dispatches_nothing(
    memory_repo: InMemoryNotifiedRecordRepository,
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    notifier = _notifier()
    job = _job(source=_source([]), repo=memory_repo, notifier=notifier, policy=policy, now=now_utc)

    result = await job.run_once()

    notifier.send_notification.assert_not_called()
    assert memory_repo.save_count == 0
    assert result.store_written is False


async def test_all_candidates_already_notified_writes_nothing(
    token_factory: Callable[..., Token],
    record_factory: Callable[..., NotifiedRecord],
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    repo = InMemoryNotifiedRecordRepository([record_factory("x")])
    notifier = _notifier()
    job = _job(
        source=_source([token_factory("x")]),
        repo=repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    await job.run_once()

    notifier.send_notification.assert_not_called()
    assert repo.save_count == 0


async def test_fetch_failure_is_fatal_and_touches_nothing(
    memory_repo: InMemoryNotifiedRecordRepository,
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    notifier = _notifier()
    job = _job(
        source=_source(side_effect=ListingsFetchError("401", status_code=401)),
        repo=memory_repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    with pytest.raises(ListingsFetchError):
        await job.run_once()

    notifier.send_notification.assert_not_called()
    assert memory_repo.save_count == 0


async def test_end_to_end_store_keeps_new_and_fresh_records_drops_stale(
    token_factory: Callable[..., Token],
    record_factory: Callable[..., NotifiedRecord],
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    fresh_prior = record_factory("fresh-prior", minutes_ago=150)
    stale_b = record_factory("b", minutes_ago=210)
    repo = InMemoryNotifiedRecordRepository([fresh_prior, stale_b])
    notifier = _notifier()
    a = token_factory("a", minutes_ago=3)
    b = token_factory("b", minutes_ago=210)
    job = _job(source=_source([a, b]), repo=repo, notifier=notifier, policy=policy, now=now_utc)

    result = await job.run_once()

    assert _sent_slugs(notifier) == ["a"]
    assert result.store_written is True
    assert await repo.load() == {fresh_prior, NotifiedRecord.from_token(a)}


async def test_second_tick_does_not_resend(
    token_factory: Callable[..., Token],
    memory_repo: InMemoryNotifiedRecordRepository,
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    notifier = _notifier()
    job = _job(
        source=_source([token_factory("a")]),
        repo=memory_repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    await job.run_once()
    await job.run_once()

    assert _sent_slugs(notifier) == ["a"]


async def test_undelivered_token_is_not_recorded(
    token_factory: Callable[..., Token],
    memory_repo: InMemoryNotifiedRecordRepository,
    policy: NotificationWindowPolicy,
    now_utc: datetime,
) -> None:
    notifier = _notifier(side_effect=NotificationSendError("down", channel="sms"))
    job = _job(
        source=_source([token_factory("a")]),
        repo=memory_repo,
        notifier=notifier,
        policy=policy,
        now=now_utc,
    )

    result = await job.run_once()

    assert result.failed_sends == 1
    assert result.store_written is False
    assert await memory_repo.load() == set()
