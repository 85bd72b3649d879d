# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token
from cmc_listings_notifier.persistence.repositories.in_memory import (
    InMemoryNotifiedRecordRepository,
)
from cmc_listings_notifier.services.dedup import NotificationWindowPolicy


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings from explicit sections (console channel, memory store by default)."""

    def _build(**sections: Any) -> Settings:
        sections.setdefault("cmc", {"api_key": "test-cmc-key"})
        sections.setdefault("storage", {"backend": "memory"})
        sections.setdefault("notify", {"channel": "console", "recipients": "alice;bob"})
        return Settings(**sections)

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def token_factory(now_utc: datetime) -> Callable[..., Token]:
    """Build Token added `minutes_ago` before now_utc, with easy overrides."""

    def _build(slug: str = "new-coin", *, minutes_ago: float = 10, **overrides: Any) -> Token:
        return Token(
            name=overrides.pop("name", slug.replace("-", " ").title()),
            symbol=overrides.pop("symbol", slug[:3].upper()),
            slug=slug,
            date_added=overrides.pop("date_added", now_utc - timedelta(minutes=minutes_ago)),
            price_usd=overrides.pop("price_usd", 0.0123),
            percent_change_1h=overrides.pop("percent_change_1h", 1.5),
            percent_change_24h=overrides.pop("percent_change_24h", -3.25),
            platform_name=overrides.pop("platform_name", None),
        )

    return _build


@pytest.fixture
def record_factory(now_utc: datetime) -> Callable[..., NotifiedRecord]:
    def _build(slug: str, *, minutes_ago: float = 10) -> NotifiedRecord:
        return NotifiedRecord(slug=slug, date_added=now_utc - timedelta(minutes=minutes_ago))

    return _build


@pytest.fixture
def policy() -> NotificationWindowPolicy:
    """Default windows: 120-minute candidates, 200-minute retention."""
    return NotificationWindowPolicy()


@pytest.fixture
def memory_repo() -> InMemoryNotifiedRecordRepository:
    """Fresh in-memory notified-record repository per test."""
    return InMemoryNotifiedRecordRepository()
