# -*- coding: utf-8 -*-
"""Unit tests for NotifiedRecord."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token


def test_from_token_copies_slug_and_date(token_factory: Callable[..., Token]) -> None:
    token = token_factory("abc")

    record = NotifiedRecord.from_token(token)

    assert record.slug == "abc"
    assert record.date_added == token.date_added


def test_to_dict_uses_iso_utc_with_z() -> None:
    record = NotifiedRecord(
        slug="abc",
        date_added=datetime(2026, 2, 13, 11, 30, tzinfo=timezone.utc),
    )

    assert record.to_dict() == {"slug": "abc", "date_added": "2026-02-13T11:30:00Z"}


def test_from_dict_accepts_offset_and_z_forms() -> None:
    a = NotifiedRecord.from_dict({"slug": "abc", "date_added": "2026-02-13T11:30:00Z"})
    b = NotifiedRecord.from_dict({"slug": "abc", "date_added": "2026-02-13T12:30:00+01:00"})

    assert a is not None and b is not None
    assert a == b


def test_from_dict_rejects_missing_fields() -> None:
    assert NotifiedRecord.from_dict({"slug": "abc"}) is None
    assert NotifiedRecord.from_dict({"date_added": "2026-02-13T11:30:00Z"}) is None


def test_records_are_hashable_and_equal_by_value() -> None:
    when = datetime(2026, 2, 13, 11, 30, tzinfo=timezone.utc)

    assert {NotifiedRecord("x", when), NotifiedRecord("x", when)} == {NotifiedRecord("x", when)}
