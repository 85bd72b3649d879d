# -*- coding: utf-8 -*-
"""NotificationWindowPolicy: pure time-window logic for candidate selection and dedup.

No I/O. "now" is always passed in by the caller so runs are reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token

if TYPE_CHECKING:
    from cmc_listings_notifier.config import ScheduleSettings

DEFAULT_CANDIDATE_WINDOW = timedelta(minutes=120)
DEFAULT_RETENTION = timedelta(minutes=200)


@dataclass(frozen=True)
class NotificationWindowPolicy:
    """Decides which listings are new enough to notify and which records to keep.

    candidate_window must not exceed retention, otherwise a listing could
    outlive its record and be notified twice.
    """

    candidate_window: timedelta = DEFAULT_CANDIDATE_WINDOW
    retention: timedelta = DEFAULT_RETENTION

    def __post_init__(self) -> None:
        if self.candidate_window > self.retention:
            raise ValueError(
                f"candidate_window ({self.candidate_window}) must not exceed retention ({self.retention})"
            )

    @classmethod
    def from_settings(cls, settings: "ScheduleSettings") -> NotificationWindowPolicy:
        return cls(
            candidate_window=timedelta(minutes=settings.candidate_window_minutes),
            retention=timedelta(minutes=settings.retention_minutes),
        )

    def is_candidate(self, token: Token, now: datetime) -> bool:
        """True if the token was added strictly within candidate_window before now."""
        return token.date_added > now - self.candidate_window

    def select_candidates(self, tokens: Iterable[Token], now: datetime) -> list[Token]:
        """Keep tokens added within the candidate window, in input order."""
        return [t for t in tokens if self.is_candidate(t, now)]

    @staticmethod
    def exclude_notified(
        tokens: Iterable[Token],
        records: Iterable[NotifiedRecord],
    ) -> list[Token]:
        """Drop tokens whose slug is already recorded, and repeated slugs within `tokens`."""
        seen = {r.slug for r in records}
        result: list[Token] = []
        for t in tokens:
            if t.slug in seen:
                continue
            seen.add(t.slug)
            result.append(t)
        return result

    def prune_expired(
        self,
        records: Iterable[NotifiedRecord],
        now: datetime,
    ) -> set[NotifiedRecord]:
        """Keep records whose date_added is within the retention window."""
        cutoff = now - self.retention
        return {r for r in records if r.date_added > cutoff}

    def merge(
        self,
        previous: Iterable[NotifiedRecord],
        sent: Iterable[NotifiedRecord],
        now: datetime,
    ) -> set[NotifiedRecord]:
        """Union of unexpired previous records and newly sent records."""
        return self.prune_expired(previous, now) | set(sent)
