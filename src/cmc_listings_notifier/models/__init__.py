# -*- coding: utf-8 -*-
"""Domain models."""

from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token

__all__ = [
    "NotifiedRecord",
    "Token",
]
