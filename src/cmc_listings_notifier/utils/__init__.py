# -*- coding: utf-8 -*-
"""Utility modules."""

from cmc_listings_notifier.utils.recipients import mask_recipient, split_recipients
from cmc_listings_notifier.utils.timestamps import format_utc, parse_utc

__all__ = ["format_utc", "mask_recipient", "parse_utc", "split_recipients"]
