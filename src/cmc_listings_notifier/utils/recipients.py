"""Helpers for recipient lists (phone numbers or email addresses)."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[;,]")


def split_recipients(raw: str | None) -> list[str]:
    """Split a ';' or ',' separated recipient string, dropping blanks and duplicates.

    Order of first appearance is preserved.
    """
    if not raw or not raw.strip():
        return []
    seen: set[str] = set()
    result: list[str] = []
    for part in _SEPARATORS.split(raw):
        item = part.strip()
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def mask_recipient(recipient: str | None) -> str:
    """Return a masked recipient for logging (e.g. +1555***4567, jo***@example.com)."""
    if not recipient:
        return "***"
    if "@" in recipient:
        local, _, domain = recipient.partition("@")
        return f"{local[:2]}***@{domain}"
    if len(recipient) < 8:
        return "***"
    return f"{recipient[:5]}***{recipient[-4:]}"
