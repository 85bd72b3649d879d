"""Twilio Messages API response types (POST /2010-04-01/Accounts/{sid}/Messages.json)."""

from __future__ import annotations

from typing import TypedDict


class MessageSchema(TypedDict, total=False):
    """Message resource. Keys match API response (snake_case)."""

    sid: str
    account_sid: str
    to: str
    body: str
    status: str
    error_code: int | None
    error_message: str | None
    date_created: str
