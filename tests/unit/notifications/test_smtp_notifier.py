# -*- coding: utf-8 -*-
"""Unit tests for SmtpEmailNotifier (fake SMTP class)."""

from __future__ import annotations

import smtplib
from collections.abc import Callable
from typing import Any

import pytest

from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.exceptions import NotificationSendError
from cmc_listings_notifier.notifications.strategies import SmtpEmailNotifier
from cmc_listings_notifier.notifications.types import NotificationMessage

MESSAGE = NotificationMessage(
    event_type="new_listing",
    message="Token: Moon Dog (MDOG)",
    title="New CoinMarketCap listing: Moon Dog (MDOG)",
)


class _FakeSmtp:
    instances: list[_FakeSmtp] = []

    def __init__(self, host: str, port: int, timeout: float) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in: tuple[str, str] | None = None
        self.sent: list[Any] = []
        _FakeSmtp.instances.append(self)

    def __enter__(self) -> _FakeSmtp:
        return self

    def __exit__(self, *args: Any) -> None:
        return None

    def starttls(self) -> None:
        self.started_tls = True

    def login(self, user: str, password: str) -> None:
        self.logged_in = (user, password)

    def send_message(self, msg: Any) -> None:
        self.sent.append(msg)


class _RefusingSmtp(_FakeSmtp):
    def send_message(self, msg: Any) -> None:
        raise smtplib.SMTPRecipientsRefused({"x@y.z": (550, b"no such user")})


def _settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory(
        notify={"channel": "email", "recipients": "a@example.com"},
        smtp={
            "host": "smtp.example.com",
            "port": 2525,
            "username": "bot@example.com",
            "password": "pw",
        },
    )


async def test_send_builds_plain_text_email_over_starttls(
    settings_factory: Callable[..., Settings],
) -> None:
    _FakeSmtp.instances.clear()
    notifier = SmtpEmailNotifier(_settings(settings_factory), smtp_factory=_FakeSmtp)
    await notifier.initialize()

    await notifier.send_notification("a@example.com", MESSAGE)

    server = _FakeSmtp.instances[-1]
    assert (server.host, server.port) == ("smtp.example.com", 2525)
    assert server.started_tls is True
    assert server.logged_in == ("bot@example.com", "pw")
    sent = server.sent[0]
    assert sent["To"] == "a@example.com"
    assert sent["From"] == "bot@example.com"
    assert sent["Subject"] == "New CoinMarketCap listing: Moon Dog (MDOG)"


async def test_smtp_error_raises_send_error(settings_factory: Callable[..., Settings]) -> None:
    notifier = SmtpEmailNotifier(_settings(settings_factory), smtp_factory=_RefusingSmtp)
    await notifier.initialize()

    with pytest.raises(NotificationSendError) as exc_info:
        await notifier.send_notification("x@y.z", MESSAGE)

    assert exc_info.value.channel == "email"


def test_requires_smtp_credentials(settings_factory: Callable[..., Settings]) -> None:
    with pytest.raises(ValueError):
        SmtpEmailNotifier(settings_factory())
