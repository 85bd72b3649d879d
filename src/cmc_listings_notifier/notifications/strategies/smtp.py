# -*- coding: utf-8 -*-
"""Email notification strategy (SMTP with STARTTLS, blocking client run in a thread)."""

from __future__ import annotations

import asyncio
import smtplib
import structlog
from email.mime.text import MIMEText
from typing import Any, Callable, Optional, TYPE_CHECKING

from cmc_listings_notifier.exceptions import NotificationSendError
from cmc_listings_notifier.notifications.types import NotificationMessage
from cmc_listings_notifier.notifications.strategies.base import BaseNotificationStrategy
from cmc_listings_notifier.utils.recipients import mask_recipient

if TYPE_CHECKING:
    from cmc_listings_notifier.config.config import Settings


class SmtpEmailNotifier(BaseNotificationStrategy):
    """Send each notification as one plain-text email."""

    channel = "email"

    def __init__(
        self,
        settings: "Settings",
        *,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._smtp_factory = smtp_factory

        cfg = self.settings.smtp
        if not cfg.username or not cfg.password:
            raise ValueError("SmtpEmailNotifier requires username and password.")
        self.sender: str = cfg.sender or cfg.username
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send_notification(self, recipient: str, message: NotificationMessage) -> None:
        if not self._running:
            raise NotificationSendError("Email notifier is not running", channel=self.channel)

        mime = self._build_mime(recipient, message)
        try:
            await asyncio.to_thread(self._send_sync, mime)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationSendError(
                f"SMTP send failed: {type(exc).__name__}: {exc}",
                channel=self.channel,
                error_code=getattr(exc, "smtp_code", None),
                cause=exc,
            ) from exc

        self._logger.info(
            "email_message_sent",
            email_recipient_masked=mask_recipient(recipient),
        )

    def _build_mime(self, recipient: str, message: NotificationMessage) -> MIMEText:
        mime = MIMEText(message.message, "plain", "utf-8")
        mime["Subject"] = message.title or message.event_type
        mime["From"] = self.sender
        mime["To"] = recipient
        return mime

    def _send_sync(self, mime: MIMEText) -> None:
        cfg = self.settings.smtp
        with self._smtp_factory(cfg.host, cfg.port, timeout=cfg.timeout_seconds) as server:
            if cfg.use_tls:
                server.starttls()
            server.login(cfg.username or "", cfg.password or "")
            server.send_message(mime)
