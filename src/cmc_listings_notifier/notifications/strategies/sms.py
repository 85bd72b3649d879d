# -*- coding: utf-8 -*-
"""SMS notification strategy (Twilio Messages API)."""

from __future__ import annotations

import structlog
from typing import Any, Callable, Optional, TYPE_CHECKING

from cmc_listings_notifier.exceptions import ApiRequestError, NotificationSendError
from cmc_listings_notifier.notifications.types import NotificationMessage
from cmc_listings_notifier.notifications.strategies.base import BaseNotificationStrategy
from cmc_listings_notifier.utils.recipients import mask_recipient

if TYPE_CHECKING:
    from cmc_listings_notifier.clients.twilio import TwilioMessagesClient
    from cmc_listings_notifier.config.config import Settings


class TwilioSmsNotifier(BaseNotificationStrategy):
    """Send each notification as one SMS through Twilio."""

    channel = "sms"

    def __init__(
        self,
        settings: "Settings",
        messages_client: "TwilioMessagesClient",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._client = messages_client

        cfg = self.settings.twilio
        if not cfg.account_sid or not cfg.auth_token or not cfg.sender:
            raise ValueError("TwilioSmsNotifier requires account_sid, auth_token and sender.")
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
            raise NotificationSendError("SMS notifier is not running", channel=self.channel)

        try:
            result = await self._client.create_message(to=recipient, body=message.message)
        except ApiRequestError as exc:
            raise NotificationSendError(
                f"Twilio request failed: {exc}",
                channel=self.channel,
                error_code=exc.status_code,
                cause=exc,
            ) from exc

        self._logger.info(
            "sms_message_processed",
            sms_recipient_masked=mask_recipient(recipient),
            sms_sid=result.get("sid"),
            sms_status=result.get("status"),
        )
        error_code = result.get("error_code")
        error_message = result.get("error_message")
        if error_code is not None or error_message is not None:
            raise NotificationSendError(
                f"SMS message failed with status code: {error_code} - {error_message}",
                channel=self.channel,
                error_code=error_code,
            )
