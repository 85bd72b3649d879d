# -*- coding: utf-8 -*-
"""Twilio Messages REST API client (send one SMS)."""

from __future__ import annotations

import aiohttp
import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional, cast

from cmc_listings_notifier.clients.twilio.schema import MessageSchema
from cmc_listings_notifier.config import Settings

if TYPE_CHECKING:
    from cmc_listings_notifier.clients.http import AsyncHttpClient


class TwilioMessagesClient:
    """Creates Message resources through the Twilio REST API using basic auth."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _messages_url(self) -> str:
        cfg = self._settings.twilio
        return f"{cfg.api_host.rstrip('/')}/2010-04-01/Accounts/{cfg.account_sid}/Messages.json"

    async def create_message(self, *, to: str, body: str) -> MessageSchema:
        """Send `body` to `to` from the configured sender.

        Returns:
            The created Message resource (check error_code/error_message).

        Raises:
            ApiRequestError: If Twilio rejects the request (non-2xx) or is unreachable.
        """
        cfg = self._settings.twilio
        auth = aiohttp.BasicAuth(cfg.account_sid or "", cfg.auth_token or "")
        data = await self._http.post_form(
            self._messages_url(),
            data={"To": to, "From": cfg.sender or "", "Body": body},
            auth=auth,
        )
        if not isinstance(data, dict):
            self._logger.warning(
                "twilio_message_non_dict",
                twilio_response_type=type(data).__name__,
            )
            return MessageSchema()
        return cast(MessageSchema, data)
