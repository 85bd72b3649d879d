"""Dispatcher: one notification per recipient per new listing, best effort."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from cmc_listings_notifier.exceptions import NotificationSendError
from cmc_listings_notifier.models.notified_record import NotifiedRecord
from cmc_listings_notifier.models.token import Token
from cmc_listings_notifier.utils.recipients import mask_recipient

if TYPE_CHECKING:
    from cmc_listings_notifier.notifications.strategies import BaseNotificationStrategy
    from cmc_listings_notifier.notifications.types import NotificationStyler


@dataclass(frozen=True)
class DispatchReport:
    """Outcome of one dispatch call."""

    delivered: tuple[Token, ...] = ()
    """Tokens that reached at least one recipient."""
    sent_count: int = 0
    failed_count: int = 0

    @property
    def records(self) -> list[NotifiedRecord]:
        """NotifiedRecord for every delivered token."""
        return [NotifiedRecord.from_token(t) for t in self.delivered]


class ListingDispatcher:
    """Formats each token once and sends it to every recipient through one channel.

    A failed send is logged and skipped; it never aborts the remaining sends.
    """

    def __init__(
        self,
        notifier: BaseNotificationStrategy,
        styler: NotificationStyler,
        recipients: Sequence[str],
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            notifier: Channel used for every send (SMS, email, console).
            styler: Builds the message for a token.
            recipients: Phone numbers or email addresses, in send order.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._notifier = notifier
        self._styler = styler
        self._recipients = list(recipients)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def recipients(self) -> list[str]:
        return list(self._recipients)

    async def dispatch(self, tokens: Sequence[Token]) -> DispatchReport:
        """Send every token to every recipient.

        Args:
            tokens: New listings (already windowed and deduplicated).

        Returns:
            DispatchReport with delivered tokens and send counts.
        """
        if not tokens:
            return DispatchReport()
        if not self._recipients:
            self._logger.warning(
                "dispatch_no_recipients",
                dispatch_tokens_count=len(tokens),
            )
            return DispatchReport()

        delivered: list[Token] = []
        sent = 0
        failed = 0
        channel = self._notifier.channel
        for token in tokens:
            message = self._styler.build(token)
            token_sent = 0
            with bound_contextvars(token_slug=token.slug, dispatch_channel=channel):
                for recipient in self._recipients:
                    recipient_masked = mask_recipient(recipient)
                    try:
                        await self._notifier.send_notification(recipient, message)
                    except NotificationSendError as e:
                        failed += 1
                        self._logger.error(
                            "dispatch_send_failed",
                            recipient_masked=recipient_masked,
                            error_code=e.error_code,
                            error_message=str(e),
                        )
                        continue
                    sent += 1
                    token_sent += 1
                    self._logger.info(
                        "dispatch_send_succeeded",
                        recipient_masked=recipient_masked,
                    )
            if token_sent:
                delivered.append(token)

        self._logger.info(
            "dispatch_complete",
            dispatch_tokens_count=len(tokens),
            dispatch_delivered_count=len(delivered),
            dispatch_sent_count=sent,
            dispatch_failed_count=failed,
        )
        return DispatchReport(delivered=tuple(delivered), sent_count=sent, failed_count=failed)
