# -*- coding: utf-8 -*-
"""CoinMarketCap Pro API client (latest listings)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, cast
from structlog.contextvars import bound_contextvars

from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.clients.coinmarketcap.schema import (
    ListingSchema,
    ListingsLatestResponseSchema,
)
from cmc_listings_notifier.exceptions import ApiRequestError, ListingsFetchError
from cmc_listings_notifier.models.token import Token

if TYPE_CHECKING:
    from cmc_listings_notifier.clients.http import AsyncHttpClient

LISTINGS_LATEST_PATH = "/v1/cryptocurrency/listings/latest"


class CoinMarketCapClient:
    """Client for the CoinMarketCap listings/latest endpoint, sorted by date added."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.cmc).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.cmc.host.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "X-CMC_PRO_API_KEY": self._settings.cmc.api_key or "",
        }

    async def get_latest_listings(self, *, limit: Optional[int] = None) -> List[Token]:
        """Fetch the most recently added listings (newest first).

        Items missing slug or date_added are skipped.

        Args:
            limit: Number of listings; default from settings.cmc.listings_limit.

        Returns:
            Tokens parsed from the `data` array.

        Raises:
            ListingsFetchError: If the request fails or the body has no `data` list.
        """
        limit = limit if limit is not None else self._settings.cmc.listings_limit
        url = f"{self._base_url()}{LISTINGS_LATEST_PATH}"
        params: Dict[str, Any] = {
            "sort": "date_added",
            "sort_dir": "desc",
            "limit": limit,
        }
        with bound_contextvars(cmc_limit=limit):
            try:
                body = await self._http.get(url, params=params, headers=self._headers())
            except ApiRequestError as e:
                raise ListingsFetchError(
                    f"Failed to call CoinMarketCap API: {e}",
                    url=url,
                    status_code=e.status_code,
                    cause=e,
                ) from e

            payload = cast(ListingsLatestResponseSchema, body) if isinstance(body, dict) else None
            data = payload.get("data") if payload is not None else None
            if not isinstance(data, list):
                self._logger.warning(
                    "cmc_listings_missing_data",
                    cmc_response_type=type(body).__name__,
                )
                raise ListingsFetchError(
                    "CoinMarketCap response has no 'data' list",
                    url=url,
                )

            tokens: List[Token] = []
            skipped = 0
            for item in cast(list[ListingSchema], data):
                token = Token.from_response(item) if isinstance(item, dict) else None
                if token is None:
                    skipped += 1
                    continue
                tokens.append(token)

            self._logger.debug(
                "cmc_listings_fetched",
                cmc_listings_count=len(tokens),
                cmc_listings_skipped=skipped,
            )
            return tokens
