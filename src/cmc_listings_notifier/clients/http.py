# -*- coding: utf-8 -*-
"""Async HTTP client (single attempt per request, JSON in and out)."""

from __future__ import annotations

import asyncio
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Mapping, Optional
from structlog.contextvars import bound_contextvars

from cmc_listings_notifier.config import Settings
from cmc_listings_notifier.exceptions import ApiRequestError

_ERROR_BODY_MAX_CHARS = 500


class AsyncHttpClient:
    """Async HTTP client shared by the CoinMarketCap and Twilio clients.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager. Requests are not retried.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.cmc.timeout_seconds).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.cmc.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Args:
            url: Full URL to request.
            params: Optional query parameters.
            headers: Optional request headers (e.g. API key).

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            ApiRequestError: On transport error, timeout, non-2xx status or non-JSON body.
        """
        return await self._request("GET", url, params=params or {}, headers=headers)

    async def post_form(
        self,
        url: str,
        *,
        data: Mapping[str, str],
        auth: Optional[aiohttp.BasicAuth] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Perform a form-encoded POST request and return parsed JSON.

        Args:
            url: Full URL to request.
            data: Form fields (application/x-www-form-urlencoded).
            auth: Optional HTTP basic auth.
            headers: Optional request headers.

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            ApiRequestError: On transport error, timeout, non-2xx status or non-JSON body.
        """
        return await self._request("POST", url, data=dict(data), auth=auth, headers=headers)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        request_id = uuid.uuid4().hex[:12]
        with bound_contextvars(
            http_method=method,
            http_url=url,
            http_request_id=request_id,
        ):
            try:
                session = await self._get_session()
                async with session.request(method, url, **kwargs) as response:
                    if response.status >= 400:
                        body = await response.text()
                        self._logger.warning(
                            "http_request_failed_status",
                            http_status_code=response.status,
                            http_body=body[:_ERROR_BODY_MAX_CHARS],
                        )
                        raise ApiRequestError(
                            f"{method} {url} returned {response.status}: "
                            f"{body[:_ERROR_BODY_MAX_CHARS]}",
                            url=url,
                            status_code=response.status,
                        )
                    payload = await response.json(content_type=None)
                    self._logger.debug(
                        "http_request_succeeded",
                        http_status_code=response.status,
                    )
                    return payload
            except ApiRequestError:
                raise
            except ValueError as e:
                # aiohttp raises json.JSONDecodeError (a ValueError) on a non-JSON body
                self._logger.warning(
                    "http_request_invalid_json",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise ApiRequestError(
                    f"{method} {url} returned a non-JSON body",
                    url=url,
                    cause=e,
                ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.warning(
                    "http_request_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise ApiRequestError(
                    f"{method} {url} failed: {type(e).__name__}: {e}",
                    url=url,
                    status_code=getattr(e, "status", None),
                    cause=e,
                ) from e
