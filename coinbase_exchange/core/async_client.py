"""asyncio flavour of the dispatcher built on aiohttp."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp

from .auth import Credentials
from .client import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT,
    PreparedRequest,
    RequestSpec,
    resolve_base_url,
)
from .responses import NormalizedResponse, RequestCancelled, TransportError, normalize_response

LOGGER = logging.getLogger(__name__)


class AsyncCoinbaseClient:
    """Non-blocking dispatcher with the same signing and normalization rules.

    Concurrent ``dispatch`` calls share nothing but the immutable credentials;
    each call captures its own timestamp.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        api_target: str = "exchange",
        sandbox: bool = False,
        base_url: str | None = None,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        escape_params: bool = True,
        sign_query_string: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.credentials = credentials
        self.base_url = resolve_base_url(api_target, sandbox=sandbox, base_url=base_url)
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_redirects = max_redirects
        self.escape_params = escape_params
        self.sign_query_string = sign_query_string
        self.clock = clock
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def dispatch(self, spec: RequestSpec) -> NormalizedResponse:
        prepared = PreparedRequest(
            spec,
            self.base_url,
            self.credentials,
            self.clock,
            escape_params=self.escape_params,
            sign_query_string=self.sign_query_string,
        )
        session = self._get_session()
        try:
            async with session.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                data=prepared.data,
                timeout=self.timeout,
                max_redirects=self.max_redirects,
            ) as response:
                status = response.status
                text = await response.text()
        except asyncio.CancelledError:
            LOGGER.info("%s %s cancelled", spec.method, spec.endpoint)
            return RequestCancelled(f"{spec.method} {spec.endpoint} was cancelled")
        except asyncio.TimeoutError:
            LOGGER.warning("%s %s timed out", spec.method, spec.endpoint)
            return TransportError(f"TimeoutError: request exceeded {self.timeout.total}s")
        except aiohttp.ClientError as exc:
            LOGGER.warning("%s %s failed: %s", spec.method, spec.endpoint, exc)
            return TransportError(f"{type(exc).__name__}: {exc}")

        result = normalize_response(status, text)
        LOGGER.debug("%s %s -> %s (%s)", spec.method, spec.endpoint, status, type(result).__name__)
        return result

    async def get(
        self,
        endpoint: str,
        *,
        public: bool = True,
        params: Mapping[str, Any] | None = None,
    ) -> NormalizedResponse:
        return await self.dispatch(
            RequestSpec(endpoint, "GET", is_public=public, query_params=params or {})
        )

    async def post(self, endpoint: str, body: Any = None, *, public: bool = False) -> NormalizedResponse:
        return await self.dispatch(RequestSpec(endpoint, "POST", is_public=public, body=body))

    async def delete(
        self,
        endpoint: str,
        *,
        public: bool = False,
        params: Mapping[str, Any] | None = None,
    ) -> NormalizedResponse:
        return await self.dispatch(
            RequestSpec(endpoint, "DELETE", is_public=public, query_params=params or {})
        )

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AsyncCoinbaseClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


__all__ = ["AsyncCoinbaseClient"]
