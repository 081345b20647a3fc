"""Thin async HTTP client shared by the API adapters.

There is deliberately no retry transport and no response cache here: a failed
request fails the operation that issued it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter

from orgrights.config.http import RateLimit, TransportConfig
from orgrights.domain.errors import TransportError

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import (
        HeaderTypes,
        QueryParamTypes,
        RequestContent,
        TimeoutTypes,
        URLTypes,
    )

__all__ = ["ApiClient", "RateLimit", "TransportConfig"]

log = getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    content: RequestContent | None
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    timeout: TimeoutTypes | UseClientDefault


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport


class ApiClient:
    def __init__(
        self,
        config: TransportConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        client_kwargs: AsyncClientOptions = {"timeout": config.timeout_seconds}
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        """Send a request and return the response, raising ``TransportError`` on failure.

        Both connection-level errors and non-2xx statuses are reported as
        ``TransportError``; the status code is kept on the exception when there
        was a response.
        """

        log.debug("[%s] %s %s", self.config.name, method, url)

        async def do_request() -> httpx.Response:
            return await self._client.request(method, url, **kwargs)

        try:
            response = await self._send(do_request)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(
                f"{self.config.name}: {method} {exc.request.url} failed with HTTP {status}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{self.config.name}: {method} {url} failed: {exc}") from exc
        return response

    async def get(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def put(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def _send(self, func: Callable[[], Awaitable[httpx.Response]]) -> httpx.Response:
        if self._limiter is None:
            return await func()
        async with self._limiter:
            return await func()
