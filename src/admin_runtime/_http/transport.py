"""Transport layer for HTTP operations."""

from __future__ import annotations

import abc
import inspect
import logging
from typing import Any, Literal, TypedDict

import httpx

from .config import ClientConfig

logger = logging.getLogger(__name__)

Credentials = Literal["include", "omit", "same-origin"]


class RequestInit(TypedDict, total=False):
    """Per-request overrides, shallow-merged over the operation defaults."""

    method: str
    headers: dict[str, str]
    params: dict[str, Any]
    timeout: float | httpx.Timeout | None
    extensions: dict[str, Any]
    credentials: Credentials


class BaseTransport(abc.ABC):
    """Abstract transport with async interface."""

    def __init__(self, config: ClientConfig):
        self.config = config

    async def send(self, url: httpx.URL, init: RequestInit) -> httpx.Response:
        method = init.get("method", "GET")
        logger.debug("%s %s", method, url)
        if self.config.fetch_impl is not None:
            result = self.config.fetch_impl(url, init)
            if inspect.isawaitable(result):
                result = await result
            return result
        return await self._send(url, init)

    def _build_request(
        self,
        client: httpx.Client | httpx.AsyncClient,
        url: httpx.URL,
        init: RequestInit,
    ) -> httpx.Request:
        request = client.build_request(
            init.get("method", "GET"),
            url,
            params=init.get("params"),
            headers=init.get("headers"),
            timeout=init.get("timeout", httpx.USE_CLIENT_DEFAULT),
            extensions=init.get("extensions"),
        )
        if init.get("credentials") == "omit":
            request.headers.pop("cookie", None)
        return request

    @abc.abstractmethod
    async def _send(self, url: httpx.URL, init: RequestInit) -> httpx.Response: ...

    @abc.abstractmethod
    async def close(self) -> None: ...


class BlockingTransport(BaseTransport):
    """Sync I/O transport. Methods are async def but don't suspend."""

    def __init__(self, config: ClientConfig):
        super().__init__(config)
        self._client: httpx.Client | None = None
        self._owns_client = False
        if config.http_client is not None:
            if not isinstance(config.http_client, httpx.Client):
                raise TypeError(
                    f"http_client must be an httpx.Client, got {type(config.http_client).__name__}"
                )
            self._client = config.http_client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self.config.timeout))
            self._owns_client = True
        return self._client

    async def _send(self, url: httpx.URL, init: RequestInit) -> httpx.Response:
        client = self._get_client()
        return client.send(self._build_request(client, url, init))

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
            self._owns_client = False


class AsyncTransport(BaseTransport):
    """Async I/O transport using httpx.AsyncClient."""

    def __init__(self, config: ClientConfig):
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None
        self._owns_client = False
        if config.http_client is not None:
            if not isinstance(config.http_client, httpx.AsyncClient):
                raise TypeError(
                    "http_client must be an httpx.AsyncClient, "
                    f"got {type(config.http_client).__name__}"
                )
            self._client = config.http_client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout))
            self._owns_client = True
        return self._client

    async def _send(self, url: httpx.URL, init: RequestInit) -> httpx.Response:
        client = self._get_client()
        return await client.send(self._build_request(client, url, init))

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._owns_client = False


__all__ = [
    "AsyncTransport",
    "BaseTransport",
    "BlockingTransport",
    "Credentials",
    "RequestInit",
]
