"""Admin runtime API clients with namespaced sub-clients."""

from __future__ import annotations

from typing import Any, Callable

import httpx

from ._http import (
    DEFAULT_TIMEOUT,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    ClientConfig,
    HeadersLike,
    RequestInit,
    iter_coroutine,
    merge_headers,
)
from .access_cards import AccessCardsClient, AsyncAccessCardsClient
from .access_rights import AccessRightsClient, AsyncAccessRightsClient
from .base_url import resolve_base_url
from .bridge import ClientBridge, decode_json, join_url
from .environment import EnvironmentContext, get_environment
from .licenses import AsyncLicensesClient, LicensesClient


def _build_config(
    *,
    api_token: str | None,
    base_path: str | None,
    base_url: str | httpx.URL | None,
    fetch_impl: Callable[..., Any] | None,
    http_client: httpx.Client | httpx.AsyncClient | None,
    timeout: float | None,
    headers: dict[str, str] | None,
    environment: EnvironmentContext | None,
) -> ClientConfig:
    return ClientConfig(
        api_token=api_token,
        base_path=base_path,
        base_url=base_url,
        fetch_impl=fetch_impl,
        http_client=http_client,
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        headers=dict(headers or {}),
        environment=environment if environment is not None else get_environment(),
    )


class _BaseAdminRuntimeClient:
    """Resolves the base URL once and wires the bridge to a transport."""

    _transport: BaseTransport

    def __init__(self, config: ClientConfig):
        self._config = config
        self._api_token = config.resolve_token()
        self._base_url = resolve_base_url(
            config.base_url, config.base_path, config.environment
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def api_token(self) -> str | None:
        return self._api_token

    def url(self, ref: str) -> httpx.URL:
        """Resolve a relative reference such as ``./licenses/x`` against the base URL."""
        return join_url(self._base_url, ref)

    def headers(self, headers: HeadersLike | None = None) -> dict[str, str]:
        """Default headers with ``headers`` merged on top.

        Authorization is only ever present when a token is configured.
        """
        return merge_headers(self._api_token, self._config.headers, headers)

    def json(self, response: httpx.Response) -> Any:
        return decode_json(response)

    async def _fetch(
        self, url: httpx.URL, init: RequestInit | None = None
    ) -> httpx.Response:
        request_init: RequestInit = {**(init or {}), "credentials": "include"}
        return await self._transport.send(url, request_init)

    def _create_bridge(self) -> ClientBridge:
        return ClientBridge(
            url=self.url,
            headers=self.headers,
            json=self.json,
            token=lambda: self._api_token,
            fetch=self._fetch,
        )


class AdminRuntimeClient(_BaseAdminRuntimeClient):
    """Synchronous admin runtime client."""

    def __init__(
        self,
        *,
        api_token: str | None = None,
        base_path: str | None = None,
        base_url: str | httpx.URL | None = None,
        fetch_impl: Callable[[httpx.URL, RequestInit], httpx.Response] | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        environment: EnvironmentContext | None = None,
    ):
        super().__init__(
            _build_config(
                api_token=api_token,
                base_path=base_path,
                base_url=base_url,
                fetch_impl=fetch_impl,
                http_client=http_client,
                timeout=timeout,
                headers=headers,
                environment=environment,
            )
        )
        self._transport = BlockingTransport(self._config)
        bridge = self._create_bridge()
        self.access_cards = AccessCardsClient(bridge)
        self.access_rights = AccessRightsClient(bridge)
        self.licenses = LicensesClient(bridge)

    def close(self) -> None:
        iter_coroutine(self._transport.close())

    def __enter__(self) -> AdminRuntimeClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncAdminRuntimeClient(_BaseAdminRuntimeClient):
    """Asynchronous admin runtime client."""

    def __init__(
        self,
        *,
        api_token: str | None = None,
        base_path: str | None = None,
        base_url: str | httpx.URL | None = None,
        fetch_impl: Callable[[httpx.URL, RequestInit], Any] | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        environment: EnvironmentContext | None = None,
    ):
        super().__init__(
            _build_config(
                api_token=api_token,
                base_path=base_path,
                base_url=base_url,
                fetch_impl=fetch_impl,
                http_client=http_client,
                timeout=timeout,
                headers=headers,
                environment=environment,
            )
        )
        self._transport = AsyncTransport(self._config)
        bridge = self._create_bridge()
        self.access_cards = AsyncAccessCardsClient(bridge)
        self.access_rights = AsyncAccessRightsClient(bridge)
        self.licenses = AsyncLicensesClient(bridge)

    async def aclose(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> AsyncAdminRuntimeClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


def create_admin_runtime_client(**options: Any) -> AdminRuntimeClient:
    """Create a synchronous client; see ``AdminRuntimeClient`` for options."""
    return AdminRuntimeClient(**options)


def create_async_admin_runtime_client(**options: Any) -> AsyncAdminRuntimeClient:
    """Create an asynchronous client; see ``AsyncAdminRuntimeClient`` for options."""
    return AsyncAdminRuntimeClient(**options)


__all__ = [
    "AdminRuntimeClient",
    "AsyncAdminRuntimeClient",
    "create_admin_runtime_client",
    "create_async_admin_runtime_client",
]
