"""Access cards API client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ._http import iter_coroutine
from .bridge import delete_init, encode_lookup

if TYPE_CHECKING:
    from ._http import RequestInit
    from .bridge import ClientBridge


class BaseAccessCardsClient:
    """Shared async implementation for the access cards resource."""

    def __init__(self, bridge: ClientBridge):
        self._bridge = bridge

    async def _delete(self, lookup: str, init: RequestInit | None = None) -> httpx.Response:
        target = self._bridge.url(f"./access-cards/{encode_lookup(lookup)}")
        return await self._bridge.fetch(target, delete_init(self._bridge, init))


class AccessCardsClient(BaseAccessCardsClient):
    def delete(self, lookup: str, init: RequestInit | None = None) -> httpx.Response:
        """Delete an access card.

        Non-2xx statuses are not raised; inspect ``response.status_code``.
        """
        return iter_coroutine(self._delete(lookup, init))


class AsyncAccessCardsClient(BaseAccessCardsClient):
    async def delete(self, lookup: str, init: RequestInit | None = None) -> httpx.Response:
        """Delete an access card.

        Non-2xx statuses are not raised; inspect ``response.status_code``.
        """
        return await self._delete(lookup, init)


__all__ = ["BaseAccessCardsClient", "AccessCardsClient", "AsyncAccessCardsClient"]
