"""Licenses API client.

Licenses own plans, and plans own prices. Each level has its own DELETE
endpoint nested under the parent's lookup::

    licenses/{lic_lookup}
    licenses/{lic_lookup}/{plan_lookup}
    licenses/{lic_lookup}/{plan_lookup}/{price_lookup}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ._http import iter_coroutine
from .bridge import delete_init, encode_lookup

if TYPE_CHECKING:
    from ._http import RequestInit
    from .bridge import ClientBridge


class BaseLicensesClient:
    """Base licenses client with shared async business logic."""

    def __init__(self, bridge: ClientBridge):
        self._bridge = bridge

    async def _send_delete(self, *lookups: str, init: RequestInit | None) -> httpx.Response:
        segments = "/".join(encode_lookup(lookup) for lookup in lookups)
        target = self._bridge.url(f"./licenses/{segments}")
        return await self._bridge.fetch(target, delete_init(self._bridge, init))

    async def _delete(self, lic_lookup: str, init: RequestInit | None = None) -> httpx.Response:
        return await self._send_delete(lic_lookup, init=init)

    async def _delete_plan(
        self,
        lic_lookup: str,
        plan_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        return await self._send_delete(lic_lookup, plan_lookup, init=init)

    async def _delete_plan_price(
        self,
        lic_lookup: str,
        plan_lookup: str,
        price_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        return await self._send_delete(lic_lookup, plan_lookup, price_lookup, init=init)


class LicensesClient(BaseLicensesClient):
    def delete(self, lic_lookup: str, init: RequestInit | None = None) -> httpx.Response:
        """Delete a license."""
        return iter_coroutine(self._delete(lic_lookup, init))

    def delete_plan(
        self,
        lic_lookup: str,
        plan_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        """Delete one plan of a license."""
        return iter_coroutine(self._delete_plan(lic_lookup, plan_lookup, init))

    def delete_plan_price(
        self,
        lic_lookup: str,
        plan_lookup: str,
        price_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        """Delete one price of a license plan."""
        return iter_coroutine(
            self._delete_plan_price(lic_lookup, plan_lookup, price_lookup, init)
        )


class AsyncLicensesClient(BaseLicensesClient):
    async def delete(self, lic_lookup: str, init: RequestInit | None = None) -> httpx.Response:
        """Delete a license."""
        return await self._delete(lic_lookup, init)

    async def delete_plan(
        self,
        lic_lookup: str,
        plan_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        """Delete one plan of a license."""
        return await self._delete_plan(lic_lookup, plan_lookup, init)

    async def delete_plan_price(
        self,
        lic_lookup: str,
        plan_lookup: str,
        price_lookup: str,
        init: RequestInit | None = None,
    ) -> httpx.Response:
        """Delete one price of a license plan."""
        return await self._delete_plan_price(lic_lookup, plan_lookup, price_lookup, init)


__all__ = ["BaseLicensesClient", "LicensesClient", "AsyncLicensesClient"]
