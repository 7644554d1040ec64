"""The capability bundle shared by every resource sub-client."""

from __future__ import annotations

import urllib.parse
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from ._http import HeadersLike, RequestInit

# encodeURIComponent leaves these unescaped on top of quote()'s defaults
_LOOKUP_SAFE = "!*'()"


@dataclass(frozen=True)
class ClientBridge:
    """URL building, header building, decoding, token access and dispatch."""

    url: Callable[[str], httpx.URL]
    headers: Callable[[HeadersLike | None], dict[str, str]]
    json: Callable[[httpx.Response], Any]
    token: Callable[[], str | None]
    fetch: Callable[[httpx.URL, RequestInit | None], Awaitable[httpx.Response]]


def encode_lookup(lookup: str) -> str:
    """Percent-encode one path segment.

    ``.`` and ``..`` are encoded as ``%2E`` so relative joining keeps them as
    a segment instead of walking up the path.

    Raises:
        ValueError: If ``lookup`` is empty.
    """
    if not lookup:
        raise ValueError("lookup must be a non-empty string")
    if lookup in (".", ".."):
        return "%2E" * len(lookup)
    return urllib.parse.quote(lookup, safe=_LOOKUP_SAFE)


def join_url(base_url: httpx.URL, ref: str) -> httpx.URL:
    """Resolve ``ref`` against ``base_url``, treating the base as a directory."""
    path = base_url.raw_path.split(b"?", 1)[0]
    if not path.endswith(b"/"):
        base_url = base_url.copy_with(raw_path=path + b"/")
    return base_url.join(ref)


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON body; an empty body decodes to None."""
    if not response.content:
        return None
    return response.json()


def delete_init(bridge: ClientBridge, init: RequestInit | None) -> RequestInit:
    """DELETE request init with caller overrides and recomputed headers."""
    overrides = init or {}
    request_init: RequestInit = {"method": "DELETE", **overrides}
    request_init["headers"] = bridge.headers(overrides.get("headers"))
    return request_init


__all__ = ["ClientBridge", "decode_json", "delete_init", "encode_lookup", "join_url"]
