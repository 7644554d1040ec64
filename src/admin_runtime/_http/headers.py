"""Header merging for admin runtime requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import httpx

HeadersLike = Mapping[str, str] | Iterable[tuple[str, str]] | httpx.Headers

AUTHORIZATION = "authorization"


def _lowercased(headers: HeadersLike | None) -> dict[str, str]:
    if headers is None:
        return {}
    if isinstance(headers, httpx.Headers):
        items: Iterable[tuple[str, str]] = headers.items()
    elif isinstance(headers, Mapping):
        items = headers.items()
    else:
        items = headers
    return {key.lower(): value for key, value in items}


def default_headers(token: str | None) -> dict[str, str]:
    """Headers sent with every request before any override."""
    headers = {
        "accept": "application/json",
        "content-type": "application/json",
    }
    if token:
        headers[AUTHORIZATION] = f"Bearer {token}"
    return headers


def merge_headers(
    token: str | None,
    *layers: HeadersLike | None,
) -> dict[str, str]:
    """Merge header layers over the defaults for ``token``.

    Later layers win. Keys are lowercased so ``Authorization`` and
    ``authorization`` collapse into one entry. When ``token`` is falsy the
    authorization header is dropped after merging, even if a layer set it.
    """
    merged = default_headers(token)
    for layer in layers:
        merged.update(_lowercased(layer))
    if not token:
        merged.pop(AUTHORIZATION, None)
    return merged


__all__ = ["AUTHORIZATION", "HeadersLike", "default_headers", "merge_headers"]
