"""Resolution of the absolute base URL every request is addressed against.

Resolution never raises. Each failure degrades to a deterministic default:

1. An ``httpx.URL`` ``base_url`` is cloned.
2. A non-blank string ``base_url``, stripped of surrounding whitespace, is
   used as-is when absolute, otherwise resolved against the environment
   origin. A ``scheme:rest`` string without a host (``localhost:8000``)
   survives that join unchanged.
3. Otherwise ``base_path``, or the path detected from the environment's
   document context, is joined with the origin.

When the environment carries no origin, ``DEFAULT_ORIGIN`` is used.
"""

from __future__ import annotations

import logging

import httpx

from ._http.config import DEFAULT_ORIGIN
from .environment import DocumentContext, EnvironmentContext

logger = logging.getLogger(__name__)


def _pathname(url: httpx.URL) -> str:
    return url.raw_path.split(b"?", 1)[0].decode("ascii")


def _parse_absolute(value: str) -> httpx.URL | None:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL:
        return None
    return url if url.is_absolute_url else None


def _origin(environment: EnvironmentContext | None) -> httpx.URL:
    raw = environment.origin if environment is not None else None
    if raw:
        url = _parse_absolute(raw)
        if url is not None:
            return httpx.URL(f"{url.scheme}://{url.netloc.decode('ascii')}/")
        logger.debug("Ignoring invalid origin %r, using %s", raw, DEFAULT_ORIGIN)
    return httpx.URL(f"{DEFAULT_ORIGIN}/")


def _document_base_path(document: DocumentContext | None, origin: httpx.URL) -> str:
    if document is None:
        return "/"

    href = document.base_href or ""
    if href:
        try:
            return _pathname(origin.join(href)) or "/"
        except httpx.InvalidURL:
            return href if href.startswith("/") else f"/{href}"

    if document.base_uri:
        url = _parse_absolute(document.base_uri)
        if url is not None:
            return _pathname(url) or "/"
        logger.debug("Ignoring invalid document base URI %r", document.base_uri)

    return "/"


def resolve_base_url(
    base_url: str | httpx.URL | None = None,
    base_path: str | None = None,
    environment: EnvironmentContext | None = None,
) -> httpx.URL:
    """Resolve the absolute base URL for a client.

    Args:
        base_url: Absolute or relative base URL. Takes precedence over
            ``base_path`` when given and not blank.
        base_path: Path joined with the environment origin, e.g. ``"/admin"``.
        environment: Origin and document context. ``None`` means no origin
            and no document.

    Returns:
        A new ``httpx.URL``; callers may not mutate the caller's value
        through it.
    """
    if isinstance(base_url, httpx.URL):
        return httpx.URL(str(base_url))

    origin = _origin(environment)

    value = base_url.strip() if isinstance(base_url, str) else ""
    if value:
        absolute = _parse_absolute(value)
        if absolute is not None:
            return absolute
        try:
            return origin.join(value)
        except httpx.InvalidURL:
            logger.debug("Unresolvable base URL %r, using %s", value, origin)
            return origin

    if base_path is not None:
        path = base_path
    else:
        path = _document_base_path(
            environment.document if environment is not None else None, origin
        )

    try:
        return origin.join(path or "/")
    except httpx.InvalidURL:
        logger.debug("Unresolvable base path %r, using %s", path, origin)
        return origin


__all__ = ["resolve_base_url"]
