from __future__ import annotations

import os
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Mapping

__all__ = [
    "BASE_HREF_ENV_VAR",
    "BASE_URI_ENV_VAR",
    "ORIGIN_ENV_VAR",
    "DocumentContext",
    "EnvironmentContext",
    "get_environment",
]

ORIGIN_ENV_VAR = "ADMIN_RUNTIME_ORIGIN"
BASE_HREF_ENV_VAR = "ADMIN_RUNTIME_BASE_HREF"
BASE_URI_ENV_VAR = "ADMIN_RUNTIME_BASE_URI"


class _BaseHrefParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.href: str | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "base" or self.href is not None:
            return
        for name, value in attrs:
            if name == "href":
                self.href = value or ""
                return


@dataclass(frozen=True)
class DocumentContext:
    """The parts of a hosting page that influence the base path.

    ``base_href`` is the ``href`` of the page's first ``<base href>`` element
    and ``base_uri`` is the page's own absolute URL.
    """

    base_href: str | None = None
    base_uri: str | None = None

    @classmethod
    def from_html(cls, markup: str, base_uri: str | None = None) -> DocumentContext:
        """Build a context from an HTML page, reading its first ``<base href>``."""
        parser = _BaseHrefParser()
        parser.feed(markup)
        parser.close()
        return cls(base_href=parser.href, base_uri=base_uri)


@dataclass(frozen=True)
class EnvironmentContext:
    """Ambient location information used to resolve the client's base URL.

    ``origin`` plays the role of the hosting location's origin
    (``scheme://host[:port]``). ``document`` is ``None`` when the client does
    not run on behalf of a page.
    """

    origin: str | None = None
    document: DocumentContext | None = None


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value == "":
        return None
    return value


def get_environment(env: Mapping[str, str] | None = None) -> EnvironmentContext:
    """Read the environment context from process environment variables.

    Empty strings are normalized to ``None``. A document context is only
    present when ``ADMIN_RUNTIME_BASE_HREF`` or ``ADMIN_RUNTIME_BASE_URI`` is
    set.
    """
    if env is None:
        env = os.environ
    base_href = _get(env, BASE_HREF_ENV_VAR)
    base_uri = _get(env, BASE_URI_ENV_VAR)
    document = None
    if base_href is not None or base_uri is not None:
        document = DocumentContext(base_href=base_href, base_uri=base_uri)
    return EnvironmentContext(origin=_get(env, ORIGIN_ENV_VAR), document=document)
