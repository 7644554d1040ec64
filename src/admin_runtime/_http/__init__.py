"""Shared HTTP infrastructure for the admin runtime clients."""

from .config import DEFAULT_ORIGIN, DEFAULT_TIMEOUT, TOKEN_ENV_VAR, ClientConfig
from .headers import HeadersLike, default_headers, merge_headers
from .iter_coroutine import iter_coroutine
from .transport import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    Credentials,
    RequestInit,
)

__all__ = [
    "DEFAULT_ORIGIN",
    "DEFAULT_TIMEOUT",
    "TOKEN_ENV_VAR",
    "ClientConfig",
    "HeadersLike",
    "default_headers",
    "merge_headers",
    "iter_coroutine",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "Credentials",
    "RequestInit",
]
