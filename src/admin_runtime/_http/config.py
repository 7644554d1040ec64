"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

import httpx

if TYPE_CHECKING:
    from ..environment import EnvironmentContext

DEFAULT_ORIGIN = "http://admin-runtime.local"
DEFAULT_TIMEOUT = 60.0

TOKEN_ENV_VAR = "ADMIN_RUNTIME_API_TOKEN"


@dataclass(frozen=True)
class ClientConfig:
    """SDK configuration, fixed at client construction."""

    api_token: str | None = None
    base_path: str | None = None
    base_url: str | httpx.URL | None = None
    fetch_impl: Callable[..., Any] | None = None
    http_client: httpx.Client | httpx.AsyncClient | None = None
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)
    environment: EnvironmentContext | None = None

    def resolve_token(self) -> str | None:
        """Return the explicit token, else ``ADMIN_RUNTIME_API_TOKEN``, else None."""
        return self.api_token or os.getenv(TOKEN_ENV_VAR) or None


__all__ = ["ClientConfig", "DEFAULT_ORIGIN", "DEFAULT_TIMEOUT", "TOKEN_ENV_VAR"]
