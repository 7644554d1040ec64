"""Python client for the admin runtime API."""

from ._http import ClientConfig, RequestInit, merge_headers
from .access_cards import AccessCardsClient, AsyncAccessCardsClient
from .access_rights import AccessRightsClient, AsyncAccessRightsClient
from .base_url import resolve_base_url
from .bridge import ClientBridge
from .client import (
    AdminRuntimeClient,
    AsyncAdminRuntimeClient,
    create_admin_runtime_client,
    create_async_admin_runtime_client,
)
from .environment import DocumentContext, EnvironmentContext, get_environment
from .licenses import AsyncLicensesClient, LicensesClient

__all__ = [
    "AdminRuntimeClient",
    "AsyncAdminRuntimeClient",
    "create_admin_runtime_client",
    "create_async_admin_runtime_client",
    "AccessCardsClient",
    "AsyncAccessCardsClient",
    "AccessRightsClient",
    "AsyncAccessRightsClient",
    "LicensesClient",
    "AsyncLicensesClient",
    "ClientBridge",
    "ClientConfig",
    "RequestInit",
    "merge_headers",
    "resolve_base_url",
    "DocumentContext",
    "EnvironmentContext",
    "get_environment",
]
