"""Shared fixtures for all tests."""

from collections.abc import Generator

import httpx
import pytest
import respx

from admin_runtime._http.config import DEFAULT_ORIGIN, TOKEN_ENV_VAR
from admin_runtime.environment import (
    BASE_HREF_ENV_VAR,
    BASE_URI_ENV_VAR,
    ORIGIN_ENV_VAR,
)


@pytest.fixture(autouse=True)
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear admin runtime environment variables.

    This ensures tests don't pick up a real token or origin from the shell.
    """
    for var in (TOKEN_ENV_VAR, ORIGIN_ENV_VAR, BASE_HREF_ENV_VAR, BASE_URI_ENV_VAR):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_token() -> str:
    """Mock admin runtime API token for testing."""
    return "test_token_123456789"


@pytest.fixture
def api_mock():
    """Mock admin runtime API on the fallback origin."""
    with respx.mock(assert_all_called=False, base_url=DEFAULT_ORIGIN) as mock:
        mock.delete("/access-cards/card-1").mock(return_value=httpx.Response(204))
        mock.delete("/access-cards/missing").mock(
            return_value=httpx.Response(404, json={"error": "not found"})
        )
        mock.delete("/access-rights/right-1").mock(return_value=httpx.Response(204))
        mock.delete("/licenses/lic1").mock(return_value=httpx.Response(204))
        mock.delete("/licenses/lic1/plan2").mock(return_value=httpx.Response(204))
        mock.delete("/licenses/lic1/plan2/price3").mock(
            return_value=httpx.Response(200, json={"deleted": True})
        )
        yield mock
