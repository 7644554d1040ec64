"""Tests for base URL resolution."""

import httpx
import pytest

from admin_runtime import DocumentContext, EnvironmentContext, resolve_base_url
from admin_runtime.base_url import _document_base_path

ORIGIN = httpx.URL("http://admin-runtime.local/")


class TestExplicitBaseUrl:
    def test_url_object_is_cloned(self):
        original = httpx.URL("https://api.example.com/admin")

        resolved = resolve_base_url(base_url=original)

        assert resolved == original
        assert resolved is not original

    @pytest.mark.parametrize(
        "base_url",
        [
            "https://api.example.com",
            "https://api.example.com/admin",
            "http://localhost:8000/runtime/",
        ],
    )
    def test_absolute_string_keeps_href(self, base_url: str):
        resolved = resolve_base_url(base_url=base_url)

        assert isinstance(resolved, httpx.URL)
        assert str(resolved) == str(httpx.URL(base_url))

    def test_relative_string_resolves_against_fallback_origin(self):
        resolved = resolve_base_url(base_url="/admin")

        assert str(resolved) == "http://admin-runtime.local/admin"

    def test_relative_string_resolves_against_environment_origin(self):
        env = EnvironmentContext(origin="https://console.example.com")

        resolved = resolve_base_url(base_url="/admin", environment=env)

        assert str(resolved) == "https://console.example.com/admin"

    def test_malformed_string_falls_back_to_origin_join(self):
        resolved = resolve_base_url(base_url="not a url")

        assert str(resolved) == "http://admin-runtime.local/not%20a%20url"

    def test_unresolvable_string_degrades_to_origin(self):
        resolved = resolve_base_url(base_url="/ad\x7fmin")

        assert str(resolved) == "http://admin-runtime.local/"

    def test_base_url_overrides_base_path(self):
        resolved = resolve_base_url(base_url="https://api.example.com/x", base_path="/admin")

        assert str(resolved) == "https://api.example.com/x"

    def test_blank_base_url_is_ignored(self):
        resolved = resolve_base_url(base_url="   ", base_path="/admin")

        assert str(resolved) == "http://admin-runtime.local/admin"

    def test_surrounding_whitespace_is_stripped(self):
        resolved = resolve_base_url(base_url="  https://api.example.com/runtime  ")

        assert str(resolved) == "https://api.example.com/runtime"

    def test_relative_string_with_whitespace(self):
        resolved = resolve_base_url(base_url="\t/admin \n")

        assert str(resolved) == "http://admin-runtime.local/admin"

    def test_scheme_without_host_is_kept(self):
        resolved = resolve_base_url(base_url="localhost:8000")

        assert str(resolved) == "localhost:8000"


class TestBasePath:
    def test_defaults_to_root_without_environment(self):
        resolved = resolve_base_url()

        assert resolved.path == "/"
        assert str(resolved) == "http://admin-runtime.local/"

    def test_base_path_joined_with_origin(self):
        env = EnvironmentContext(origin="https://console.example.com/ignored/path")

        resolved = resolve_base_url(base_path="/admin", environment=env)

        assert str(resolved) == "https://console.example.com/admin"

    def test_unrooted_base_path(self):
        resolved = resolve_base_url(base_path="admin")

        assert str(resolved) == "http://admin-runtime.local/admin"

    def test_empty_base_path_is_root(self):
        resolved = resolve_base_url(base_path="")

        assert str(resolved) == "http://admin-runtime.local/"

    def test_base_path_overrides_document(self):
        env = EnvironmentContext(document=DocumentContext(base_href="/other/"))

        resolved = resolve_base_url(base_path="/admin", environment=env)

        assert resolved.path == "/admin"

    def test_invalid_origin_uses_fallback(self):
        env = EnvironmentContext(origin="not-an-origin")

        resolved = resolve_base_url(base_path="/admin", environment=env)

        assert str(resolved) == "http://admin-runtime.local/admin"


class TestDocumentDetection:
    def test_base_href(self):
        env = EnvironmentContext(document=DocumentContext(base_href="/console/"))

        assert str(resolve_base_url(environment=env)) == "http://admin-runtime.local/console/"

    def test_absolute_base_href_keeps_only_path(self):
        env = EnvironmentContext(
            origin="https://console.example.com",
            document=DocumentContext(base_href="https://cdn.example.com/app/"),
        )

        assert str(resolve_base_url(environment=env)) == "https://console.example.com/app/"

    def test_relative_base_href(self):
        env = EnvironmentContext(document=DocumentContext(base_href="app/"))

        assert resolve_base_url(environment=env).path == "/app/"

    def test_base_uri_used_without_base_href(self):
        env = EnvironmentContext(
            document=DocumentContext(base_uri="https://console.example.com/portal/")
        )

        assert resolve_base_url(environment=env).path == "/portal/"

    def test_empty_base_href_falls_through_to_base_uri(self):
        env = EnvironmentContext(
            document=DocumentContext(base_href="", base_uri="https://x.example/portal/")
        )

        assert resolve_base_url(environment=env).path == "/portal/"

    def test_relative_base_uri_is_ignored(self):
        env = EnvironmentContext(document=DocumentContext(base_uri="portal/"))

        assert resolve_base_url(environment=env).path == "/"

    def test_empty_document_is_root(self):
        env = EnvironmentContext(document=DocumentContext())

        assert resolve_base_url(environment=env).path == "/"

    def test_unresolvable_base_href_uses_raw_href(self):
        document = DocumentContext(base_href="admin\x7f")

        assert _document_base_path(document, ORIGIN) == "/admin\x7f"

    def test_unresolvable_rooted_base_href_kept_as_is(self):
        document = DocumentContext(base_href="/admin\x7f")

        assert _document_base_path(document, ORIGIN) == "/admin\x7f"

    def test_no_document(self):
        assert _document_base_path(None, ORIGIN) == "/"
