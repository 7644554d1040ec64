"""Tests for admin_runtime.environment."""

from admin_runtime import DocumentContext, EnvironmentContext, get_environment


class TestGetEnvironment:
    def test_empty_mapping(self):
        assert get_environment({}) == EnvironmentContext(origin=None, document=None)

    def test_origin_only(self):
        env = get_environment({"ADMIN_RUNTIME_ORIGIN": "https://console.example.com"})

        assert env.origin == "https://console.example.com"
        assert env.document is None

    def test_document_variables(self):
        env = get_environment(
            {
                "ADMIN_RUNTIME_BASE_HREF": "/console/",
                "ADMIN_RUNTIME_BASE_URI": "https://console.example.com/console/",
            }
        )

        assert env.document == DocumentContext(
            base_href="/console/", base_uri="https://console.example.com/console/"
        )

    def test_empty_strings_normalized_to_none(self):
        env = get_environment(
            {
                "ADMIN_RUNTIME_ORIGIN": "",
                "ADMIN_RUNTIME_BASE_HREF": "",
                "ADMIN_RUNTIME_BASE_URI": "",
            }
        )

        assert env.origin is None
        assert env.document is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ADMIN_RUNTIME_ORIGIN", "https://from-env.example.com")

        assert get_environment().origin == "https://from-env.example.com"


class TestDocumentFromHtml:
    def test_reads_base_href(self):
        markup = '<html><head><base href="/console/"><title>x</title></head></html>'

        document = DocumentContext.from_html(markup)

        assert document.base_href == "/console/"
        assert document.base_uri is None

    def test_first_base_with_href_wins(self):
        markup = '<base target="_blank"><base href="/first/"><base href="/second/">'

        assert DocumentContext.from_html(markup).base_href == "/first/"

    def test_no_base_element(self):
        markup = "<html><head><title>x</title></head></html>"

        assert DocumentContext.from_html(markup).base_href is None

    def test_base_uri_passed_through(self):
        document = DocumentContext.from_html("", base_uri="https://console.example.com/")

        assert document.base_uri == "https://console.example.com/"
