"""Unit tests for the HTML shell, output paths, robots.txt and sitemap.xml."""

import pytest

from landing_factory.application.build.build_site import render_robots_txt, render_sitemap_xml
from landing_factory.rendering.html import (
    analytics_extras,
    escape_html,
    render_html_page,
    route_to_file,
)


@pytest.mark.unit
class TestEscapeHtml:
    """Text escaping."""

    def test_escapes_the_five_characters(self) -> None:
        """``& < > " '`` are all escaped."""
        assert escape_html("""<a href="x">&'</a>""") == "&lt;a href=&quot;x&quot;&gt;&amp;&#39;&lt;/a&gt;"

    def test_none_is_empty(self) -> None:
        """None renders as an empty string."""
        assert escape_html(None) == ""

    def test_non_strings_are_stringified(self) -> None:
        """Numbers are rendered as text."""
        assert escape_html(42) == "42"


@pytest.mark.unit
class TestRouteToFile:
    """Route to output path mapping."""

    @pytest.mark.parametrize(
        ("route", "expected"),
        [
            ("/", ("", "index.html")),
            ("/contacts", ("contacts", "index.html")),
            ("/contacts/", ("contacts", "index.html")),
            ("/blog/blog-1767787200000", ("blog/blog-1767787200000", "index.html")),
        ],
    )
    def test_mapping(self, route, expected) -> None:
        """Every route becomes a directory index."""
        assert route_to_file(route) == expected


@pytest.mark.unit
class TestRenderHtmlPage:
    """The document shell."""

    def test_shell(self) -> None:
        """Title, language, CSS and body are placed in the fixed shell."""
        html = render_html_page(title="A & B", body="<main>x</main>", css="body{}", lang="en")

        assert html.startswith("<!doctype html>\n<html lang=\"en\">")
        assert "<title>A &amp; B</title>" in html
        assert "<style>body{}</style>" in html
        assert "<main>x</main>" in html
        assert 'name="description"' not in html

    def test_description_meta(self) -> None:
        """A description adds an escaped meta tag."""
        html = render_html_page(title="t", body="", css="", description='Say "hi"')

        assert '<meta name="description" content="Say &quot;hi&quot;" />' in html

    def test_analytics_extras(self) -> None:
        """Analytics snippets are marked and injected raw."""
        head, body_end = analytics_extras(["<script>h()</script>"], [])

        assert head == "\n<!-- analytics:head -->\n<script>h()</script>\n"
        assert body_end == ""

        html = render_html_page(title="t", body="", css="", head_extras=head)
        assert html.index("<script>h()</script>") < html.index("<style>")


@pytest.mark.unit
class TestCrawlerFiles:
    """robots.txt and sitemap.xml."""

    def test_robots(self) -> None:
        """robots.txt allows everything and points at the sitemap."""
        assert render_robots_txt("example.com") == (
            "User-agent: *\nAllow: /\nSitemap: https://example.com/sitemap.xml\n"
        )

    def test_sitemap_entries(self) -> None:
        """One url entry per rendered route; the root maps to the bare domain."""
        xml = render_sitemap_xml("example.com", ["", "/contacts"])

        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert xml.count("<url>") == 2
        assert "<loc>https://example.com</loc>" in xml
        assert "<loc>https://example.com/contacts</loc>" in xml

    def test_sitemap_escapes_locations(self) -> None:
        """Locations are XML-escaped."""
        xml = render_sitemap_xml("example.com", ["/a&b"])

        assert "<loc>https://example.com/a&amp;b</loc>" in xml
