from __future__ import annotations

from ssqdb_tools.adapters.quote_pages import (
    page_title,
    render_about_page,
    render_footer,
    render_header,
    render_index_page,
    render_quote,
    render_quote_page,
)
from ssqdb_tools.core.config import SiteConfig
from ssqdb_tools.core.models import QuoteRecord

SITE = SiteConfig()


def test_page_title_includes_quote_number() -> None:
    assert page_title(SITE) == "ssqdb"
    assert page_title(SITE, 4) == "ssqdb - quote #4"


def test_header_has_navigation_and_count_lookup() -> None:
    header = render_header(SITE)
    assert '<a href="index.html">all</a>' in header
    assert 'onclick="randomQuote();">random</a>' in header
    assert '<a href="about.html">about</a>' in header
    assert 'req.open("GET", "count", true);' in header
    assert "<title>ssqdb</title>" in header


def test_quote_fragment_uses_escaped_text() -> None:
    record = QuoteRecord(index=2, text="<alice> a < b")
    fragment = render_quote(SITE, record)
    assert "quote #2" in fragment
    assert 'href="quote2.html"' in fragment
    assert "&lt;alice&gt; a &lt; b" in fragment
    assert "<alice>" not in fragment


def test_index_page_lists_quotes_in_order() -> None:
    records = [QuoteRecord(index=0, text="first"), QuoteRecord(index=1, text="second")]
    page = render_index_page(SITE, records)
    assert page.index("quote0.html") < page.index("quote1.html")
    assert page.index("first") < page.index("second")
    assert page.endswith(render_footer())


def test_quote_page_is_header_fragment_footer() -> None:
    record = QuoteRecord(index=7, text="hello")
    page = render_quote_page(SITE, record)
    assert page.startswith(render_header(SITE, 7))
    assert render_quote(SITE, record) in page
    assert "<title>ssqdb - quote #7</title>" in page


def test_about_page_has_no_quote_fragments() -> None:
    page = render_about_page(SITE)
    assert "tiny static quote DB" in page
    assert "&lt;person1&gt; witty comment" in page
    assert 'class="quote"' not in page


def test_custom_site_title_is_escaped() -> None:
    page = render_about_page(SiteConfig(title="<my> quotes"))
    assert "<title>&lt;my&gt; quotes</title>" in page
