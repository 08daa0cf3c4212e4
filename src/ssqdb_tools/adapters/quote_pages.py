"""HTML page templates for the static quote DB.

Every page shares the same header and footer, and one quote fragment is
reused both inline on the index page and standalone on each quote page.
Templates only ever receive already-escaped quote text (QuoteRecord.escaped).
"""

from __future__ import annotations

import html
from typing import Iterable, Optional

from ssqdb_tools.core.config import SiteConfig
from ssqdb_tools.core.models import QuoteRecord

STYLE = """\
    <style type="text/css">
      body {
        background-color: #F6F6F6;
        font-family: monospace;
        color: #222;
        max-width: 50em;
        margin: auto;
        padding: 1em;
      }

      a {
        color: #555;
      }

      pre {
        overflow: auto;
        white-space: pre-wrap;
      }

      .quote-link {
        text-decoration: none;
      }

      .quote-header {
        padding-left: 0.5em;
        padding-top: 0.5em;
        color: #555;
      }

      .quote-text {
        padding: 0 .5em .5em .5em;
      }

      .quote {
        padding: 0;
        margin: 0;
      }

      .quote:nth-of-type(odd) {
        background-color: #e0e0e0;
        padding-bottom: 0.1em;
        margin-bottom: -0.5em;
      }
    </style>"""

# The random link asks the server for the count file at view time, so the
# generator never has to pick a quote itself.
RANDOM_SCRIPT = """\
    <script type="text/javascript">
      function makeUrl(count) {{
        var num = Math.floor(Math.random() * count);
        window.location = "quote" + num + ".html";
      }}

      function randomQuote() {{
        var req = new XMLHttpRequest();
        req.onreadystatechange = function() {{
          if (req.readyState == 4 && req.status == 200) {{
            makeUrl(parseInt(req.responseText, 10));
          }}
        }}

        req.open("GET", "{count_file}", true);
        req.send(null);
      }}
    </script>"""


def page_title(site: SiteConfig, index: Optional[int] = None) -> str:
    if index is None:
        return site.title
    return f"{site.title} - quote #{index}"


def render_header(site: SiteConfig, index: Optional[int] = None) -> str:
    """Return the document head and navigation shared by every page."""

    title = html.escape(page_title(site, index))
    script = RANDOM_SCRIPT.format(count_file=site.count_file)
    parts = [
        "<html>",
        "  <head>",
        '    <meta charset="UTF-8">',
        f"    <title>{title}</title>",
        STYLE,
        script,
        "  </head>",
        "  <body>",
        f'    <a href="{site.index_file}">all</a> /',
        '    <a href="#" id="random" onclick="randomQuote();">random</a> /',
        f'    <a href="{site.about_file}">about</a>',
    ]
    return "\n".join(parts) + "\n"


def render_footer() -> str:
    return "  </body>\n</html>\n"


def render_quote(site: SiteConfig, record: QuoteRecord) -> str:
    """Return the fragment for one quote: a linked header and its text."""

    parts = [
        '<div class="quote">',
        '<h5 class="quote-header">',
        f"  quote #{record.index}",
        f'  <a class="quote-link" href="{site.quote_file(record.index)}">(&rarr;)</a>',
        "</h5>",
        '<pre class="quote-text">',
        record.escaped,
        "</pre>",
        "</div>",
    ]
    return "\n".join(parts) + "\n"


def render_index_page(site: SiteConfig, records: Iterable[QuoteRecord]) -> str:
    body = "\n".join(render_quote(site, record) for record in records)
    return f"{render_header(site)}\n{body}\n{render_footer()}"


def render_quote_page(site: SiteConfig, record: QuoteRecord) -> str:
    return (
        f"{render_header(site, record.index)}\n"
        f"{render_quote(site, record)}\n"
        f"{render_footer()}"
    )


def render_about_page(site: SiteConfig, program: str = "ssqdb") -> str:
    """Return the static about page with usage and a sample quote file."""

    about = f"""\
  <p>
    {html.escape(site.title)} is a tiny static quote DB, inspired by QDB and its siblings.
  </p>

  <p>
    usage: <code>$ {html.escape(program)} /path/to/your/quotes.txt [output directory] [--json]</code>
  </p>

  <p>
    "quotes.txt" should be formatted as follows:
    <pre>
      %
      &lt;person1&gt; witty comment
      &lt;person2&gt; witty response
      %
      &lt;person3&gt; less witty comment
      %
      (etc)
    </pre>
  </p>
"""
    return f"{render_header(site)}\n{about}\n{render_footer()}"
