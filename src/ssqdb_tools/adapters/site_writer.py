"""Filesystem adapter that writes the quote DB site.

Artifacts are written one after another in a fixed order: the count file,
the index page, the about page, every quote page, then the optional JSON
files. Nothing here validates the quotes; parsing has already done that.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from ssqdb_tools.adapters.quote_pages import (
    render_about_page,
    render_index_page,
    render_quote_page,
)
from ssqdb_tools.core.config import SiteConfig
from ssqdb_tools.core.models import QuoteCollection, QuoteRecord

LOGGER = logging.getLogger(__name__)


def quote_json(record: QuoteRecord) -> str:
    """Serialize a quote with its raw, unescaped text."""

    return json.dumps({"count": record.index, "quote": record.text}, ensure_ascii=False)


class SiteWriter:
    """Writes rendered pages into an existing output directory."""

    def __init__(self, output_dir: Path, site: SiteConfig) -> None:
        self._output_dir = Path(output_dir)
        self._site = site
        self.written: List[Path] = []

    def _write(self, name: str, content: str) -> Path:
        path = self._output_dir / name
        path.write_text(content, encoding="utf-8")
        self.written.append(path)
        LOGGER.debug("Wrote %s (%s chars)", path, len(content))
        return path

    def write_count(self, quotes: QuoteCollection) -> Path:
        return self._write(self._site.count_file, str(quotes.count))

    def write_index(self, quotes: QuoteCollection) -> Path:
        return self._write(self._site.index_file, render_index_page(self._site, quotes))

    def write_about(self) -> Path:
        return self._write(self._site.about_file, render_about_page(self._site))

    def write_quote_pages(self, quotes: QuoteCollection) -> List[Path]:
        return [
            self._write(self._site.quote_file(record.index), render_quote_page(self._site, record))
            for record in quotes
        ]

    def write_quote_json(self, quotes: QuoteCollection) -> List[Path]:
        return [
            self._write(self._site.quote_file(record.index, suffix="json"), quote_json(record))
            for record in quotes
        ]


def write_site(
    quotes: QuoteCollection,
    output_dir: Path,
    site: SiteConfig,
    write_json: bool = False,
) -> List[Path]:
    """Write every artifact for ``quotes`` and return the paths in write order."""

    writer = SiteWriter(output_dir, site)
    writer.write_count(quotes)
    writer.write_index(quotes)
    writer.write_about()
    writer.write_quote_pages(quotes)
    if write_json:
        writer.write_quote_json(quotes)

    LOGGER.info("Wrote %s files for %s quotes to %s", len(writer.written), quotes.count, output_dir)
    return writer.written
