"""Quote file parsing (core domain).

Quote files hold records separated by lines that contain only ``%``::

    %
    <person1> witty comment
    <person2> witty response
    %
    <person3> less witty comment
    %

Whitespace around each record is insignificant and empty records are dropped.
"""

from __future__ import annotations

import re
from typing import List

from ssqdb_tools.core.errors import QuoteFormatError
from ssqdb_tools.core.models import QuoteCollection, QuoteRecord

DELIMITER = "%"
DELIMITER_PATTERN = re.compile(rf"^{re.escape(DELIMITER)}$", re.MULTILINE)


def split_quotes(raw: str) -> List[str]:
    """Return the stripped, non-empty segments between delimiter lines."""

    segments = (segment.strip() for segment in DELIMITER_PATTERN.split(raw))
    return [segment for segment in segments if segment]


def parse_quotes(raw: str) -> QuoteCollection:
    """Build a collection of quotes indexed densely from zero.

    Raises QuoteFormatError when the text holds no quotes at all, before any
    output can be written.
    """

    texts = split_quotes(raw)
    if not texts:
        raise QuoteFormatError("This file doesn't look like a quote DB.")
    return QuoteCollection(
        records=tuple(QuoteRecord(index=index, text=text) for index, text in enumerate(texts))
    )


def join_quotes(texts: List[str]) -> str:
    """Render quote texts back into the delimiter file format."""

    parts = [DELIMITER]
    for text in texts:
        parts.append(text)
        parts.append(DELIMITER)
    return "\n".join(parts) + "\n"
