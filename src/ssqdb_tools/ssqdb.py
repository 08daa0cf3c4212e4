"""Entry point for ssqdb, a tiny static quote DB inspired by QDB.

Reads a ``%``-delimited quote file and writes an index page, an about page,
one page per quote, and a count file used by the "random" link.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from art import tprint

from ssqdb_tools import settings
from ssqdb_tools.adapters.site_writer import write_site
from ssqdb_tools.console import print_error
from ssqdb_tools.core.config import SSQDB, SiteConfig, ToolInfo
from ssqdb_tools.core.errors import QuoteFormatError, ToolError, UsageError
from ssqdb_tools.core.quotes import parse_quotes
from ssqdb_tools.logging_config import configure_logging

FONT = "small"


def _print_banner(tool: ToolInfo) -> None:
    tprint(tool.name, FONT, space=1)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=SSQDB.name, add_help=False)
    parser.add_argument("quotes_file", nargs="?", default=None)
    parser.add_argument("output_dir", nargs="?", default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def generate(
    quotes_file: Optional[str],
    output_dir: Optional[str],
    site: SiteConfig,
    write_json: bool = False,
) -> list[Path]:
    """Validate inputs, parse the quote file, and write the site.

    Every check runs before the first write, so a rejected input leaves the
    output directory untouched.
    """

    logger = logging.getLogger(__name__)

    if not quotes_file:
        raise UsageError("I need a file to load quotes from.")
    source = Path(quotes_file)
    target = Path(output_dir) if output_dir else Path.cwd()
    if not source.is_file():
        raise UsageError("That isn't a file.")
    if not target.is_dir():
        raise UsageError("Output directory doesn't exist.")

    try:
        raw = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise QuoteFormatError(
            f"Quote files must be UTF-8 text (bad byte at offset {e.start})."
        ) from e
    quotes = parse_quotes(raw)
    logger.info("Loaded %s quotes from %s", quotes.count, source)
    return write_site(quotes, target, site, write_json=write_json)


def main(
    argv: Optional[Sequence[str]] = None,
    tool: ToolInfo = SSQDB,
    site: Optional[SiteConfig] = None,
) -> int:
    args = parse_args(argv)
    if args.help:
        sys.stdout.write(tool.usage)
        return 0
    if args.version:
        print(tool.version_line)
        return 0

    _print_banner(tool)
    configure_logging(settings.logging_settings(settings.load_config()), verbose=args.verbose)
    try:
        generate(args.quotes_file, args.output_dir, site or SiteConfig(), write_json=args.json)
    except ToolError as e:
        print_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
