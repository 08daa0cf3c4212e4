"""Entry point for git-lint-commit.

Lints one commit message and prints a line per finding:

    W: Line 1: Subject line too long (64 > 50)
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from typing import Optional, Sequence, TextIO

from ssqdb_tools import settings
from ssqdb_tools.adapters.git_source import Runner, read_message
from ssqdb_tools.console import print_error
from ssqdb_tools.core.config import LINT_COMMIT, ToolInfo
from ssqdb_tools.core.errors import ToolError
from ssqdb_tools.core.message_rules import lint_text
from ssqdb_tools.logging_config import configure_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=LINT_COMMIT.name, add_help=False)
    parser.add_argument("commit", nargs="?", default=None)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def run(
    ref: Optional[str],
    stdin: TextIO,
    stdout: TextIO,
    runner: Runner = subprocess.run,
) -> int:
    """Lint the message named by ``ref`` and write diagnostics to ``stdout``."""

    logger = logging.getLogger(__name__)
    text = read_message(ref, stdin, runner=runner)
    diagnostics = lint_text(text)
    for diagnostic in diagnostics:
        stdout.write(diagnostic.format() + "\n")
    logger.info("%s diagnostics for %s", len(diagnostics), ref or "stdin")
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    tool: ToolInfo = LINT_COMMIT,
    runner: Runner = subprocess.run,
) -> int:
    args = parse_args(argv)
    if args.help:
        sys.stdout.write(tool.usage)
        return 0
    if args.version:
        print(tool.version_line)
        return 0

    configure_logging(settings.logging_settings(settings.load_config()), verbose=args.verbose)
    try:
        return run(args.commit, sys.stdin, sys.stdout, runner=runner)
    except ToolError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
