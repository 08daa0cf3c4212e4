"""Core configuration dataclasses.

Tool identity and site chrome are built once at process start and passed
explicitly to the code that needs them, instead of living in globals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolInfo:
    """Name, version, and usage text printed by a command-line tool."""

    name: str
    version: str
    usage: str

    @property
    def version_line(self) -> str:
        return f"{self.name} version {self.version}."


@dataclass(frozen=True)
class SiteConfig:
    """Settings consumed by the quote page templates."""

    title: str = "ssqdb"
    count_file: str = "count"
    index_file: str = "index.html"
    about_file: str = "about.html"

    def quote_file(self, index: int, suffix: str = "html") -> str:
        return f"quote{index}.{suffix}"


LINT_COMMIT = ToolInfo(
    name="git-lint-commit",
    version="1.0.4",
    usage="""\
Usage:
  git lint-commit [commit|-]

Arguments:
  If [commit] is supplied (either as a hash or other reference, like HEAD),
  then the requested commit message is linted.

  Otherwise, standard input is linted. Supplying - also causes
  the linter to read from standard input.
""",
)

SSQDB = ToolInfo(
    name="ssqdb",
    version="3",
    usage="""\
Usage: ssqdb <quote file> [output directory] [options]
Options:
  --json      Generate JSON files in addition to HTML
  --verbose   Log progress to stderr
  --help      Print this help message
  --version   Print version information
""",
)
