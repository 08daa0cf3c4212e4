"""Core domain models.

These dataclasses are shared across the core and adapters so neither the
linter rules nor the page templates depend on git or filesystem types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import html
from typing import Iterator, Optional, Tuple


class Severity(Enum):
    """Diagnostic severity, valued by the single-letter output tag."""

    WARNING = "W"
    ERROR = "E"


@dataclass(frozen=True)
class Line:
    """One line of a commit message, numbered from 1."""

    number: int
    text: str


@dataclass(frozen=True)
class Diagnostic:
    """A single finding produced by a message rule."""

    severity: Severity
    line: int
    message: str

    def format(self) -> str:
        return f"{self.severity.value}: Line {self.line}: {self.message}"


@dataclass(frozen=True)
class CommitMessage:
    """A commit message held as ordered lines (subject first, then body)."""

    lines: Tuple[Line, ...]

    @property
    def subject(self) -> Optional[str]:
        if not self.lines:
            return None
        return self.lines[0].text

    @property
    def body(self) -> Tuple[Line, ...]:
        return self.lines[1:]

    @property
    def body_is_blank(self) -> bool:
        # A subject-only message counts as a blank body.
        return all(not line.text for line in self.body)


@dataclass(frozen=True)
class QuoteRecord:
    """A quote with its position in the source file and its escaped form."""

    index: int
    text: str
    escaped: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "escaped", html.escape(self.text))


@dataclass(frozen=True)
class QuoteCollection:
    """Ordered quotes whose indexes match their position."""

    records: Tuple[QuoteRecord, ...]

    def __post_init__(self) -> None:
        for position, record in enumerate(self.records):
            if record.index != position:
                raise ValueError(
                    f"Quote index {record.index} does not match position {position}"
                )

    def __iter__(self) -> Iterator[QuoteRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def count(self) -> int:
        return len(self.records)
