"""Domain exceptions raised by core and adapters.

Only the CLI entry points catch these; everything else propagates.
"""

from __future__ import annotations


class ToolError(Exception):
    """Base class for failures reported to the user with a non-zero exit."""


class QuoteFormatError(ToolError, ValueError):
    """Raised when a quote file is not UTF-8 text or yields no quotes."""


class CommitLookupError(ToolError, RuntimeError):
    """Raised when git cannot produce a message for the requested commit."""


class UsageError(ToolError):
    """Raised for missing arguments or paths that do not exist."""
