"""Terminal helpers for user-facing failures."""

from __future__ import annotations

from rich.console import Console


def print_error(message: str) -> None:
    """Print a failure message on stderr, in red when stderr is a terminal."""

    console = Console(stderr=True, highlight=False, soft_wrap=True)
    console.print(message, style="bold red", markup=False)
