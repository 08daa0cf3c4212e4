"""Commit message sources for the linter.

The linter reads either a commit from git or raw text from standard input.
Git is invoked with an argument list, so references are never shell-parsed.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional, TextIO

from ssqdb_tools.core.errors import CommitLookupError

LOGGER = logging.getLogger(__name__)

STDIN_REF = "-"

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def uses_stdin(ref: Optional[str]) -> bool:
    """Return True when the reference means "read standard input"."""

    return ref is None or ref == STDIN_REF


def read_commit_message(ref: str, runner: Runner = subprocess.run) -> str:
    """Return the full message (subject and body) of a single commit."""

    cmd = ["git", "log", "--format=%B", "-n", "1", ref]
    LOGGER.debug("Running %s", " ".join(cmd))
    try:
        result = runner(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        raise CommitLookupError("git executable not found") from e

    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"git exited with {result.returncode}"
        raise CommitLookupError(f"Could not read commit {ref}: {detail}")
    return result.stdout


def read_stdin(stream: TextIO) -> str:
    """Read all of ``stream``, replacing bytes that are not valid UTF-8."""

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream.read()
    return buffer.read().decode("utf-8", errors="replace")


def read_message(ref: Optional[str], stream: TextIO, runner: Runner = subprocess.run) -> str:
    """Read the message named by ``ref``, falling back to ``stream``."""

    if uses_stdin(ref):
        LOGGER.debug("Reading commit message from standard input")
        return read_stdin(stream)
    return read_commit_message(ref, runner=runner)
