"""Commit message rules (core domain).

Each rule is a plain function taking a CommitMessage and returning the
diagnostics it found. Rules are evaluated in a fixed order and none of them
short-circuits another, so the output order is stable for any input.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from ssqdb_tools.core.models import CommitMessage, Diagnostic, Line, Severity

SUBJECT_MAX_CHARS = 50
BODY_MAX_CHARS = 72
COMMENT_PREFIX = "#"

MessageRule = Callable[[CommitMessage], List[Diagnostic]]


def _warning(line: int, message: str) -> Diagnostic:
    return Diagnostic(severity=Severity.WARNING, line=line, message=message)


def _error(line: int, message: str) -> Diagnostic:
    return Diagnostic(severity=Severity.ERROR, line=line, message=message)


def split_message(text: str) -> CommitMessage:
    """Split raw message text into numbered lines.

    Only ``\\n`` separates lines. A final newline does not open an extra
    line, and one trailing ``\\r`` is dropped from each line.
    """

    if not text:
        return CommitMessage(lines=())

    raw_lines = text.split("\n")
    if text.endswith("\n"):
        raw_lines.pop()

    lines = []
    for number, raw in enumerate(raw_lines, start=1):
        if raw.endswith("\r"):
            raw = raw[:-1]
        lines.append(Line(number=number, text=raw))
    return CommitMessage(lines=tuple(lines))


def check_missing_subject(message: CommitMessage) -> List[Diagnostic]:
    if not message.subject:
        return [_error(1, "Missing subject line")]
    return []


def check_missing_body(message: CommitMessage) -> List[Diagnostic]:
    if message.body_is_blank:
        return [_warning(2, "Missing commit body")]
    return []


def check_subject_length(message: CommitMessage) -> List[Diagnostic]:
    subject = message.subject
    if subject is None:
        return []
    length = len(subject)
    if length > SUBJECT_MAX_CHARS:
        return [_warning(1, f"Subject line too long ({length} > {SUBJECT_MAX_CHARS})")]
    return []


def check_subject_period(message: CommitMessage) -> List[Diagnostic]:
    subject = message.subject
    if subject is not None and subject.endswith("."):
        return [_warning(1, "Subject line should not end with a period")]
    return []


def check_body_separator(message: CommitMessage) -> List[Diagnostic]:
    if message.body_is_blank:
        return []
    if message.body[0].text:
        return [_warning(2, "An empty line should separate body and subject")]
    return []


def check_body_line_length(message: CommitMessage) -> List[Diagnostic]:
    if message.body_is_blank:
        return []

    found: List[Diagnostic] = []
    for line in message.lines[2:]:
        if line.text.startswith(COMMENT_PREFIX):
            continue
        length = len(line.text)
        if length > BODY_MAX_CHARS:
            found.append(
                _warning(line.number, f"Body line too long ({length} > {BODY_MAX_CHARS})")
            )
    return found


RULES: Sequence[MessageRule] = (
    check_missing_subject,
    check_missing_body,
    check_subject_length,
    check_subject_period,
    check_body_separator,
    check_body_line_length,
)


def check_message(
    message: CommitMessage, rules: Iterable[MessageRule] = RULES
) -> List[Diagnostic]:
    """Return every diagnostic for the message, in rule order."""

    diagnostics: List[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(message))
    return diagnostics


def lint_text(text: str) -> List[Diagnostic]:
    """Split raw message text and run the standard rules over it."""

    return check_message(split_message(text))
