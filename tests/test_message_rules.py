from __future__ import annotations

from ssqdb_tools.core.message_rules import (
    BODY_MAX_CHARS,
    SUBJECT_MAX_CHARS,
    check_message,
    lint_text,
    split_message,
)
from ssqdb_tools.core.models import Severity


def _formatted(text: str) -> list[str]:
    return [diagnostic.format() for diagnostic in lint_text(text)]


def test_clean_message_has_no_diagnostics() -> None:
    text = "Add quote count file\n\nThe random link reads it at view time.\n"
    assert lint_text(text) == []


def test_empty_input_reports_missing_subject_and_body() -> None:
    assert _formatted("") == [
        "E: Line 1: Missing subject line",
        "W: Line 2: Missing commit body",
    ]


def test_blank_subject_is_an_error_on_line_one() -> None:
    diagnostics = lint_text("\n\nSome body text\n")
    assert diagnostics[0].severity is Severity.ERROR
    assert diagnostics[0].line == 1
    assert diagnostics[0].message == "Missing subject line"


def test_subject_only_message_warns_missing_body() -> None:
    assert _formatted("Fix typo\n") == ["W: Line 2: Missing commit body"]


def test_blank_body_skips_separator_and_length_checks() -> None:
    assert _formatted("Fix typo\n\n\n\n") == ["W: Line 2: Missing commit body"]


def test_subject_length_boundary() -> None:
    at_limit = "a" * SUBJECT_MAX_CHARS
    over_limit = "a" * (SUBJECT_MAX_CHARS + 1)

    assert _formatted(f"{at_limit}\n\nbody\n") == []
    assert _formatted(f"{over_limit}\n\nbody\n") == [
        "W: Line 1: Subject line too long (51 > 50)"
    ]


def test_subject_ending_with_period() -> None:
    assert _formatted("Fix typo.\n\nbody\n") == [
        "W: Line 1: Subject line should not end with a period"
    ]


def test_missing_separator_line() -> None:
    assert _formatted("Fix typo\nbody right away\n") == [
        "W: Line 2: An empty line should separate body and subject"
    ]


def test_body_line_too_long_reports_line_number() -> None:
    long_line = "b" * (BODY_MAX_CHARS + 1)
    text = f"Fix typo\n\nshort\n{long_line}\n"
    assert _formatted(text) == ["W: Line 4: Body line too long (73 > 72)"]


def test_body_line_length_boundary() -> None:
    at_limit = "b" * BODY_MAX_CHARS
    over_limit = "b" * (BODY_MAX_CHARS + 1)

    assert _formatted(f"Fix typo\n\n{at_limit}\n") == []
    assert _formatted(f"Fix typo\n\n{over_limit}\n") == [
        "W: Line 3: Body line too long (73 > 72)"
    ]


def test_comment_lines_are_exempt_from_length_check() -> None:
    comment = "#" + "c" * 100
    assert _formatted(f"Fix typo\n\n{comment}\n") == []


def test_rules_all_run_in_fixed_order() -> None:
    subject = "s" * 60 + "."
    body = "x" * 80
    assert _formatted(f"{subject}\n{body}\n{body}\n") == [
        "W: Line 1: Subject line too long (61 > 50)",
        "W: Line 1: Subject line should not end with a period",
        "W: Line 2: An empty line should separate body and subject",
        "W: Line 3: Body line too long (80 > 72)",
    ]


def test_split_message_strips_carriage_returns() -> None:
    message = split_message("Subject\r\n\r\nBody\r\n")
    assert [line.text for line in message.lines] == ["Subject", "", "Body"]
    assert [line.number for line in message.lines] == [1, 2, 3]


def test_split_message_keeps_inner_blank_lines() -> None:
    message = split_message("Subject\n\nBody\n\n")
    assert message.subject == "Subject"
    assert [line.text for line in message.body] == ["", "Body", ""]


def test_check_message_accepts_custom_rule_list() -> None:
    message = split_message("")
    assert check_message(message, rules=()) == []
