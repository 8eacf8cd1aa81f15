# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severities, core models and diagnostic formatting."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lintstage.core.errors import BuildStateError
from lintstage.core.models import BuildReport, BuildSummary, Diagnostic, FileOutcome
from lintstage.core.severity import Severity, coerce_severity, parse_severity
from lintstage.reporting.formatters import format_diagnostic, format_diagnostic_text


def _diagnostic(**overrides: object) -> Diagnostic:
    values: dict[str, object] = {
        "severity": "error",
        "file_path": "a.ts",
        "line": 1,
        "column": 17,
        "message": "trailing whitespace",
        "rule_name": "no-trailing-whitespace",
    }
    values.update(overrides)
    return Diagnostic(**values)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("error", Severity.ERROR), ("WARN", Severity.WARNING), ("notice", Severity.INFO), (" err ", Severity.ERROR)],
)
def test_parse_severity_aliases(raw: str, expected: Severity) -> None:
    assert parse_severity(raw) is expected


def test_parse_severity_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_severity("fatal")


def test_coerce_severity_defaults_to_warning() -> None:
    assert coerce_severity("fatal") is Severity.WARNING
    assert coerce_severity(None) is Severity.WARNING
    assert coerce_severity(Severity.INFO) is Severity.INFO


def test_diagnostic_coerces_loose_severity() -> None:
    assert _diagnostic(severity="warn").severity is Severity.WARNING
    assert _diagnostic(severity="bogus").severity is Severity.WARNING


def test_diagnostic_positions_are_one_based() -> None:
    with pytest.raises(ValidationError):
        _diagnostic(line=0)


def test_format_diagnostic() -> None:
    assert format_diagnostic(_diagnostic()) == "ERROR: a.ts[1, 17]: trailing whitespace (no-trailing-whitespace)"
    assert format_diagnostic(_diagnostic(severity="info")).startswith("INFO: ")


def test_format_diagnostic_text_terminates_every_line() -> None:
    assert format_diagnostic_text(["one", "two"]) == "one\ntwo\n"
    assert format_diagnostic_text([]) == ""


def test_build_summary_counts_only_errors() -> None:
    summary = BuildSummary()
    outcome = FileOutcome(
        relative_path="a.ts",
        passed=False,
        diagnostics=(_diagnostic(), _diagnostic(severity="warning")),
        formatted=("line one", "line two"),
    )

    summary.record(outcome)

    assert summary.total_files == 1
    assert summary.failure_count == 1
    assert summary.formatted_lines == ["line one", "line two"]


def test_build_summary_rejects_use_after_finalize() -> None:
    summary = BuildSummary()
    summary.finalize()

    with pytest.raises(BuildStateError):
        summary.record(FileOutcome(relative_path="a.ts", passed=True))
    with pytest.raises(BuildStateError):
        summary.finalize()


def test_build_report_text_and_pass_flag() -> None:
    report = BuildReport(summary_line="Found 1 lint error in 1 file", lines=("x",), total_files=1, failure_count=1)

    assert report.text == "Found 1 lint error in 1 file\nx"
    assert not report.passed
    assert BuildReport(summary_line="ok", total_files=0, failure_count=0).passed
