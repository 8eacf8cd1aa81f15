# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Text-level rule implementations.

Rules inspect physical lines only; they do not parse the language, so a
keyword inside a string literal is reported like any other occurrence.
Line comments (``//``) are skipped by the keyword rules.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Final

from lintstage.core.models import JsonValue

from .base import RuleFailure, SourceText

RuleOptions = tuple[JsonValue, ...]

DEFAULT_MAX_LINE_LENGTH: Final[int] = 120
_TRAILING_WHITESPACE: Final[str] = " \t\f\v"
_VAR_KEYWORD: Final[re.Pattern[str]] = re.compile(r"(?<![\w$.])var(?=\s)")
_CONSOLE_CALL: Final[re.Pattern[str]] = re.compile(r"(?<![\w$.])console\.(\w+)\s*\(")
_DEBUGGER: Final[re.Pattern[str]] = re.compile(r"(?<![\w$.])debugger\b")
_LEADING_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"^[ \t]+")


def _code_portion(line: str) -> str:
    comment = line.find("//")
    return line if comment == -1 else line[:comment]


def check_trailing_whitespace(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag whitespace at the end of a line."""

    for index, line in enumerate(source.lines):
        stripped = line.rstrip(_TRAILING_WHITESPACE)
        if len(stripped) < len(line):
            yield RuleFailure("trailing whitespace", index, len(stripped))


def check_eofline(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag non-empty files that do not end with a newline."""

    if source.content and not source.ends_with_newline:
        last = len(source.lines) - 1
        yield RuleFailure("file should end with a newline", last, len(source.content.split("\n")[-1]))


def check_var_keyword(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag ``var`` declarations."""

    for index, line in enumerate(source.lines):
        for match in _VAR_KEYWORD.finditer(_code_portion(line)):
            yield RuleFailure("Forbidden 'var' keyword, use 'let' or 'const' instead", index, match.start())


def check_max_line_length(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag lines longer than the configured limit (first option, default 120)."""

    limit = options[0] if options else DEFAULT_MAX_LINE_LENGTH
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"max-line-length expects a positive integer option, got {limit!r}")
    for index, line in enumerate(source.lines):
        if len(line) > limit:
            yield RuleFailure(f"Exceeds maximum line length of {limit}", index, 0)


def check_consecutive_blank_lines(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag every blank line that directly follows another blank line."""

    previous_blank = False
    for index, line in enumerate(source.lines):
        blank = not line.strip()
        if blank and previous_blank:
            yield RuleFailure("Consecutive blank lines are forbidden", index, 0)
        previous_blank = blank


def check_console(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag ``console.*`` calls; options restrict the banned method names."""

    banned = {str(option) for option in options}
    for index, line in enumerate(source.lines):
        for match in _CONSOLE_CALL.finditer(_code_portion(line)):
            method = match.group(1)
            if banned and method not in banned:
                continue
            yield RuleFailure(f"Calls to 'console.{method}' are not allowed.", index, match.start())


def check_debugger(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Flag ``debugger`` statements."""

    for index, line in enumerate(source.lines):
        for match in _DEBUGGER.finditer(_code_portion(line)):
            yield RuleFailure("Use of debugger statements is forbidden", index, match.start())


def check_indent(source: SourceText, options: RuleOptions) -> Iterator[RuleFailure]:
    """Enforce ``spaces`` (default) or ``tabs`` indentation."""

    style = str(options[0]) if options else "spaces"
    if style not in {"spaces", "tabs"}:
        raise ValueError(f"indent expects 'spaces' or 'tabs', got {style!r}")
    offending, message = ("\t", "space indentation expected") if style == "spaces" else (" ", "tab indentation expected")
    for index, line in enumerate(source.lines):
        match = _LEADING_WHITESPACE.match(line)
        if match and offending in match.group(0):
            yield RuleFailure(message, index, 0)


__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "RuleOptions",
    "check_console",
    "check_consecutive_blank_lines",
    "check_debugger",
    "check_eofline",
    "check_indent",
    "check_max_line_length",
    "check_trailing_whitespace",
    "check_var_keyword",
]
