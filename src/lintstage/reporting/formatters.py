# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render diagnostics as stable, human-readable lines."""

from __future__ import annotations

from collections.abc import Iterable

from lintstage.core.models import Diagnostic


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Return ``SEVERITY: path[line, column]: message (rule)`` for ``diagnostic``.

    Args:
        diagnostic: Normalised diagnostic with 1-based positions.

    Returns:
        str: Formatted line; identical input always yields identical output.
    """

    severity = diagnostic.severity.value.upper()
    return (
        f"{severity}: {diagnostic.file_path}[{diagnostic.line}, {diagnostic.column}]: "
        f"{diagnostic.message} ({diagnostic.rule_name})"
    )


def format_diagnostic_text(lines: Iterable[str]) -> str:
    """Join formatted lines, terminating each with a newline."""

    return "".join(f"{line}\n" for line in lines)


__all__ = ["format_diagnostic", "format_diagnostic_text"]
