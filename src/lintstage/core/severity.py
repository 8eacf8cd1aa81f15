# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to lint diagnostics."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "info": Severity.INFO,
    "note": Severity.INFO,
    "notice": Severity.INFO,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
    "err": Severity.ERROR,
}

DISABLED_SEVERITIES: Final[frozenset[str]] = frozenset({"off", "none"})


def parse_severity(value: Severity | str) -> Severity:
    """Return the :class:`Severity` named by ``value``.

    Args:
        value: Severity instance or a case-insensitive name/alias.

    Returns:
        Severity: Matching severity member.

    Raises:
        ValueError: If ``value`` names no known severity.
    """

    if isinstance(value, Severity):
        return value
    try:
        return _SEVERITY_ALIASES[value.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"unknown severity '{value}'") from exc


def coerce_severity(value: Severity | str | None, default: Severity = Severity.WARNING) -> Severity:
    """Normalise loose engine severities, falling back to ``default``.

    Args:
        value: Severity reported by the lint engine, possibly missing.
        default: Severity returned when ``value`` cannot be interpreted.

    Returns:
        Severity: Normalised severity.
    """

    if value is None:
        return default
    try:
        return parse_severity(value)
    except ValueError:
        return default


__all__ = ["DISABLED_SEVERITIES", "Severity", "coerce_severity", "parse_severity"]
