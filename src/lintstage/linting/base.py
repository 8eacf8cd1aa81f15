# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared primitives for lint engines consumed by the stage."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from lintstage.core.models import RawDiagnostic, RulesConfiguration

# Exceptions an engine may leak that signal a fault rather than a lint failure.
ENGINE_FAULTS: Final[tuple[type[Exception], ...]] = (
    ArithmeticError,
    LookupError,
    RuntimeError,
    TypeError,
    ValueError,
    re.error,
)


@runtime_checkable
class LintEngine(Protocol):
    """Evaluate rules against one file's text."""

    def lint(self, relative_path: str, content: str, rules: RulesConfiguration) -> Sequence[RawDiagnostic]:
        """Return engine-native failures for ``content``.

        Args:
            relative_path: Path of the file relative to the tree root.
            content: Full text of the file.
            rules: Rules applying to the file.

        Returns:
            Sequence[RawDiagnostic]: Failures in emission order.

        Raises:
            LintEngineError: If the engine cannot process the input.
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class RuleFailure:
    """Single violation reported by a rule, positioned with 0-based offsets."""

    message: str
    line: int
    character: int


@dataclass(frozen=True, slots=True)
class SourceText:
    """File content split into physical lines.

    ``lines`` excludes the empty remainder after a final newline and has
    carriage returns stripped.
    """

    content: str
    lines: tuple[str, ...]

    @classmethod
    def from_content(cls, content: str) -> SourceText:
        raw_lines = content.split("\n")
        if raw_lines and raw_lines[-1] == "":
            raw_lines.pop()
        return cls(content=content, lines=tuple(line.rstrip("\r") for line in raw_lines))

    @property
    def ends_with_newline(self) -> bool:
        return self.content.endswith("\n")


__all__ = ["ENGINE_FAULTS", "LintEngine", "RuleFailure", "SourceText"]
