# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintstage package."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import BuildStateError
from .severity import Severity, coerce_severity

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]


class RuleSetting(BaseModel):
    """Describe whether a rule is active, how severe it is, and its options."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    severity: Severity = Severity.ERROR
    options: tuple[JsonValue, ...] = Field(default_factory=tuple)


class RulesConfiguration(BaseModel):
    """Validated rules document consumed by the lint engine."""

    model_config = ConfigDict(frozen=True)

    rules: dict[str, RuleSetting] = Field(default_factory=dict)
    source: Path | None = None

    def enabled_rules(self) -> Iterator[tuple[str, RuleSetting]]:
        """Yield ``(name, setting)`` pairs for enabled rules in declaration order.

        Returns:
            Iterator[tuple[str, RuleSetting]]: Active rules.
        """

        return ((name, setting) for name, setting in self.rules.items() if setting.enabled)

    @property
    def is_empty(self) -> bool:
        """Return whether the document declares no rules at all."""

        return not self.rules


class RawDiagnostic(BaseModel):
    """Capture engine-native failures prior to normalisation.

    Positions are 0-based offsets as reported by the engine.
    """

    model_config = ConfigDict(frozen=True)

    rule_name: str
    message: str
    line: int = Field(ge=0)
    character: int = Field(ge=0)
    severity: Severity | str | None = None


class Diagnostic(BaseModel):
    """Normalised lint diagnostic with 1-based positions."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    file_path: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str
    rule_name: str

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: Severity | str | None) -> Severity:
        """Accept loose severity names produced by engines.

        Args:
            value: Raw severity value.

        Returns:
            Severity: Normalised severity, ``warning`` when unrecognised.
        """

        return coerce_severity(value)

    @property
    def is_error(self) -> bool:
        """Return whether the diagnostic counts toward build failure."""

        return self.severity is Severity.ERROR


class FileOutcome(BaseModel):
    """Outcome of linting a single file during one build."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    passed: bool
    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)
    formatted: tuple[str, ...] = Field(default_factory=tuple)
    artifact_text: str = ""

    @property
    def error_count(self) -> int:
        """Return the number of error-severity diagnostics for the file."""

        return sum(1 for diagnostic in self.diagnostics if diagnostic.is_error)


@dataclass(slots=True)
class BuildSummary:
    """Per-build counters folded from every :class:`FileOutcome`.

    A summary is created zeroed when a build starts and is never reused. All
    mutation goes through :meth:`record`, which is safe to call from worker
    threads.
    """

    total_files: int = 0
    failure_count: int = 0
    formatted_lines: list[str] = field(default_factory=list)
    finalized: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, outcome: FileOutcome) -> None:
        """Fold ``outcome`` into the running totals.

        Args:
            outcome: Per-file result to accumulate.

        Raises:
            BuildStateError: If the summary was already finalized.
        """

        with self._lock:
            if self.finalized:
                raise BuildStateError("cannot record outcomes into a finalized build summary")
            self.total_files += 1
            self.failure_count += outcome.error_count
            self.formatted_lines.extend(outcome.formatted)

    def finalize(self) -> None:
        """Freeze the summary; a build finalizes exactly once.

        Raises:
            BuildStateError: If the summary was already finalized.
        """

        with self._lock:
            if self.finalized:
                raise BuildStateError("build summary finalized twice")
            self.finalized = True


class BuildReport(BaseModel):
    """Report composed when a build cycle finalizes."""

    model_config = ConfigDict(frozen=True)

    summary_line: str
    lines: tuple[str, ...] = Field(default_factory=tuple)
    total_files: int
    failure_count: int
    aborted: bool = False

    @property
    def passed(self) -> bool:
        """Return whether the build completed without lint errors."""

        return not self.aborted and self.failure_count == 0

    @property
    def text(self) -> str:
        """Return the full report: summary line followed by every diagnostic line."""

        return "\n".join((self.summary_line, *self.lines))


class BuildResult(BaseModel):
    """Everything a build cycle produced for the file-tree collaborator."""

    model_config = ConfigDict(frozen=True)

    report: BuildReport
    outcomes: tuple[FileOutcome, ...] = Field(default_factory=tuple)
    outputs: Mapping[str, str] = Field(default_factory=dict)


__all__ = [
    "BuildReport",
    "BuildResult",
    "BuildSummary",
    "Diagnostic",
    "FileOutcome",
    "JsonScalar",
    "JsonValue",
    "RawDiagnostic",
    "RuleSetting",
    "RulesConfiguration",
]
