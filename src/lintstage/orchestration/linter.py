# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file linter invocation."""

from __future__ import annotations

from lintstage.config.loader import RulesResolver
from lintstage.core.errors import LintEngineError
from lintstage.core.models import Diagnostic, FileOutcome, RawDiagnostic, RulesConfiguration
from lintstage.linting.base import ENGINE_FAULTS, LintEngine
from lintstage.reporting.formatters import format_diagnostic, format_diagnostic_text
from lintstage.testgen import ArtifactGenerator


class FileLinter:
    """Run the lint engine on one file and build its :class:`FileOutcome`.

    Lint failures are data: only engine faults raise, as
    :class:`~lintstage.core.errors.LintEngineError`.
    """

    def __init__(
        self,
        engine: LintEngine,
        resolver: RulesResolver,
        generator: ArtifactGenerator | None,
    ) -> None:
        self._engine = engine
        self._resolver = resolver
        self._generator = generator

    def lint(self, relative_path: str, content: str, rules: RulesConfiguration | None = None) -> FileOutcome:
        """Lint ``content`` and return the file's outcome.

        Args:
            relative_path: POSIX path of the file relative to the tree root.
            content: Full file text.
            rules: Rules to apply; resolved from ``relative_path`` when ``None``.

        Returns:
            FileOutcome: Diagnostics, pass flag and derived artifact text.

        Raises:
            LintEngineError: If the engine faults on the file.
        """

        active = rules if rules is not None else self._resolver.resolve(relative_path)
        try:
            raw = self._engine.lint(relative_path, content, active)
        except LintEngineError:
            raise
        except ENGINE_FAULTS as exc:
            raise LintEngineError(str(exc), relative_path=relative_path) from exc

        diagnostics = tuple(_to_diagnostic(relative_path, item) for item in raw)
        formatted = tuple(format_diagnostic(diagnostic) for diagnostic in diagnostics)
        passed = not any(diagnostic.is_error for diagnostic in diagnostics)
        artifact_text = ""
        if self._generator is not None:
            artifact_text = self._generator.generate(relative_path, passed, format_diagnostic_text(formatted))
        return FileOutcome(
            relative_path=relative_path,
            passed=passed,
            diagnostics=diagnostics,
            formatted=formatted,
            artifact_text=artifact_text,
        )


def _to_diagnostic(relative_path: str, raw: RawDiagnostic) -> Diagnostic:
    return Diagnostic(
        severity=raw.severity,
        file_path=relative_path,
        line=raw.line + 1,
        column=raw.character + 1,
        message=raw.message,
        rule_name=raw.rule_name,
    )


__all__ = ["FileLinter"]
