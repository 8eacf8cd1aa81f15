# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Engine evaluating registered text rules against a file."""

from __future__ import annotations

import threading
from operator import attrgetter

from lintstage.core.errors import LintEngineError
from lintstage.core.logging import warn
from lintstage.core.models import RawDiagnostic, RulesConfiguration

from .base import ENGINE_FAULTS, SourceText
from .registry import RuleRegistry, default_registry


class TextRuleEngine:
    """Built-in :class:`~lintstage.linting.base.LintEngine` over raw text.

    Failures are emitted sorted by position; ties keep the order in which
    rules are declared in the configuration. Rules the registry does not know
    are reported once per engine instance and skipped.
    """

    def __init__(self, registry: RuleRegistry | None = None, *, use_emoji: bool = False) -> None:
        self._registry = registry or default_registry()
        self._use_emoji = use_emoji
        self._unknown_reported: set[str] = set()
        self._lock = threading.Lock()

    @property
    def registry(self) -> RuleRegistry:
        """Return the registry rules are looked up in."""

        return self._registry

    def lint(self, relative_path: str, content: str, rules: RulesConfiguration) -> list[RawDiagnostic]:
        """Return failures of every enabled rule, sorted by position."""

        if "\x00" in content:
            raise LintEngineError("binary content cannot be linted", relative_path=relative_path)
        source = SourceText.from_content(content)
        failures: list[RawDiagnostic] = []
        for name, setting in rules.enabled_rules():
            definition = self._registry.get(name)
            if definition is None:
                self._report_unknown(name)
                continue
            try:
                found = list(definition.check(source, setting.options))
            except ENGINE_FAULTS as exc:
                raise LintEngineError(f"rule '{name}' failed: {exc}", relative_path=relative_path) from exc
            failures.extend(
                RawDiagnostic(
                    rule_name=name,
                    message=failure.message,
                    line=failure.line,
                    character=failure.character,
                    severity=setting.severity,
                )
                for failure in found
            )
        failures.sort(key=attrgetter("line", "character"))
        return failures

    def _report_unknown(self, name: str) -> None:
        with self._lock:
            if name in self._unknown_reported:
                return
            self._unknown_reported.add(name)
        warn(f"Could not find an implementation for rule '{name}'", use_emoji=self._use_emoji)


__all__ = ["TextRuleEngine"]
