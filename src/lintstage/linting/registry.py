# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry describing the rules available to the built-in engine."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache

from .base import RuleFailure, SourceText
from .rules import (
    RuleOptions,
    check_consecutive_blank_lines,
    check_console,
    check_debugger,
    check_eofline,
    check_indent,
    check_max_line_length,
    check_trailing_whitespace,
    check_var_keyword,
)

RuleCheck = Callable[[SourceText, RuleOptions], Iterable[RuleFailure]]


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """Describe how a rule name maps to its implementation."""

    name: str
    check: RuleCheck
    description: str


BUILTIN_RULES: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        name="eofline",
        check=check_eofline,
        description="Require files to end with a newline.",
    ),
    RuleDefinition(
        name="indent",
        check=check_indent,
        description="Enforce space or tab indentation (option: 'spaces' | 'tabs').",
    ),
    RuleDefinition(
        name="max-line-length",
        check=check_max_line_length,
        description="Limit line length (option: limit, default 120).",
    ),
    RuleDefinition(
        name="no-console",
        check=check_console,
        description="Ban console calls (options: method names, default all).",
    ),
    RuleDefinition(
        name="no-consecutive-blank-lines",
        check=check_consecutive_blank_lines,
        description="Disallow more than one blank line in a row.",
    ),
    RuleDefinition(
        name="no-debugger",
        check=check_debugger,
        description="Disallow debugger statements.",
    ),
    RuleDefinition(
        name="no-trailing-whitespace",
        check=check_trailing_whitespace,
        description="Disallow whitespace at the end of lines.",
    ),
    RuleDefinition(
        name="no-var-keyword",
        check=check_var_keyword,
        description="Disallow the 'var' keyword.",
    ),
)


class RuleRegistry:
    """Map rule names to :class:`RuleDefinition` entries."""

    def __init__(self, definitions: Iterable[RuleDefinition] = ()) -> None:
        self._definitions: dict[str, RuleDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: RuleDefinition) -> None:
        """Register ``definition``, rejecting duplicate names.

        Args:
            definition: Rule to add.

        Raises:
            ValueError: If a rule with the same name is already registered.
        """

        if definition.name in self._definitions:
            raise ValueError(f"rule '{definition.name}' is already registered")
        self._definitions[definition.name] = definition

    def get(self, name: str) -> RuleDefinition | None:
        """Return the definition registered as ``name``, if any."""

        return self._definitions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[RuleDefinition]:
        return iter(sorted(self._definitions.values(), key=lambda definition: definition.name))

    def __len__(self) -> int:
        return len(self._definitions)


@lru_cache(maxsize=1)
def default_registry() -> RuleRegistry:
    """Return the registry holding :data:`BUILTIN_RULES`."""

    return RuleRegistry(BUILTIN_RULES)


__all__ = ["BUILTIN_RULES", "RuleCheck", "RuleDefinition", "RuleRegistry", "default_registry"]
