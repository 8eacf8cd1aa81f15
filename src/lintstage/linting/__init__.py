# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint engine protocol and the built-in text rule engine."""

from __future__ import annotations

from .base import ENGINE_FAULTS, LintEngine, RuleFailure, SourceText
from .engine import TextRuleEngine
from .registry import BUILTIN_RULES, RuleDefinition, RuleRegistry, default_registry

__all__ = [
    "BUILTIN_RULES",
    "ENGINE_FAULTS",
    "LintEngine",
    "RuleDefinition",
    "RuleFailure",
    "RuleRegistry",
    "SourceText",
    "TextRuleEngine",
    "default_registry",
]
