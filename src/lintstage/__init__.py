# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Incremental per-file lint stage.

``LintPipeline`` lints every tracked file of a build, aggregates diagnostics
into one report per build and derives a test artifact per file encoding its
lint outcome.
"""

from __future__ import annotations

from .config import StageOptions, load_rules, load_stage_options
from .core.errors import (
    BuildFailedError,
    BuildStateError,
    ConfigError,
    ConfigNotFound,
    ConfigParseError,
    ConfigShapeError,
    LintEngineError,
    LintStageError,
)
from .core.models import BuildReport, BuildResult, Diagnostic, FileOutcome, RulesConfiguration
from .core.severity import Severity
from .orchestration import LintPipeline
from .testgen import CustomTemplate, TemplateName

__all__ = [
    "BuildFailedError",
    "BuildReport",
    "BuildResult",
    "BuildStateError",
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "ConfigShapeError",
    "CustomTemplate",
    "Diagnostic",
    "FileOutcome",
    "LintEngineError",
    "LintPipeline",
    "LintStageError",
    "RulesConfiguration",
    "Severity",
    "StageOptions",
    "TemplateName",
    "load_rules",
    "load_stage_options",
]
