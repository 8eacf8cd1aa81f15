# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build-cycle orchestration for the lint stage."""

from __future__ import annotations

from .aggregator import BuildAggregator, BuildState, compose_report
from .linter import FileLinter
from .pipeline import LintPipeline
from .stage import FileProcessingStage, OutcomeCache, derive_artifact_path

__all__ = [
    "BuildAggregator",
    "BuildState",
    "FileLinter",
    "FileProcessingStage",
    "LintPipeline",
    "OutcomeCache",
    "compose_report",
    "derive_artifact_path",
]
