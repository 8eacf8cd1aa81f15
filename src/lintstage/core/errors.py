# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the lint stage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:  # pragma: no cover
    from .models import BuildReport, BuildResult

BUILD_FAILED_MESSAGE: Final[str] = "Build failed due to lint errors!"


class LintStageError(Exception):
    """Base class for every error raised by lintstage."""


class ConfigError(LintStageError):
    """Raised when configuration input is invalid."""


class ConfigNotFound(ConfigError):
    """Raised when a rules document does not resolve to an existing file."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Cannot find lint configuration file: {path}")
        self.path = path


class ConfigParseError(ConfigError):
    """Raised when a rules document is not well-formed structured data."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot parse configuration file: {path} ({reason})")
        self.path = path
        self.reason = reason


class ConfigShapeError(ConfigError):
    """Raised when a parsed rules document does not have the expected structure."""


class LintEngineError(LintStageError):
    """Raised when the lint engine itself faults on a file."""

    def __init__(self, message: str, *, relative_path: str | None = None) -> None:
        detail = f"{relative_path}: {message}" if relative_path else message
        super().__init__(detail)
        self.relative_path = relative_path


class BuildStateError(LintStageError):
    """Raised when the build aggregator is driven out of order."""


class BuildFailedError(LintStageError):
    """Raised at build finalization when escalation is enabled and lint errors exist.

    The report has always been delivered to its sink before this error is
    raised. ``result`` is attached by :meth:`LintPipeline.run_build` so callers
    can still reach the derived artifacts of the failed build.
    """

    def __init__(self, report: BuildReport, message: str = BUILD_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.report = report
        self.result: BuildResult | None = None


__all__ = [
    "BUILD_FAILED_MESSAGE",
    "BuildFailedError",
    "BuildStateError",
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "ConfigShapeError",
    "LintEngineError",
    "LintStageError",
]
