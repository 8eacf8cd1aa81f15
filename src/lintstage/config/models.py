# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options recognised by the lint stage."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lintstage.testgen import CustomTemplate, TemplateName

DEFAULT_RULES_FILENAME: Final[str] = "lintstage.json"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = ("ts",)

LogErrorCallback = Callable[[str], None]
TestGeneratorChoice = TemplateName | CustomTemplate | Callable[[str, bool, str], str] | str | None


class StageOptions(BaseModel):
    """Configuration surface of a :class:`~lintstage.orchestration.pipeline.LintPipeline`."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    configuration_path: Path | None = None
    output_file: Path | None = None
    fail_build: bool = False
    disable_test_generator: bool = False
    test_generator: TestGeneratorChoice = None
    log_error: LogErrorCallback | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    artifact_extension: str | None = None
    rules_filename: str = DEFAULT_RULES_FILENAME
    resolve_per_directory: bool = False
    jobs: int = Field(default=1, ge=1)
    use_color: bool = True
    use_emoji: bool = False

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: object) -> tuple[str, ...]:
        """Strip leading dots and drop blanks so ``.ts`` and ``ts`` match alike.

        Args:
            value: Extension or sequence of extensions.

        Returns:
            tuple[str, ...]: Normalised extensions.
        """

        items = [value] if isinstance(value, str) else list(value or ())
        normalised = tuple(str(item).strip().lstrip(".") for item in items)
        return tuple(item for item in normalised if item)

    @field_validator("artifact_extension")
    @classmethod
    def _check_artifact_extension(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith("."):
            raise ValueError("artifact_extension must start with '.'")
        return value


__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_RULES_FILENAME",
    "LogErrorCallback",
    "StageOptions",
    "TestGeneratorChoice",
]
