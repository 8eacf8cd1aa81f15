# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Derived test-artifact generation."""

from __future__ import annotations

from .generator import (
    ArtifactGenerator,
    CustomArtifactGenerator,
    CustomTemplate,
    TemplateArtifactGenerator,
    resolve_generator,
)
from .templates import TemplateName, escape_artifact_string

__all__ = [
    "ArtifactGenerator",
    "CustomArtifactGenerator",
    "CustomTemplate",
    "TemplateArtifactGenerator",
    "TemplateName",
    "escape_artifact_string",
    "resolve_generator",
]
