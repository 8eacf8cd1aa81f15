# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the configured artifact generator strategy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from lintstage.core.errors import ConfigShapeError

from .templates import (
    JS_ARTIFACT_EXTENSION,
    TEMPLATE_EXTENSIONS,
    TEMPLATE_RENDERERS,
    TemplateName,
    build_context,
)

GeneratorFunction = Callable[[str, bool, str], str]


@dataclass(frozen=True, slots=True)
class CustomTemplate:
    """Caller-supplied function that fully overrides templating."""

    func: GeneratorFunction
    extension: str = JS_ARTIFACT_EXTENSION


@runtime_checkable
class ArtifactGenerator(Protocol):
    """Produce derived test source for a single file's lint outcome."""

    @property
    def extension(self) -> str:
        """Return the derived artifact extension, including the leading dot."""
        raise NotImplementedError

    def generate(self, relative_path: str, passed: bool, diagnostic_text: str) -> str:
        """Return artifact source text for ``relative_path``.

        Args:
            relative_path: Path of the linted file relative to the tree root.
            passed: Whether the file passed linting.
            diagnostic_text: Newline-terminated formatted diagnostics.

        Returns:
            str: Generated test source.
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class TemplateArtifactGenerator:
    """Render artifacts through one of the built-in templates."""

    template: TemplateName = TemplateName.QUNIT

    @property
    def extension(self) -> str:
        return TEMPLATE_EXTENSIONS[self.template]

    def generate(self, relative_path: str, passed: bool, diagnostic_text: str) -> str:
        context = build_context(relative_path, passed, diagnostic_text)
        return TEMPLATE_RENDERERS[self.template](context)


@dataclass(frozen=True, slots=True)
class CustomArtifactGenerator:
    """Delegate artifact generation to a caller-supplied function."""

    template: CustomTemplate

    @property
    def extension(self) -> str:
        return self.template.extension

    def generate(self, relative_path: str, passed: bool, diagnostic_text: str) -> str:
        return self.template.func(relative_path, passed, diagnostic_text)


def resolve_generator(
    choice: TemplateName | CustomTemplate | GeneratorFunction | str | None,
) -> ArtifactGenerator:
    """Return the generator selected by ``choice``.

    Args:
        choice: Template name, custom template, bare function, or ``None``
            for the default QUnit template.

    Returns:
        ArtifactGenerator: Generator bound to the selected strategy.

    Raises:
        ConfigShapeError: If ``choice`` names no known template.
    """

    match choice:
        case None:
            return TemplateArtifactGenerator()
        case TemplateName():
            return TemplateArtifactGenerator(choice)
        case CustomTemplate():
            return CustomArtifactGenerator(choice)
        case str():
            try:
                return TemplateArtifactGenerator(TemplateName(choice.strip().lower()))
            except ValueError as exc:
                known = ", ".join(member.value for member in TemplateName)
                raise ConfigShapeError(f"Unknown test generator '{choice}' (expected one of: {known})") from exc
        case _ if callable(choice):
            return CustomArtifactGenerator(CustomTemplate(func=choice))
        case _:
            raise ConfigShapeError(f"Unsupported test generator: {choice!r}")


__all__ = [
    "ArtifactGenerator",
    "CustomArtifactGenerator",
    "CustomTemplate",
    "GeneratorFunction",
    "TemplateArtifactGenerator",
    "resolve_generator",
]
