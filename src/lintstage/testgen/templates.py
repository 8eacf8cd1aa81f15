# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in templates rendering a file's lint outcome as a test case."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final

LINTER_LABEL: Final[str] = "lint"
GROUP_LABEL: Final[str] = "Lint"
JS_ARTIFACT_EXTENSION: Final[str] = ".lint-test.js"
PY_ARTIFACT_EXTENSION: Final[str] = ".lint_test.py"

_IDENTIFIER_UNSAFE: Final[re.Pattern[str]] = re.compile(r"\W+")


class TemplateName(str, Enum):
    """Enumerate the built-in artifact templates."""

    QUNIT = "qunit"
    MOCHA = "mocha"
    PYTEST = "pytest"


@dataclass(frozen=True, slots=True)
class ArtifactContext:
    """Escaped values interpolated into a template."""

    group: str
    name: str
    message: str
    identifier: str
    passed: bool


def escape_artifact_string(value: str) -> str:
    """Escape ``value`` for embedding inside a single-quoted string literal.

    Backslashes are doubled, newlines become the two-character sequence
    ``\\n`` and single quotes are backslash-escaped.

    Args:
        value: Raw text to embed.

    Returns:
        str: Escaped text safe inside ``'...'`` in JavaScript and Python.
    """

    return value.replace("\\", "\\\\").replace("\r", "\\r").replace("\n", "\\n").replace("'", "\\'")


def build_context(relative_path: str, passed: bool, diagnostic_text: str) -> ArtifactContext:
    """Return the escaped interpolation values for ``relative_path``.

    Args:
        relative_path: Path of the linted file relative to the tree root.
        passed: Whether the file passed linting.
        diagnostic_text: Newline-terminated formatted diagnostics.

    Returns:
        ArtifactContext: Values ready for template substitution.
    """

    directory = posixpath.dirname(relative_path) or "."
    name = f"{relative_path} should pass {LINTER_LABEL}"
    message = f"{name}."
    if not passed and diagnostic_text:
        message = f"{message}\n\n{diagnostic_text}"
    identifier = _IDENTIFIER_UNSAFE.sub("_", relative_path).strip("_").lower() or "file"
    return ArtifactContext(
        group=escape_artifact_string(f"{GROUP_LABEL} - {directory}"),
        name=escape_artifact_string(name),
        message=escape_artifact_string(message),
        identifier=identifier,
        passed=passed,
    )


def render_qunit(context: ArtifactContext) -> str:
    assertion = "true" if context.passed else "false"
    return "\n".join(
        [
            f"QUnit.module('{context.group}');",
            f"QUnit.test('{context.name}', function(assert) {{",
            "  assert.expect(1);",
            f"  assert.ok({assertion}, '{context.message}');",
            "});",
            "",
        ]
    )


def render_mocha(context: ArtifactContext) -> str:
    lines = [
        f"describe('{context.group}', function() {{",
        f"  it('{context.name}', function() {{",
    ]
    if context.passed:
        lines.append("    // test passed")
    else:
        lines.extend(
            [
                "    // test failed",
                f"    var error = new chai.AssertionError('{context.message}');",
                "    error.stack = undefined;",
                "    throw error;",
            ]
        )
    lines.extend(["  });", "});", ""])
    return "\n".join(lines)


def render_pytest(context: ArtifactContext) -> str:
    assertion = "True" if context.passed else "False"
    return "\n".join(
        [
            f"# {context.group}",
            "",
            "",
            f"def test_{context.identifier}_should_pass_{LINTER_LABEL}():",
            f"    assert {assertion}, '{context.message}'",
            "",
        ]
    )


TEMPLATE_RENDERERS: Final[dict[TemplateName, Callable[[ArtifactContext], str]]] = {
    TemplateName.QUNIT: render_qunit,
    TemplateName.MOCHA: render_mocha,
    TemplateName.PYTEST: render_pytest,
}

TEMPLATE_EXTENSIONS: Final[dict[TemplateName, str]] = {
    TemplateName.QUNIT: JS_ARTIFACT_EXTENSION,
    TemplateName.MOCHA: JS_ARTIFACT_EXTENSION,
    TemplateName.PYTEST: PY_ARTIFACT_EXTENSION,
}


__all__ = [
    "ArtifactContext",
    "JS_ARTIFACT_EXTENSION",
    "PY_ARTIFACT_EXTENSION",
    "TEMPLATE_EXTENSIONS",
    "TEMPLATE_RENDERERS",
    "TemplateName",
    "build_context",
    "escape_artifact_string",
]
