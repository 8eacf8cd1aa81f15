# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for derived test-artifact generation."""

from __future__ import annotations

import pytest

from lintstage.core.errors import ConfigShapeError
from lintstage.testgen import (
    CustomArtifactGenerator,
    CustomTemplate,
    TemplateArtifactGenerator,
    TemplateName,
    escape_artifact_string,
    resolve_generator,
)

DIAGNOSTICS = "ERROR: a.ts[1, 17]: trailing whitespace (no-trailing-whitespace)\n"


def test_escape_artifact_string() -> None:
    assert escape_artifact_string("it's\na\\b\r") == "it\\'s\\na\\\\b\\r"


def test_qunit_passing_artifact() -> None:
    text = TemplateArtifactGenerator(TemplateName.QUNIT).generate("a.ts", True, "")

    assert text == (
        "QUnit.module('Lint - .');\n"
        "QUnit.test('a.ts should pass lint', function(assert) {\n"
        "  assert.expect(1);\n"
        "  assert.ok(true, 'a.ts should pass lint.');\n"
        "});\n"
    )


def test_qunit_failing_artifact_embeds_escaped_diagnostics() -> None:
    text = TemplateArtifactGenerator().generate("src/a.ts", False, DIAGNOSTICS)

    assert "QUnit.module('Lint - src');" in text
    assert (
        "  assert.ok(false, 'src/a.ts should pass lint.\\n\\n"
        "ERROR: a.ts[1, 17]: trailing whitespace (no-trailing-whitespace)\\n');"
    ) in text


def test_mocha_failing_artifact_throws() -> None:
    text = TemplateArtifactGenerator(TemplateName.MOCHA).generate("a.ts", False, DIAGNOSTICS)

    assert text.splitlines() == [
        "describe('Lint - .', function() {",
        "  it('a.ts should pass lint', function() {",
        "    // test failed",
        "    var error = new chai.AssertionError('a.ts should pass lint.\\n\\n"
        "ERROR: a.ts[1, 17]: trailing whitespace (no-trailing-whitespace)\\n');",
        "    error.stack = undefined;",
        "    throw error;",
        "  });",
        "});",
    ]


def test_mocha_passing_artifact() -> None:
    text = TemplateArtifactGenerator(TemplateName.MOCHA).generate("a.ts", True, "")

    assert "    // test passed" in text
    assert "throw" not in text


def test_pytest_artifact_uses_sanitised_identifier() -> None:
    generator = TemplateArtifactGenerator(TemplateName.PYTEST)

    text = generator.generate("pkg/my-module.ts", False, DIAGNOSTICS)

    assert generator.extension == ".lint_test.py"
    assert "def test_pkg_my_module_ts_should_pass_lint():" in text
    assert "    assert False, 'pkg/my-module.ts should pass lint.\\n\\n" in text


def test_quotes_in_paths_are_escaped() -> None:
    text = TemplateArtifactGenerator().generate("it's.ts", True, "")

    assert "QUnit.test('it\\'s.ts should pass lint'" in text


@pytest.mark.parametrize(
    ("choice", "expected"),
    [
        (None, TemplateName.QUNIT),
        ("Mocha", TemplateName.MOCHA),
        (TemplateName.PYTEST, TemplateName.PYTEST),
    ],
)
def test_resolve_generator_templates(choice: object, expected: TemplateName) -> None:
    generator = resolve_generator(choice)

    assert isinstance(generator, TemplateArtifactGenerator)
    assert generator.template is expected


def test_resolve_generator_custom_function() -> None:
    calls: list[tuple[str, bool, str]] = []

    def custom(relative_path: str, passed: bool, diagnostic_text: str) -> str:
        calls.append((relative_path, passed, diagnostic_text))
        return "FOO IS GENERATED"

    generator = resolve_generator(custom)

    assert isinstance(generator, CustomArtifactGenerator)
    assert generator.extension == ".lint-test.js"
    assert generator.generate("a.ts", False, DIAGNOSTICS) == "FOO IS GENERATED"
    assert calls == [("a.ts", False, DIAGNOSTICS)]


def test_custom_template_extension() -> None:
    generator = resolve_generator(CustomTemplate(func=lambda *_: "", extension=".spec.js"))

    assert generator.extension == ".spec.js"


@pytest.mark.parametrize("choice", ["jasmine", 42])
def test_resolve_generator_rejects_unknown(choice: object) -> None:
    with pytest.raises(ConfigShapeError):
        resolve_generator(choice)
