# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``lintstage`` command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lintstage.cli.app import app
from lintstage.cli.shared import EXIT_BUILD_FAILED, EXIT_CONFIG_ERROR, EXIT_ENGINE_ERROR, EXIT_OK
from lintstage.config import StageOptions


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a project with a rules document and chdir into it."""

    (tmp_path / "lintstage.json").write_text(
        json.dumps({"rules": {"no-trailing-whitespace": True, "eofline": True}}),
        encoding="utf-8",
    )
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_lint_clean_tree_writes_artifacts(project: Path) -> None:
    (project / "src" / "a.ts").write_text("let a = 1;\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", "src", "--output-dir", "out", "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_OK
    assert "Using lintstage.json as the default file for linting rules" in result.stdout
    assert "Finished linting 1 file successfully" in result.stdout
    assert (project / "out" / "a.lint-test.js").is_file()


def test_lint_reports_errors_without_failing_by_default(project: Path) -> None:
    (project / "src" / "a.ts").write_text('var Xx = "abcd"; ', encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", "src", "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_OK
    assert "ERROR: a.ts[1, 17]: trailing whitespace (no-trailing-whitespace)" in result.stdout


def test_fail_build_exits_with_build_failure(project: Path) -> None:
    (project / "src" / "a.ts").write_text('var Xx = "abcd"; ', encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", "src", "--fail-build", "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_BUILD_FAILED
    assert "Build failed due to lint errors!" in result.stdout


def test_output_file_option(project: Path) -> None:
    (project / "src" / "a.ts").write_text("let a = 1;\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", "src", "--output-file", "report.txt", "--no-emoji"])

    assert result.exit_code == EXIT_OK
    assert (project / "report.txt").read_text(encoding="utf-8") == "Finished linting 1 file successfully\n"


def test_missing_config_exits_with_config_error(project: Path) -> None:
    result = CliRunner().invoke(app, ["lint", "src", "--config", "missing.json", "--no-emoji"])

    assert result.exit_code == EXIT_CONFIG_ERROR
    assert "Cannot find lint configuration file" in result.stdout


def test_undecodable_file_exits_with_engine_error(project: Path) -> None:
    (project / "src" / "a.ts").write_bytes(b"\xff\xfe\xfa")

    result = CliRunner().invoke(app, ["lint", "src", "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_ENGINE_ERROR
    assert "Lint build aborted after 0 files" in result.stdout


def test_rules_command_lists_builtin_rules() -> None:
    result = CliRunner().invoke(app, ["rules", "--no-color"])

    assert result.exit_code == EXIT_OK
    assert "no-var-keyword" in result.stdout
    assert "eofline" in result.stdout


def test_invalid_nested_config_exits_with_config_error(project: Path) -> None:
    (project / "src" / "a.ts").write_text("let a = 1;\n", encoding="utf-8")
    (project / "src" / "lib").mkdir()
    (project / "src" / "lib" / "lintstage.json").write_text("{ rules: ", encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", "src", "--per-directory", "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_CONFIG_ERROR
    assert "Cannot parse configuration file" in result.stdout
    assert "Finished linting" not in result.stdout


def test_pyproject_display_settings_apply_without_flags(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (project / "pyproject.toml").write_text(
        "[tool.lintstage]\nuse-color = false\nuse-emoji = true\n",
        encoding="utf-8",
    )
    captured: list[StageOptions] = []

    class RecordingPipeline:
        def __init__(self, options: StageOptions, *, tree_root: Path) -> None:
            self.options = options
            captured.append(options)

        def run_build(self, files) -> None:
            list(files)

    monkeypatch.setattr("lintstage.cli.lint.LintPipeline", RecordingPipeline)

    assert CliRunner().invoke(app, ["lint", "src"]).exit_code == EXIT_OK
    assert CliRunner().invoke(app, ["lint", "src", "--no-emoji"]).exit_code == EXIT_OK

    assert [(options.use_color, options.use_emoji) for options in captured] == [(False, True), (False, False)]
