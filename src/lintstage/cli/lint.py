# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``lintstage lint`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from lintstage.config import ConfigError, load_stage_options
from lintstage.core.errors import BuildFailedError, LintEngineError
from lintstage.core.models import BuildResult
from lintstage.discovery import TreeBuilder, iter_tracked_files
from lintstage.orchestration import LintPipeline

from .shared import EXIT_BUILD_FAILED, EXIT_CONFIG_ERROR, EXIT_ENGINE_ERROR, abort


def lint_command(
    input_dir: Annotated[
        Path,
        typer.Argument(exists=True, file_okay=False, dir_okay=True, help="Root of the tree to lint."),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory receiving one derived test artifact per file."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Rules document (defaults to ./lintstage.json)."),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output-file", help="Write the report to this file instead of the console."),
    ] = None,
    fail_build: Annotated[
        bool | None,
        typer.Option("--fail-build/--no-fail-build", help="Exit non-zero when lint errors are found."),
    ] = None,
    disable_test_generator: Annotated[
        bool | None,
        typer.Option("--disable-test-generator/--enable-test-generator", help="Write empty artifacts."),
    ] = None,
    test_generator: Annotated[
        str | None,
        typer.Option("--test-generator", help="Artifact template: qunit, mocha or pytest."),
    ] = None,
    ext: Annotated[
        list[str] | None,
        typer.Option("--ext", help="Tracked file extension (repeatable)."),
    ] = None,
    per_directory: Annotated[
        bool | None,
        typer.Option("--per-directory/--global-config", help="Let nested rules documents override the global one."),
    ] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", min=1, help="Lint files on N threads.")] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in notices.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
) -> None:
    """Lint every tracked file under INPUT_DIR and report the build outcome."""

    use_emoji = False
    try:
        options = load_stage_options(
            Path.cwd(),
            configuration_path=config,
            output_file=output_file,
            fail_build=fail_build,
            disable_test_generator=disable_test_generator,
            test_generator=test_generator,
            extensions=ext or None,
            resolve_per_directory=per_directory,
            jobs=jobs,
            use_color=False if no_color else None,
            use_emoji=False if no_emoji else None,
        )
        use_emoji = options.use_emoji
        pipeline = LintPipeline(options, tree_root=input_dir)
    except ConfigError as exc:
        raise abort(str(exc), exit_code=EXIT_CONFIG_ERROR, use_emoji=use_emoji) from exc

    try:
        _run(pipeline, input_dir, output_dir)
    except ConfigError as exc:
        raise abort(str(exc), exit_code=EXIT_CONFIG_ERROR, use_emoji=use_emoji) from exc
    except BuildFailedError as exc:
        raise abort(str(exc), exit_code=EXIT_BUILD_FAILED, use_emoji=use_emoji) from exc
    except LintEngineError as exc:
        raise abort(f"Lint engine error: {exc}", exit_code=EXIT_ENGINE_ERROR, use_emoji=use_emoji) from exc


def _run(pipeline: LintPipeline, input_dir: Path, output_dir: Path | None) -> BuildResult:
    if output_dir is not None:
        return TreeBuilder(pipeline, input_dir, output_dir).build()
    return pipeline.run_build(iter_tracked_files(input_dir, pipeline.options.extensions))


__all__ = ["lint_command"]
