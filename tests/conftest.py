# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from lintstage.config import StageOptions
from lintstage.linting.base import LintEngine
from lintstage.orchestration import LintPipeline

WHITESPACE_RULES = {"no-trailing-whitespace": True, "eofline": True}

RulesWriter = Callable[..., Path]


@pytest.fixture
def write_rules(tmp_path: Path) -> RulesWriter:
    """Return a helper writing a JSON rules document under ``tmp_path``."""

    def _write(rules: object = None, *, name: str = "lintstage.json", directory: Path | None = None, **extra: object) -> Path:
        target = (directory or tmp_path) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        document: dict[str, object] = dict(extra)
        if rules is not None:
            document["rules"] = rules
        target.write_text(json.dumps(document), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def report_stream() -> StringIO:
    return StringIO()


@pytest.fixture
def report_console(report_stream: StringIO) -> Console:
    """Return a plain console writing into ``report_stream``."""

    return Console(file=report_stream, width=400, no_color=True, highlight=False)


@pytest.fixture
def collected() -> list[str]:
    return []


@pytest.fixture
def make_pipeline(
    write_rules: RulesWriter,
    report_console: Console,
    collected: list[str],
) -> Callable[..., LintPipeline]:
    """Return a factory building pipelines over a whitespace rules document by default."""

    def _make(rules: object = None, *, engine: LintEngine | None = None, **option_values: object) -> LintPipeline:
        if "configuration_path" not in option_values:
            option_values["configuration_path"] = write_rules(WHITESPACE_RULES if rules is None else rules)
        option_values.setdefault("log_error", collected.append)
        return LintPipeline(StageOptions(**option_values), engine=engine, console=report_console)

    return _make
