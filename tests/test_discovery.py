# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for tree discovery and the incremental tree builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintstage.config import ConfigParseError, StageOptions
from lintstage.core.errors import BuildFailedError, LintEngineError
from lintstage.core.models import FileOutcome
from lintstage.discovery import DigestOutcomeCache, TreeBuilder, iter_tracked_files
from lintstage.orchestration import BuildState, LintPipeline


def _tree(root: Path, files: dict[str, str | bytes]) -> Path:
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


def test_iter_tracked_files_is_sorted_and_filtered(tmp_path: Path) -> None:
    root = _tree(
        tmp_path / "in",
        {
            "b.ts": "b\n",
            "a.ts": "a\n",
            "notes.md": "x",
            "lib/c.ts": "c\n",
            ".hidden/d.ts": "d\n",
            "node_modules/pkg/e.ts": "e\n",
            "out/f.ts": "f\n",
        },
    )

    found = list(iter_tracked_files(root, [".ts"], exclude=[root / "out"]))

    assert found == [("a.ts", "a\n"), ("b.ts", "b\n"), ("lib/c.ts", "c\n")]


def test_iter_tracked_files_rejects_undecodable_input(tmp_path: Path) -> None:
    root = _tree(tmp_path, {"a.ts": b"\xff\xfe\x00"})

    with pytest.raises(LintEngineError, match="a.ts"):
        list(iter_tracked_files(root, ["ts"]))


def test_digest_cache_replays_only_unchanged_content() -> None:
    cache = DigestOutcomeCache()
    outcome = FileOutcome(relative_path="a.ts", passed=True)
    cache.put("a.ts", "one", outcome)

    assert cache.get("a.ts", "one") is outcome
    assert cache.get("a.ts", "two") is None
    assert cache.get("b.ts", "one") is None
    assert cache.hits == 1


def test_tree_builder_writes_caches_and_prunes(tmp_path: Path, make_pipeline) -> None:
    input_root = _tree(tmp_path / "in", {"a.ts": 'var Xx = "abcd";\n', "lib/b.ts": 'var Xx = "abcd"; '})
    output_root = tmp_path / "out"
    builder = TreeBuilder(make_pipeline(), input_root, output_root)

    first = builder.build()

    assert sorted(path.relative_to(output_root).as_posix() for path in output_root.rglob("*.js")) == [
        "a.lint-test.js",
        "lib/b.lint-test.js",
    ]
    assert first.report.failure_count == 2

    second = builder.build()

    assert builder.cache.hits == 2
    assert second.report == first.report

    (input_root / "lib" / "b.ts").unlink()
    third = builder.build()

    assert not (output_root / "lib" / "b.lint-test.js").exists()
    assert (output_root / "a.lint-test.js").exists()
    assert third.report.summary_line == "Finished linting 1 file successfully"


def test_tree_builder_writes_artifacts_when_build_fails(tmp_path: Path, make_pipeline) -> None:
    input_root = _tree(tmp_path / "in", {"a.ts": 'var Xx = "abcd"; '})
    output_root = tmp_path / "out"
    builder = TreeBuilder(make_pipeline(fail_build=True), input_root, output_root)

    with pytest.raises(BuildFailedError):
        builder.build()

    assert "assert.ok(false" in (output_root / "a.lint-test.js").read_text(encoding="utf-8")


def test_digest_cache_keeps_one_entry_per_path() -> None:
    cache = DigestOutcomeCache()
    first = FileOutcome(relative_path="a.ts", passed=True)
    second = FileOutcome(relative_path="a.ts", passed=False)

    cache.put("a.ts", "one", first)
    cache.put("a.ts", "two", second)

    assert cache.get("a.ts", "one") is None
    assert cache.get("a.ts", "two") is second


def test_tree_builder_rescans_nested_documents(tmp_path: Path, write_rules, report_console) -> None:
    input_root = _tree(tmp_path / "in", {"legacy/a.ts": "var a = 1;\n"})
    global_path = write_rules({"eofline": True}, directory=input_root)
    pipeline = LintPipeline(
        StageOptions(configuration_path=global_path, resolve_per_directory=True),
        tree_root=input_root,
        console=report_console,
    )
    builder = TreeBuilder(pipeline, input_root, tmp_path / "out")

    assert builder.build().report.passed

    write_rules({"no-var-keyword": True}, directory=input_root / "legacy")
    result = builder.build()

    assert result.report.failure_count == 1
    assert builder.cache.hits == 0


def test_tree_builder_rejects_invalid_nested_document_before_writing(
    tmp_path: Path,
    write_rules,
    report_console,
) -> None:
    input_root = _tree(tmp_path / "in", {"a.ts": "let a = 1;\n"})
    global_path = write_rules({"eofline": True}, directory=input_root)
    pipeline = LintPipeline(
        StageOptions(configuration_path=global_path, resolve_per_directory=True),
        tree_root=input_root,
        console=report_console,
    )
    output_root = tmp_path / "out"
    builder = TreeBuilder(pipeline, input_root, output_root)
    (input_root / "lib").mkdir()
    (input_root / "lib" / "lintstage.json").write_text("{ rules: ", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        builder.build()

    assert not output_root.exists()
    assert pipeline.aggregator.state is BuildState.IDLE
