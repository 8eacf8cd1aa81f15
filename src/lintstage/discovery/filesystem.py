# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Walk an input tree, feed it to a build and write the derived artifacts."""

from __future__ import annotations

import hashlib
import os
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path

from lintstage.core.constants import ALWAYS_EXCLUDE_DIRS, is_excluded_dir
from lintstage.core.errors import BuildFailedError, LintEngineError
from lintstage.core.models import BuildResult, FileOutcome
from lintstage.orchestration.pipeline import LintPipeline


def iter_tracked_files(
    root: Path,
    extensions: Iterable[str],
    *,
    exclude: Iterable[Path] = (),
) -> Iterator[tuple[str, str]]:
    """Yield ``(relative_posix_path, content)`` for tracked files under ``root``.

    Hidden directories and :data:`ALWAYS_EXCLUDE_DIRS` are skipped. Files are
    yielded in sorted order so builds are reproducible.

    Args:
        root: Tree root.
        extensions: Tracked extensions without leading dots.
        exclude: Directories never descended into (e.g. the output tree).

    Yields:
        tuple[str, str]: Relative path and UTF-8 decoded content.

    Raises:
        LintEngineError: If a tracked file is not valid UTF-8.
    """

    base = root.resolve()
    tracked = {extension.lstrip(".") for extension in extensions}
    excluded = {path.resolve() for path in exclude}
    for dirpath, dirnames, filenames in os.walk(base):
        current = Path(dirpath)
        dirnames[:] = sorted(
            name
            for name in dirnames
            if not is_excluded_dir(name) and (current / name).resolve() not in excluded
        )
        for filename in sorted(filenames):
            path = current / filename
            if path.suffix.lstrip(".") not in tracked:
                continue
            relative = path.relative_to(base).as_posix()
            try:
                content = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise LintEngineError(f"not valid UTF-8 text: {exc}", relative_path=relative) from exc
            yield relative, content


class DigestOutcomeCache:
    """Replay outcomes for files whose content digest is unchanged.

    One entry is kept per ``relative_path``; storing a new outcome replaces
    the previous one for that path.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, FileOutcome]] = {}
        self._lock = threading.Lock()
        self.hits = 0

    @staticmethod
    def _digest(content: str) -> str:
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    def get(self, relative_path: str, content: str) -> FileOutcome | None:
        """Return the stored outcome when the content digest matches."""

        digest = self._digest(content)
        with self._lock:
            entry = self._entries.get(relative_path)
            if entry is None or entry[0] != digest:
                return None
            self.hits += 1
            return entry[1]

    def put(self, relative_path: str, content: str, outcome: FileOutcome) -> None:
        digest = self._digest(content)
        with self._lock:
            self._entries[relative_path] = (digest, outcome)

    def clear(self) -> None:
        """Drop every stored outcome."""

        with self._lock:
            self._entries.clear()


class TreeBuilder:
    """Drive repeated builds of an input directory into an output directory.

    Every build writes exactly one derived artifact per tracked input and
    deletes artifacts written by earlier builds whose inputs disappeared.
    Artifacts are written even when the build escalates to
    :class:`~lintstage.core.errors.BuildFailedError`.
    """

    def __init__(self, pipeline: LintPipeline, input_root: Path, output_root: Path) -> None:
        self.pipeline = pipeline
        self.input_root = input_root.resolve()
        self.output_root = output_root.resolve()
        self.cache = DigestOutcomeCache()
        self._written: set[str] = set()

    def build(self) -> BuildResult:
        """Run one build over the current state of the input tree.

        Returns:
            BuildResult: Result of the build.

        Raises:
            ConfigError: If a nested rules document is invalid; raised
                before any file is processed.
            BuildFailedError: If the pipeline escalates lint errors.
            LintEngineError: If the engine faults on a file.
        """

        if self.pipeline.resolver.scan():
            self.cache.clear()
        files = iter_tracked_files(self.input_root, self.pipeline.options.extensions, exclude=(self.output_root,))
        try:
            result = self.pipeline.run_build(files, emit=self._write, cache=self.cache)
        except BuildFailedError as exc:
            if exc.result is not None:
                self._prune(exc.result.outputs.keys())
            raise
        self._prune(result.outputs.keys())
        return result

    def _write(self, derived_path: str, text: str) -> None:
        target = self.output_root / derived_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        self._written.add(derived_path)

    def _prune(self, current: Iterable[str]) -> None:
        keep = set(current)
        for stale in sorted(self._written - keep):
            (self.output_root / stale).unlink(missing_ok=True)
        self._written = keep


__all__ = ["ALWAYS_EXCLUDE_DIRS", "DigestOutcomeCache", "TreeBuilder", "iter_tracked_files"]
