# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint pipeline wiring configuration, engine, generator and aggregator."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath

from rich.console import Console

from lintstage.config.loader import RulesResolver, load_rules
from lintstage.config.models import StageOptions
from lintstage.core.errors import BuildFailedError
from lintstage.core.models import BuildResult, FileOutcome, RulesConfiguration
from lintstage.linting.base import LintEngine
from lintstage.linting.engine import TextRuleEngine
from lintstage.reporting.emitters import CallbackNotifier, Notifier, NullNotifier, select_report_sink
from lintstage.testgen import resolve_generator

from .aggregator import BuildAggregator
from .linter import FileLinter
from .stage import OutcomeCache, derive_artifact_path

EmitCallback = Callable[[str, str], None]


class LintPipeline:
    """Per-file lint stage implementing :class:`FileProcessingStage`.

    Construction loads and validates the rules document, so configuration
    errors surface before any build runs. Each call to :meth:`run_build`
    is one build cycle with fresh counters.
    """

    def __init__(
        self,
        options: StageOptions | None = None,
        *,
        engine: LintEngine | None = None,
        rules: RulesConfiguration | None = None,
        tree_root: Path | None = None,
        console: Console | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.options = options or StageOptions()
        opts = self.options
        self.rules = rules if rules is not None else load_rules(opts.configuration_path, use_emoji=opts.use_emoji)
        self.resolver = RulesResolver(
            self.rules,
            root=tree_root,
            filename=opts.rules_filename,
            per_directory=opts.resolve_per_directory,
            use_emoji=opts.use_emoji,
        )
        generator = resolve_generator(opts.test_generator)
        self.artifact_extension = opts.artifact_extension or generator.extension
        self.linter = FileLinter(
            engine or TextRuleEngine(use_emoji=opts.use_emoji),
            self.resolver,
            None if opts.disable_test_generator else generator,
        )
        if notifier is None:
            notifier = CallbackNotifier(opts.log_error) if opts.log_error is not None else NullNotifier()
        sink = select_report_sink(opts.output_file, console=console, use_color=opts.use_color, use_emoji=opts.use_emoji)
        self.aggregator = BuildAggregator(sink, notifier=notifier, fail_build=opts.fail_build)

    def accepts(self, relative_path: str) -> bool:
        """Return whether ``relative_path`` has a tracked extension."""

        return PurePosixPath(relative_path).suffix.lstrip(".") in self.options.extensions

    def derived_path(self, relative_path: str) -> str:
        """Return the artifact path derived from ``relative_path``; unique per input."""

        return derive_artifact_path(
            relative_path,
            self.artifact_extension,
            keep_source_suffix=len(self.options.extensions) > 1,
        )

    def process(self, relative_path: str, content: str) -> FileOutcome:
        """Lint one file and fold it into the running build.

        Args:
            relative_path: POSIX path of the file relative to the tree root.
            content: Full file text.

        Returns:
            FileOutcome: Result for the file.

        Raises:
            BuildStateError: If no build is running.
            LintEngineError: If the engine faults on the file.
        """

        outcome = self.linter.lint(relative_path, content)
        self.aggregator.record(outcome)
        return outcome

    def replay(self, outcome: FileOutcome) -> None:
        """Count a previously computed outcome for an unchanged file."""

        self.aggregator.record(outcome)

    def run_build(
        self,
        files: Iterable[tuple[str, str]],
        *,
        emit: EmitCallback | None = None,
        cache: OutcomeCache | None = None,
    ) -> BuildResult:
        """Run one build cycle over ``files``.

        Files without a tracked extension are ignored. Outcomes are folded in
        input order regardless of ``jobs``, so reports are reproducible.

        Args:
            files: ``(relative_path, content)`` pairs for the whole tree.
            emit: Optional callback receiving ``(derived_path, artifact_text)``
                for every file as soon as it is processed.
            cache: Optional cache replaying outcomes for unchanged files.

        Returns:
            BuildResult: Report, outcomes and derived outputs of the build.

        Raises:
            BuildFailedError: If escalation is enabled and lint errors were
                found; ``result`` is attached to the error.
            LintEngineError: If the engine faults; the partial report has
                already been delivered.
        """

        outcomes: list[FileOutcome] = []
        outputs: dict[str, str] = {}
        try:
            with self.aggregator.cycle():
                entries = [(path, content) for path, content in files if self.accepts(path)]
                for outcome in self._iter_outcomes(entries, cache):
                    self.aggregator.record(outcome)
                    outcomes.append(outcome)
                    derived = self.derived_path(outcome.relative_path)
                    outputs[derived] = outcome.artifact_text
                    if emit is not None:
                        emit(derived, outcome.artifact_text)
        except BuildFailedError as exc:
            exc.result = BuildResult(report=exc.report, outcomes=tuple(outcomes), outputs=outputs)
            raise
        report = self.aggregator.last_report
        assert report is not None
        return BuildResult(report=report, outcomes=tuple(outcomes), outputs=outputs)

    def _iter_outcomes(
        self,
        entries: Sequence[tuple[str, str]],
        cache: OutcomeCache | None,
    ) -> Iterator[FileOutcome]:
        if self.options.jobs <= 1 or len(entries) <= 1:
            for relative_path, content in entries:
                yield self._lint_one(relative_path, content, cache)
            return
        with ThreadPoolExecutor(max_workers=self.options.jobs) as executor:
            futures = [executor.submit(self._lint_one, path, content, cache) for path, content in entries]
            for future in futures:
                yield future.result()

    def _lint_one(self, relative_path: str, content: str, cache: OutcomeCache | None) -> FileOutcome:
        if cache is not None and (cached := cache.get(relative_path, content)) is not None:
            return cached
        outcome = self.linter.lint(relative_path, content)
        if cache is not None:
            cache.put(relative_path, content, outcome)
        return outcome


__all__ = ["EmitCallback", "LintPipeline"]
