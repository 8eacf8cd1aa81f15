# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build aggregator: the per-build state machine.

A build moves ``IDLE -> RUNNING`` in :meth:`BuildAggregator.begin`, which
creates a fresh :class:`BuildSummary`, and back to ``IDLE`` in
:meth:`BuildAggregator.finalize`, which always runs and always delivers the
report before any escalation error is raised.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from lintstage.core.errors import BuildFailedError, BuildStateError
from lintstage.core.models import BuildReport, BuildSummary, FileOutcome
from lintstage.reporting.emitters import Notifier, NullNotifier, ReportSink


class BuildState(str, Enum):
    """Enumerate aggregator states."""

    IDLE = "idle"
    RUNNING = "running"


def _count(value: int, noun: str) -> str:
    return f"{value} {noun}" if value == 1 else f"{value} {noun}s"


def compose_report(summary: BuildSummary, *, aborted: bool = False) -> BuildReport:
    """Return the report describing ``summary``.

    Args:
        summary: Finalized counters of the build.
        aborted: Whether the build stopped on an engine fault.

    Returns:
        BuildReport: Summary line plus every accumulated diagnostic line.
    """

    files = _count(summary.total_files, "file")
    if aborted:
        summary_line = f"Lint build aborted after {files}"
    elif summary.failure_count > 0:
        summary_line = f"Found {_count(summary.failure_count, 'lint error')} in {files}"
    else:
        summary_line = f"Finished linting {files} successfully"
    return BuildReport(
        summary_line=summary_line,
        lines=tuple(summary.formatted_lines),
        total_files=summary.total_files,
        failure_count=summary.failure_count,
        aborted=aborted,
    )


class BuildAggregator:
    """Own per-build counters, report delivery and the escalation policy."""

    def __init__(self, sink: ReportSink, *, notifier: Notifier | None = None, fail_build: bool = False) -> None:
        self._sink = sink
        self._notifier = notifier or NullNotifier()
        self._fail_build = fail_build
        self._state = BuildState.IDLE
        self._summary: BuildSummary | None = None
        self._last_report: BuildReport | None = None

    @property
    def state(self) -> BuildState:
        """Return the current build state."""

        return self._state

    @property
    def summary(self) -> BuildSummary | None:
        """Return the summary of the running build, ``None`` while idle."""

        return self._summary

    @property
    def last_report(self) -> BuildReport | None:
        """Return the report of the most recently finalized build."""

        return self._last_report

    def begin(self) -> BuildSummary:
        """Start a build with zeroed counters.

        Returns:
            BuildSummary: Fresh summary for the new build.

        Raises:
            BuildStateError: If a build is already running.
        """

        if self._state is BuildState.RUNNING:
            raise BuildStateError("a build is already running")
        self._summary = BuildSummary()
        self._state = BuildState.RUNNING
        return self._summary

    def record(self, outcome: FileOutcome) -> None:
        """Fold ``outcome`` into the running build and notify its lines.

        Args:
            outcome: Processed or replayed per-file outcome.

        Raises:
            BuildStateError: If no build is running.
        """

        self._require_running().record(outcome)
        for line in outcome.formatted:
            self._notifier.notify(line)

    def finalize(self, *, aborted: bool = False, escalate: bool = True) -> BuildReport:
        """Deliver the report, return to idle, then apply the escalation policy.

        Args:
            aborted: Whether the build stopped on an engine fault.
            escalate: Whether a failing build may raise :class:`BuildFailedError`.

        Returns:
            BuildReport: Report delivered to the sink.

        Raises:
            BuildStateError: If no build is running.
            BuildFailedError: If escalation applies and lint errors were found.
        """

        summary = self._require_running()
        try:
            summary.finalize()
            report = compose_report(summary, aborted=aborted)
            if not report.passed:
                self._notifier.notify(report.summary_line)
            self._sink.deliver(report)
            self._last_report = report
        finally:
            self._summary = None
            self._state = BuildState.IDLE
        if escalate and not aborted and self._fail_build and report.failure_count > 0:
            raise BuildFailedError(report)
        return report

    @contextmanager
    def cycle(self) -> Iterator[BuildSummary]:
        """Run one build cycle; finalization is guaranteed.

        When the body raises, the partial report is delivered with
        ``aborted=True`` and the original exception propagates.

        Yields:
            BuildSummary: Summary of the running build.
        """

        summary = self.begin()
        try:
            yield summary
        except BaseException:
            self.finalize(aborted=True, escalate=False)
            raise
        self.finalize()

    def _require_running(self) -> BuildSummary:
        if self._state is not BuildState.RUNNING or self._summary is None:
            raise BuildStateError("no build is running")
        return self._summary


__all__ = ["BuildAggregator", "BuildState", "compose_report"]
