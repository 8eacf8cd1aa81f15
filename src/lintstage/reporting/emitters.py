# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deliver build reports to a file or the console, and notify side channels."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from rich.console import Console
from rich.text import Text

from lintstage.core.logging import info
from lintstage.core.models import BuildReport
from lintstage.runtime.console.manager import get_console_manager

_LINE_STYLES: Final[dict[str, str]] = {
    "ERROR": "red",
    "WARNING": "yellow",
    "INFO": "blue",
}


@runtime_checkable
class ReportSink(Protocol):
    """Destination receiving the full report once per build."""

    def deliver(self, report: BuildReport) -> None:
        """Write ``report`` to the sink."""
        raise NotImplementedError


@runtime_checkable
class Notifier(Protocol):
    """Side channel invoked for every formatted diagnostic and summary line."""

    def notify(self, line: str) -> None:
        """Receive one report line."""
        raise NotImplementedError


class NullNotifier:
    """Notifier that discards every line."""

    def notify(self, line: str) -> None:
        return None


class CallbackNotifier:
    """Forward each line to a caller-supplied callable."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def notify(self, line: str) -> None:
        self._callback(line)


class FileReportSink:
    """Write the report to ``path``, overwriting it every build."""

    def __init__(self, path: Path, *, use_emoji: bool = False) -> None:
        self.path = path
        self._use_emoji = use_emoji

    def deliver(self, report: BuildReport) -> None:
        """Overwrite the report file, then announce its location."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{report.text}\n", encoding="utf-8")
        info(f"Lint output written to file: {self.path}", use_emoji=self._use_emoji)


class ConsoleReportSink:
    """Print the report through a Rich console."""

    def __init__(self, console: Console | None = None, *, use_color: bool = True, use_emoji: bool = False) -> None:
        self._console = console
        self._use_color = use_color
        self._use_emoji = use_emoji

    @property
    def console(self) -> Console:
        """Return the injected console or the shared one for the current settings."""

        if self._console is None:
            return get_console_manager().get(color=self._use_color, emoji=self._use_emoji)
        return self._console

    def deliver(self, report: BuildReport) -> None:
        """Print the summary line followed by every diagnostic line."""

        colour = self._use_color
        console = self.console
        summary = Text(report.summary_line)
        if colour:
            summary.stylize("green" if report.passed else "yellow")
        console.print(summary)
        for line in report.lines:
            text = Text(line)
            if colour:
                text.stylize(_LINE_STYLES.get(line.split(":", 1)[0], "red"))
            console.print(text)


def select_report_sink(
    output_file: Path | None,
    *,
    console: Console | None = None,
    use_color: bool = True,
    use_emoji: bool = False,
) -> ReportSink:
    """Return the single sink used for a pipeline's reports.

    Args:
        output_file: Report path; when set the report goes only to that file.
        console: Optional console for the default sink.
        use_color: Whether console output may be coloured.
        use_emoji: Whether notices may include emoji.

    Returns:
        ReportSink: File sink when ``output_file`` is set, otherwise console sink.
    """

    if output_file is not None:
        return FileReportSink(output_file, use_emoji=use_emoji)
    return ConsoleReportSink(console, use_color=use_color, use_emoji=use_emoji)


__all__ = [
    "CallbackNotifier",
    "ConsoleReportSink",
    "FileReportSink",
    "Notifier",
    "NullNotifier",
    "ReportSink",
    "select_report_sink",
]
