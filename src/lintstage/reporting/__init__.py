# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic formatting and report delivery."""

from __future__ import annotations

from .emitters import (
    CallbackNotifier,
    ConsoleReportSink,
    FileReportSink,
    Notifier,
    NullNotifier,
    ReportSink,
    select_report_sink,
)
from .formatters import format_diagnostic, format_diagnostic_text

__all__ = [
    "CallbackNotifier",
    "ConsoleReportSink",
    "FileReportSink",
    "Notifier",
    "NullNotifier",
    "ReportSink",
    "format_diagnostic",
    "format_diagnostic_text",
    "select_report_sink",
]
