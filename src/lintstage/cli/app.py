# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .lint import lint_command
from .rules import rules_command

app = typer.Typer(
    name="lintstage",
    help="Per-file lint stage emitting a build report and derived test artifacts.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("lint")(lint_command)
app.command("rules")(rules_command)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
