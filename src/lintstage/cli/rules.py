# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``lintstage rules`` command."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from lintstage.linting import default_registry
from lintstage.runtime.console import get_console_manager


def rules_command(
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
) -> None:
    """List the rules implemented by the built-in engine."""

    table = Table(title="Built-in rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Description")
    for definition in default_registry():
        table.add_row(definition.name, definition.description)
    get_console_manager().get(color=not no_color, emoji=False).print(table)


__all__ = ["rules_command"]
