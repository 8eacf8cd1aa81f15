# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exit codes and helpers shared by CLI commands."""

from __future__ import annotations

from typing import Final

import typer

from lintstage.core.logging import fail

EXIT_OK: Final[int] = 0
EXIT_BUILD_FAILED: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_ENGINE_ERROR: Final[int] = 3


def abort(message: str, *, exit_code: int, use_emoji: bool) -> typer.Exit:
    """Render ``message`` as a failure and return the matching ``typer.Exit``.

    Args:
        message: Text describing the failure.
        exit_code: Process exit status.
        use_emoji: Whether the message may include emoji.

    Returns:
        typer.Exit: Exception the caller raises to terminate the command.
    """

    fail(message, use_emoji=use_emoji)
    return typer.Exit(code=exit_code)


__all__ = ["EXIT_BUILD_FAILED", "EXIT_CONFIG_ERROR", "EXIT_ENGINE_ERROR", "EXIT_OK", "abort"]
