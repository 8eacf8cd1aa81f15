# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by tree walkers."""

from __future__ import annotations

from typing import Final

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        "node_modules",
        "__pycache__",
        "bower_components",
    }
)


def is_excluded_dir(name: str) -> bool:
    """Return whether a directory called ``name`` is never descended into."""

    return name.startswith(".") or name in ALWAYS_EXCLUDE_DIRS


__all__ = ["ALWAYS_EXCLUDE_DIRS", "is_excluded_dir"]
