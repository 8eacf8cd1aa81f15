# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in rule presets that documents may ``extends``."""

from __future__ import annotations

from typing import Final

from lintstage.core.models import JsonValue

PRESET_PREFIX: Final[str] = "lintstage:"
RECOMMENDED_PRESET: Final[str] = "lintstage:recommended"

BUILTIN_PRESETS: Final[dict[str, dict[str, JsonValue]]] = {
    RECOMMENDED_PRESET: {
        "eofline": True,
        "indent": [True, "spaces"],
        "max-line-length": [True, 120],
        "no-consecutive-blank-lines": True,
        "no-debugger": True,
        "no-trailing-whitespace": True,
        "no-var-keyword": True,
    },
}


def is_preset_reference(value: str) -> bool:
    """Return whether ``value`` names a built-in preset rather than a file."""

    return value.startswith(PRESET_PREFIX)


__all__ = ["BUILTIN_PRESETS", "PRESET_PREFIX", "RECOMMENDED_PRESET", "is_preset_reference"]
