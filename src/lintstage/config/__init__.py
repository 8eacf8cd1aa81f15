# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading for the lint stage."""

from __future__ import annotations

from lintstage.core.errors import ConfigError, ConfigNotFound, ConfigParseError, ConfigShapeError

from .loader import RulesResolver, load_rules, load_stage_options
from .models import DEFAULT_RULES_FILENAME, StageOptions
from .presets import RECOMMENDED_PRESET

__all__ = [
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "ConfigShapeError",
    "DEFAULT_RULES_FILENAME",
    "RECOMMENDED_PRESET",
    "RulesResolver",
    "StageOptions",
    "load_rules",
    "load_stage_options",
]
