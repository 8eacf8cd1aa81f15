# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rules document sources."""

from __future__ import annotations

from .sources import RulesDocumentSource, parse_rule_setting, read_document

__all__ = ["RulesDocumentSource", "parse_rule_setting", "read_document"]
