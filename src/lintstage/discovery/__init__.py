# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem collaborator feeding file trees into the lint stage."""

from __future__ import annotations

from .filesystem import ALWAYS_EXCLUDE_DIRS, DigestOutcomeCache, TreeBuilder, iter_tracked_files

__all__ = ["ALWAYS_EXCLUDE_DIRS", "DigestOutcomeCache", "TreeBuilder", "iter_tracked_files"]
