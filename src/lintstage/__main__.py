# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m lintstage``."""

from __future__ import annotations

from lintstage.cli.app import main

main()
