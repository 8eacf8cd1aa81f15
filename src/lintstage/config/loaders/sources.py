# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read rules documents (JSON or TOML) and resolve their ``extends`` chains."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Final

from lintstage.core.errors import ConfigNotFound, ConfigParseError, ConfigShapeError
from lintstage.core.models import RuleSetting
from lintstage.core.severity import DISABLED_SEVERITIES, Severity, parse_severity

from ..presets import BUILTIN_PRESETS, is_preset_reference

RULES_KEY: Final[str] = "rules"
EXTENDS_KEY: Final[str] = "extends"
DEFAULT_SEVERITY_KEY: Final[str] = "defaultSeverity"
TOML_SUFFIX: Final[str] = ".toml"

RULES_SHAPE_MESSAGE: Final[str] = (
    "The format of the config file is { rules: { /* rules list */ } }, where /* rules list */ "
    "is a key: value comma-separated list of rulename: rule-options pairs."
)
_SETTING_KEYS: Final[frozenset[str]] = frozenset({"severity", "options"})


def read_document(path: Path) -> dict[str, Any]:
    """Return the parsed top-level mapping stored at ``path``.

    Args:
        path: Rules document location. ``.toml`` files are parsed as TOML,
            everything else as JSON.

    Returns:
        dict[str, Any]: Parsed document.

    Raises:
        ConfigNotFound: If ``path`` is not an existing file.
        ConfigParseError: If the content is malformed or not a mapping.
    """

    if not path.is_file():
        raise ConfigNotFound(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, str(exc)) from exc
    try:
        data = tomllib.loads(text) if path.suffix == TOML_SUFFIX else json.loads(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be an object")
    return data


def parse_rule_setting(name: str, raw: Any, default_severity: Severity = Severity.ERROR) -> RuleSetting:
    """Translate one rule entry into a :class:`RuleSetting`.

    Accepted shapes are ``true``/``false``, ``[enabled, *options]`` and
    ``{"severity": ..., "options": ...}``.

    Args:
        name: Rule identifier, used in error messages.
        raw: Raw rule value from the document.
        default_severity: Severity applied when the entry names none.

    Returns:
        RuleSetting: Normalised rule setting.

    Raises:
        ConfigShapeError: If ``raw`` has an unsupported shape or severity.
    """

    if isinstance(raw, bool):
        return RuleSetting(enabled=raw, severity=default_severity)
    if isinstance(raw, list):
        if not raw or not isinstance(raw[0], bool):
            raise ConfigShapeError(f"Rule '{name}' must start with a boolean enabled flag")
        return RuleSetting(enabled=raw[0], severity=default_severity, options=tuple(raw[1:]))
    if isinstance(raw, Mapping):
        unknown = set(raw) - _SETTING_KEYS
        if unknown:
            raise ConfigShapeError(f"Rule '{name}' has unsupported keys: {', '.join(sorted(unknown))}")
        severity_raw = raw.get("severity")
        enabled = True
        severity = default_severity
        if isinstance(severity_raw, str) and severity_raw.strip().lower() in DISABLED_SEVERITIES:
            enabled = False
        elif severity_raw is not None:
            severity = _severity_or_shape_error(severity_raw, f"Rule '{name}'")
        options = raw.get("options", ())
        if not isinstance(options, list | tuple):
            options = (options,)
        return RuleSetting(enabled=enabled, severity=severity, options=tuple(options))
    raise ConfigShapeError(f"Rule '{name}' has unsupported setting {raw!r}")


def _severity_or_shape_error(raw: Any, context: str) -> Severity:
    if not isinstance(raw, str):
        raise ConfigShapeError(f"{context} severity must be a string")
    try:
        return parse_severity(raw)
    except ValueError as exc:
        raise ConfigShapeError(f"{context}: {exc}") from exc


class RulesDocumentSource:
    """Load a rules document and every document it ``extends``."""

    def __init__(self, path: Path) -> None:
        self._root_path = path
        self.name = str(path)

    def load(self) -> dict[str, RuleSetting]:
        """Return the merged rule map described by the document chain.

        Returns:
            dict[str, RuleSetting]: Rule settings keyed by rule name, base
            documents first, overridden by extending documents.
        """

        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> dict[str, RuleSetting]:
        resolved = path.resolve()
        if resolved in stack:
            chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigShapeError(f"Circular extends detected: {chain}")
        document = read_document(resolved)
        extends = self._coerce_extends(document.get(EXTENDS_KEY))
        rules_raw = document.get(RULES_KEY)
        if rules_raw is None and not extends:
            raise ConfigShapeError(RULES_SHAPE_MESSAGE)
        if rules_raw is None:
            rules_raw = {}
        if not isinstance(rules_raw, Mapping):
            raise ConfigShapeError(RULES_SHAPE_MESSAGE)
        default_raw = document.get(DEFAULT_SEVERITY_KEY)
        default_severity = (
            Severity.ERROR if default_raw is None else _severity_or_shape_error(default_raw, DEFAULT_SEVERITY_KEY)
        )

        merged: dict[str, RuleSetting] = {}
        for reference in extends:
            if is_preset_reference(reference):
                merged.update(self._load_preset(reference))
            else:
                merged.update(self._load(self._resolve_path(Path(reference), resolved.parent), (*stack, resolved)))
        for name, raw in rules_raw.items():
            merged[str(name)] = parse_rule_setting(str(name), raw, default_severity)
        return merged

    @staticmethod
    def _load_preset(reference: str) -> dict[str, RuleSetting]:
        preset = BUILTIN_PRESETS.get(reference)
        if preset is None:
            raise ConfigShapeError(f"Unknown preset '{reference}'")
        return {name: parse_rule_setting(name, raw) for name, raw in preset.items()}

    @staticmethod
    def _coerce_extends(raw: Any) -> list[str]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, Iterable) and not isinstance(raw, Mapping | bytes):
            items = list(raw)
            if all(isinstance(item, str) for item in items):
                return items
        raise ConfigShapeError(f"Unsupported extends declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)


__all__ = [
    "DEFAULT_SEVERITY_KEY",
    "EXTENDS_KEY",
    "RULES_KEY",
    "RULES_SHAPE_MESSAGE",
    "RulesDocumentSource",
    "parse_rule_setting",
    "read_document",
]
