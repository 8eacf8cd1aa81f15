# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate, read and validate rules documents and stage options."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Any, Final

from pydantic import ValidationError

from lintstage.core.constants import is_excluded_dir
from lintstage.core.errors import ConfigParseError, ConfigShapeError
from lintstage.core.logging import info, warn
from lintstage.core.models import RulesConfiguration

from .loaders import RulesDocumentSource
from .models import DEFAULT_RULES_FILENAME, StageOptions

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintstage"
_PATH_OPTIONS: Final[frozenset[str]] = frozenset({"configuration_path", "output_file"})


def load_rules(path: Path | str | None = None, *, use_emoji: bool = False) -> RulesConfiguration:
    """Load and validate the rules document at ``path``.

    Args:
        path: Rules document location. Defaults to ``lintstage.json`` in the
            current working directory.
        use_emoji: Whether informational notices may include emoji.

    Returns:
        RulesConfiguration: Validated, immutable rules configuration.

    Raises:
        ConfigNotFound: If the document does not exist.
        ConfigParseError: If the document is not well-formed.
        ConfigShapeError: If the document lacks a valid ``rules`` mapping.
    """

    if path is None:
        path = Path.cwd() / DEFAULT_RULES_FILENAME
        info(f"Using {DEFAULT_RULES_FILENAME} as the default file for linting rules", use_emoji=use_emoji)
    return _load_document(Path(path).expanduser().resolve(), use_emoji=use_emoji)


def _load_document(path: Path, *, use_emoji: bool) -> RulesConfiguration:
    config = RulesConfiguration(rules=RulesDocumentSource(path).load(), source=path)
    if config.is_empty:
        warn("No rules defined for linting", use_emoji=use_emoji)
    return config


class RulesResolver:
    """Resolve the rules that apply to a file, honouring nested documents.

    With per-directory resolution enabled and a tree root available, every
    document named ``filename`` under the root is loaded up front by
    :meth:`scan`, so an invalid nested document fails before any file is
    linted. The nearest document between a file's directory and the root
    wins; otherwise the global configuration applies.
    """

    def __init__(
        self,
        global_rules: RulesConfiguration,
        *,
        root: Path | None = None,
        filename: str = DEFAULT_RULES_FILENAME,
        per_directory: bool = False,
        use_emoji: bool = False,
    ) -> None:
        self._global = global_rules
        self._root = root.resolve() if root is not None else None
        self._filename = filename
        self._per_directory = per_directory and root is not None
        self._use_emoji = use_emoji
        self._documents: dict[PurePosixPath, RulesConfiguration] = {}
        self.scan()

    @property
    def global_rules(self) -> RulesConfiguration:
        """Return the configuration used when no nested document applies."""

        return self._global

    def scan(self) -> bool:
        """Reload every nested rules document under the tree root.

        Returns:
            bool: ``True`` when the loaded documents differ from the previous scan.

        Raises:
            ConfigError: If a nested document is missing its rules or malformed.
        """

        if not self._per_directory:
            return False
        assert self._root is not None
        documents: dict[PurePosixPath, RulesConfiguration] = {}
        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames[:] = sorted(name for name in dirnames if not is_excluded_dir(name))
            if self._filename not in filenames:
                continue
            current = Path(dirpath)
            document = (current / self._filename).resolve()
            directory = PurePosixPath(current.relative_to(self._root).as_posix())
            if document == self._global.source:
                documents[directory] = self._global
            else:
                documents[directory] = _load_document(document, use_emoji=self._use_emoji)
        changed = documents != self._documents
        self._documents = documents
        return changed

    def resolve(self, relative_path: str) -> RulesConfiguration:
        """Return the rules applying to ``relative_path``.

        Args:
            relative_path: POSIX path of the file relative to the tree root.

        Returns:
            RulesConfiguration: Nearest enclosing configuration or the global one.
        """

        documents = self._documents
        directory = PurePosixPath(relative_path).parent
        for candidate in (directory, *directory.parents):
            config = documents.get(candidate)
            if config is not None:
                return config
        return self._global


def load_stage_options(project_root: Path, **overrides: Any) -> StageOptions:
    """Build :class:`StageOptions` from ``[tool.lintstage]`` plus ``overrides``.

    Keys may use kebab or snake case. Relative paths resolve against
    ``project_root``. ``overrides`` whose value is ``None`` are ignored.

    Args:
        project_root: Directory containing ``pyproject.toml``.
        **overrides: Option values taking precedence over the file.

    Returns:
        StageOptions: Validated options.

    Raises:
        ConfigParseError: If ``pyproject.toml`` is malformed.
        ConfigShapeError: If the section contains invalid options.
    """

    root = project_root.resolve()
    payload: dict[str, Any] = dict(_read_pyproject_section(root / PYPROJECT_FILENAME))
    payload.update({key: value for key, value in overrides.items() if value is not None})
    for key in _PATH_OPTIONS:
        value = payload.get(key)
        if isinstance(value, str | Path) and not Path(value).is_absolute():
            payload[key] = root / value
    try:
        return StageOptions(**payload)
    except ValidationError as exc:
        raise ConfigShapeError(f"Invalid [tool.{PYPROJECT_SECTION_KEY}] options: {exc}") from exc


def _read_pyproject_section(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return {str(key).replace("-", "_"): value for key, value in section.items()}


__all__ = ["RulesResolver", "load_rules", "load_stage_options"]
