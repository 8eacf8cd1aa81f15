# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces the file-tree collaborator depends on."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Protocol, runtime_checkable

from lintstage.core.models import FileOutcome


@runtime_checkable
class FileProcessingStage(Protocol):
    """Process one file's content during an active build."""

    def process(self, relative_path: str, content: str) -> FileOutcome:
        """Lint ``content`` and fold the outcome into the running build.

        Args:
            relative_path: POSIX path of the file relative to the tree root.
            content: Full file text; never altered by the stage.

        Returns:
            FileOutcome: Result for the file.
        """
        raise NotImplementedError


@runtime_checkable
class OutcomeCache(Protocol):
    """Replay outcomes for files whose content has not changed."""

    def get(self, relative_path: str, content: str) -> FileOutcome | None:
        """Return the stored outcome when ``content`` is unchanged."""
        raise NotImplementedError

    def put(self, relative_path: str, content: str, outcome: FileOutcome) -> None:
        """Remember ``outcome`` for ``content``."""
        raise NotImplementedError


def derive_artifact_path(relative_path: str, extension: str, *, keep_source_suffix: bool = False) -> str:
    """Return the derived artifact path for ``relative_path``.

    Args:
        relative_path: POSIX path of the input file.
        extension: Derived artifact extension including its leading dot.
        keep_source_suffix: Append ``extension`` instead of replacing the
            source extension, so ``a.ts`` and ``a.tsx`` stay distinct.

    Returns:
        str: POSIX path of the derived artifact.
    """

    path = PurePosixPath(relative_path)
    if keep_source_suffix:
        return path.with_name(f"{path.name}{extension}").as_posix()
    return path.with_suffix(extension).as_posix()


__all__ = ["FileProcessingStage", "OutcomeCache", "derive_artifact_path"]
