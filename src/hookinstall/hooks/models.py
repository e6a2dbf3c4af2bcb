# SPDX-License-Identifier: MIT
"""Dataclasses describing requested hooks and installation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class InlineSource:
    """Hook content generated from the configured inline script."""

    body: str
    marker: str = ""


@dataclass(frozen=True, slots=True)
class FileSource:
    """Hook content copied from a file inside the project."""

    path: Path


HookSource = InlineSource | FileSource


@dataclass(frozen=True, slots=True)
class HookSpec:
    """A single requested hook installation."""

    name: str
    source: HookSource

    @property
    def is_inline(self) -> bool:
        return isinstance(self.source, InlineSource)


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from attempting to install git hooks."""

    installed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    dry_run: bool = False


__all__ = ["FileSource", "HookSource", "HookSpec", "InlineSource", "InstallResult"]
