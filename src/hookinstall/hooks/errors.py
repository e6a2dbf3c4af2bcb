# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while installing git hooks."""

from __future__ import annotations

from pathlib import Path


class HookInstallError(RuntimeError):
    """Base class for failures that abort a hook installation run."""


class NotARepositoryError(HookInstallError):
    """Raised when the git hooks directory is missing."""

    def __init__(self, hooks_dir: Path) -> None:
        super().__init__(f"Not a git repository (missing {hooks_dir})")
        self.hooks_dir = hooks_dir


class InvalidHookNameError(HookInstallError):
    """Raised when a configured hook name is not recognised by git."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(f"'{hook_name}' is not a valid hook file name.")
        self.hook_name = hook_name


class PathContainmentError(HookInstallError):
    """Raised when a hook source resolves outside the project root."""

    def __init__(self, path: Path, root: Path) -> None:
        super().__init__(
            f"Only files inside the project can be used to generate git hooks: {path} is outside {root}",
        )
        self.path = path
        self.root = root


class HookWriteError(HookInstallError):
    """Raised when a hook file cannot be written, copied, or made executable."""

    def __init__(self, hook_name: str, reason: str) -> None:
        super().__init__(f"Could not write hook with name {hook_name}: {reason}")
        self.hook_name = hook_name


__all__ = [
    "HookInstallError",
    "HookWriteError",
    "InvalidHookNameError",
    "NotARepositoryError",
    "PathContainmentError",
]
