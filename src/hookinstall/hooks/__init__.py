# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook registration and installation services."""

from __future__ import annotations

from .errors import (
    HookInstallError,
    HookWriteError,
    InvalidHookNameError,
    NotARepositoryError,
    PathContainmentError,
)
from .models import FileSource, HookSpec, InlineSource, InstallResult
from .registry import GIT_HOOK_NAMES, GitHookType, available_hooks, is_valid_hook_name
from .runner import build_hook_specs, install_hooks
from .writer import HookWriter

__all__ = [
    "GIT_HOOK_NAMES",
    "FileSource",
    "GitHookType",
    "HookInstallError",
    "HookSpec",
    "HookWriteError",
    "HookWriter",
    "InlineSource",
    "InstallResult",
    "InvalidHookNameError",
    "NotARepositoryError",
    "PathContainmentError",
    "available_hooks",
    "build_hook_specs",
    "install_hooks",
    "is_valid_hook_name",
]
