# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install git hook scripts from inline defaults or project files."""

from __future__ import annotations

from importlib import metadata

from .config import ConfigError, HookConfig, load_hook_config
from .filesystem import is_contained, resolve_within
from .hooks import (
    GIT_HOOK_NAMES,
    GitHookType,
    HookInstallError,
    HookWriteError,
    HookWriter,
    InstallResult,
    InvalidHookNameError,
    NotARepositoryError,
    PathContainmentError,
    install_hooks,
    is_valid_hook_name,
)

__all__ = [
    "__version__",
    "ConfigError",
    "GIT_HOOK_NAMES",
    "GitHookType",
    "HookConfig",
    "HookInstallError",
    "HookWriteError",
    "HookWriter",
    "InstallResult",
    "InvalidHookNameError",
    "NotARepositoryError",
    "PathContainmentError",
    "install_hooks",
    "is_contained",
    "is_valid_hook_name",
    "load_hook_config",
    "resolve_within",
]

try:
    __version__ = metadata.version("hookinstall")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
