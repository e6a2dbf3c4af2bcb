# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across hookinstall modules."""

from __future__ import annotations

from pathlib import Path
from typing import Final

SHEBANG: Final[str] = "#!/bin/sh"
DEFAULT_HOOKS_DIR: Final[Path] = Path(".git/hooks")
HOOK_FILE_MODE: Final[int] = 0o700

PROJECT_CONFIG_NAME: Final[str] = ".hookinstall.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION_KEY: Final[str] = "hookinstall"

DEFAULT_SCRIPT: Final[str] = (
    "# Change directory to the project's root\n"
    'cd "$(git rev-parse --show-toplevel)"\n'
    "\n"
    "# Check for updated dependencies and microservice versions\n"
    "dependency_updates=$(mvn versions:display-property-updates versions:display-parent-updates"
    " -DgenerateBackupPoms=false \\\n"
    "    | grep '\\->' \\\n"
    "    | awk -F ' ' '{if ($2 != $4) print $0}')\n"
    "\n"
    "# Check if dependency updates are available\n"
    'if [[ -n "$dependency_updates" ]]; then\n'
    '    echo "WARNING: The following dependencies or microservices have updates available:"\n'
    '    echo "$dependency_updates"\n'
    "fi"
)

__all__ = [
    "DEFAULT_HOOKS_DIR",
    "DEFAULT_SCRIPT",
    "HOOK_FILE_MODE",
    "PROJECT_CONFIG_NAME",
    "PYPROJECT_NAME",
    "PYPROJECT_SECTION_KEY",
    "SHEBANG",
]
