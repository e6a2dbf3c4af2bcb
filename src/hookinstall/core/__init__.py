# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console and logging primitives shared by the library and CLI."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty, get_console_manager
from .logging import emoji, fail, info, ok, warn

__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "emoji",
    "fail",
    "get_console_manager",
    "info",
    "ok",
    "warn",
]
