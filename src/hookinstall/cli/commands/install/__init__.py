# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Git hooks install command package."""

from __future__ import annotations

import typer

from .command import install_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``install`` command on the Typer application."""

    app.command(name="install", help="Install configured git hooks into .git/hooks.")(install_command)
