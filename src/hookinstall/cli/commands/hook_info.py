# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read-only commands describing hooks and the merged configuration."""

from __future__ import annotations

from pathlib import Path

import typer

from hookinstall.config import ConfigError, load_hook_config
from hookinstall.filesystem import normalize_absolute
from hookinstall.hooks import available_hooks

from ..shared import build_cli_logger
from .install.models import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION


def list_hooks_command() -> None:
    """Print every hook name git recognises, one per line."""

    for name in available_hooks():
        typer.echo(name)


def show_config_command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the merged hook configuration as JSON.

    Raises:
        typer.Exit: Raised with status 1 when the configuration is invalid.
    """

    try:
        merged = load_hook_config(
            normalize_absolute(root),
            config_path=normalize_absolute(config) if config is not None else None,
        )
    except ConfigError as exc:
        build_cli_logger(emoji=emoji).fail(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(merged.model_dump_json(by_alias=True, indent=2))


def register(app: typer.Typer) -> None:
    """Register ``list-hooks`` and ``show-config`` on the Typer application."""

    app.command(name="list-hooks", help="List the hook names git recognises.")(list_hooks_command)
    app.command(name="show-config", help="Show the merged hook configuration.")(show_config_command)


__all__ = ["list_hooks_command", "register", "show_config_command"]
