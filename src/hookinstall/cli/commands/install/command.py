# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing git hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ...shared import CLIError, build_cli_logger
from .models import (
    CONFIG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    HOOK_OPTION,
    RESOURCE_HOOK_OPTION,
    ROOT_OPTION,
    SCRIPT_FILE_OPTION,
    InstallCLIOptions,
)
from .services import emit_install_summary, perform_installation


def install_command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    hook: HOOK_OPTION = None,
    resource_hook: RESOURCE_HOOK_OPTION = None,
    script_file: SCRIPT_FILE_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install configured git hooks for the repository at ``--root``.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = InstallCLIOptions.from_cli(
        root,
        config,
        hooks=hook or (),
        resource_hooks=resource_hook or (),
        script_file=script_file,
        dry_run=dry_run,
        emoji=emoji,
    )
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["install_command"]
