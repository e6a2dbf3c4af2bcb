# SPDX-License-Identifier: MIT
"""Helper services used by the install CLI command."""

from __future__ import annotations

from hookinstall.config import ConfigError, HookConfig, load_hook_config
from hookinstall.filesystem import display_relative_path
from hookinstall.hooks import HookInstallError, InstallResult, install_hooks

from ...shared import CLIError, CLILogger
from .models import InstallCLIOptions


def resolve_config(options: InstallCLIOptions, *, logger: CLILogger) -> HookConfig:
    """Return the file configuration with CLI entries layered on top.

    Raises:
        CLIError: Raised when the configuration cannot be loaded.
    """

    try:
        config = load_hook_config(options.root, config_path=options.config_path)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    return config.merged_with(
        hooks=options.hooks,
        resource_hooks=options.resource_hooks,
        script=options.script,
    )


def perform_installation(options: InstallCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when configuration or installation fails.
    """

    config = resolve_config(options, logger=logger)
    if not config.hooks and not config.resource_hooks:
        logger.warn("No hooks configured; nothing to install")
    try:
        return install_hooks(
            options.root,
            hooks=config.hooks,
            resource_hooks=config.resource_hooks,
            script=config.script,
            dry_run=options.dry_run,
            emoji=options.emoji,
        )
    except HookInstallError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_install_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary warnings after attempting hook installation."""

    if result.skipped:
        missing = ", ".join(display_relative_path(path, options.root) for path in result.skipped)
        logger.warn(f"Skipped missing hook sources: {missing}")
    if options.dry_run and result.installed:
        planned = ", ".join(str(path) for path in result.installed)
        logger.warn(f"DRY RUN: would install {planned}")


__all__ = ["emit_install_summary", "perform_installation", "resolve_config"]
