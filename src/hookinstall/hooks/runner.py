# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing project git hooks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from hookinstall.constants import DEFAULT_HOOKS_DIR, DEFAULT_SCRIPT
from hookinstall.core.logging import info, ok
from hookinstall.filesystem import display_relative_path, is_contained, resolve_within

from .errors import InvalidHookNameError, NotARepositoryError, PathContainmentError
from .models import FileSource, HookSpec, InlineSource, InstallResult
from .registry import is_valid_hook_name
from .writer import HookWriter


@dataclass(frozen=True, slots=True)
class HookDirectories:
    """Describe filesystem locations used during hook installation."""

    project_root: Path
    target_dir: Path


def build_hook_specs(
    hooks: Mapping[str, str] | None,
    resource_hooks: Mapping[str, str | Path] | None,
    *,
    script: str = DEFAULT_SCRIPT,
) -> list[HookSpec]:
    """Return the requested hooks as one ordered list, inline entries first.

    Args:
        hooks: Hook name to marker mapping; every entry installs ``script``.
        resource_hooks: Hook name to source path mapping.
        script: Body written for every inline hook.

    Returns:
        list[HookSpec]: Specs in mapping iteration order.
    """

    specs = [
        HookSpec(name=name, source=InlineSource(body=script, marker=marker)) for name, marker in (hooks or {}).items()
    ]
    specs.extend(
        HookSpec(name=name, source=FileSource(path=Path(path))) for name, path in (resource_hooks or {}).items()
    )
    return specs


def install_hooks(
    root: Path,
    *,
    hooks: Mapping[str, str] | None = None,
    resource_hooks: Mapping[str, str | Path] | None = None,
    script: str = DEFAULT_SCRIPT,
    hooks_dir: Path | None = None,
    dry_run: bool = False,
    emoji: bool = True,
) -> InstallResult:
    """Install inline and file-backed git hooks into ``.git/hooks``.

    Entries are processed in order and the run stops at the first invalid
    hook name, escaping source path or write failure. Hooks written before
    the failing entry stay in place.

    Args:
        root: Project root; relative resource paths are resolved against it.
        hooks: Hook names that receive the inline ``script``.
        resource_hooks: Hook names mapped to scripts inside the project.
        script: Body written after the shebang for inline hooks.
        hooks_dir: Optional override for the target hooks directory.
        dry_run: When ``True`` validate everything but leave the filesystem untouched.
        emoji: Whether progress messages may include emoji.

    Returns:
        InstallResult: Installed destinations and skipped sources.

    Raises:
        NotARepositoryError: Raised when the hooks directory does not exist.
        InvalidHookNameError: Raised for a name git does not recognise.
        PathContainmentError: Raised when a resource path escapes ``root``.
        HookWriteError: Raised when a hook cannot be written.
    """

    directories = _prepare_directories(root, hooks_dir)
    writer = HookWriter(directories.target_dir, use_emoji=emoji)
    result = InstallResult(dry_run=dry_run)

    for spec in build_hook_specs(hooks, resource_hooks, script=script):
        _install_single_hook(
            spec,
            directories=directories,
            writer=writer,
            result=result,
            dry_run=dry_run,
            emoji=emoji,
        )

    if dry_run:
        ok(f"Dry run complete: would install {len(result.installed)} hooks", use_emoji=emoji)
    else:
        ok(f"Installed {len(result.installed)} hooks", use_emoji=emoji)
    return result


def _prepare_directories(root: Path, hooks_dir: Path | None) -> HookDirectories:
    """Return validated directories required for hook installation.

    Raises:
        NotARepositoryError: Raised when the hooks directory is missing.
    """

    project_root = resolve_within(root, Path.cwd())
    target_dir = resolve_within(hooks_dir or DEFAULT_HOOKS_DIR, project_root)
    if not target_dir.is_dir():
        raise NotARepositoryError(target_dir)
    return HookDirectories(project_root=project_root, target_dir=target_dir)


def _install_single_hook(
    spec: HookSpec,
    *,
    directories: HookDirectories,
    writer: HookWriter,
    result: InstallResult,
    dry_run: bool,
    emoji: bool,
) -> None:
    if not is_valid_hook_name(spec.name):
        raise InvalidHookNameError(spec.name)

    source = spec.source
    if isinstance(source, InlineSource):
        info(f"Generating {spec.name} from configuration", use_emoji=emoji)
        if dry_run:
            result.installed.append(writer.destination(spec.name))
            return
        result.installed.append(writer.write_inline(spec.name, source.body))
        return

    source_path = resolve_within(source.path, directories.project_root)
    if not is_contained(source_path, directories.project_root):
        raise PathContainmentError(source_path, directories.project_root)

    info(
        f"Generating {spec.name} from {display_relative_path(source_path, directories.project_root)}",
        use_emoji=emoji,
    )
    if dry_run:
        if source_path.is_file():
            result.installed.append(writer.destination(spec.name))
        else:
            result.skipped.append(source_path)
        return

    destination = writer.copy_from_source(spec.name, source_path)
    if destination is None:
        result.skipped.append(source_path)
    else:
        result.installed.append(destination)


__all__ = ["HookDirectories", "build_hook_specs", "install_hooks"]
