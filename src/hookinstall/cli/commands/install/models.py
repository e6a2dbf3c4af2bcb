# SPDX-License-Identifier: MIT
"""Data structures for the install CLI command."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import typer

from hookinstall.filesystem import normalize_absolute

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Repository root.", file_okay=False),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file replacing .hookinstall.toml.", dir_okay=False),
]
HOOK_OPTION = Annotated[
    list[str] | None,
    typer.Option("--hook", help="Install the default script as this hook. Repeatable."),
]
RESOURCE_HOOK_OPTION = Annotated[
    list[str] | None,
    typer.Option("--resource-hook", help="Install NAME=PATH from a project file. Repeatable."),
]
SCRIPT_FILE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--script-file",
        help="Read the inline hook body from this file.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path
    config_path: Path | None
    hooks: dict[str, str] = field(default_factory=dict)
    resource_hooks: dict[str, str] = field(default_factory=dict)
    script: str | None = None
    dry_run: bool = False
    emoji: bool = True

    @classmethod
    def from_cli(
        cls,
        root: Path,
        config_path: Path | None,
        *,
        hooks: Iterable[str] = (),
        resource_hooks: Iterable[str] = (),
        script_file: Path | None = None,
        dry_run: bool = False,
        emoji: bool = True,
    ) -> InstallCLIOptions:
        """Return options parsed from CLI arguments.

        Raises:
            typer.BadParameter: Raised when a ``--resource-hook`` value lacks ``=``
                or the ``--script-file`` cannot be read as UTF-8 text.
        """

        return cls(
            root=normalize_absolute(root),
            config_path=normalize_absolute(config_path) if config_path is not None else None,
            hooks={name: "" for name in hooks},
            resource_hooks=dict(parse_resource_hook(value) for value in resource_hooks),
            script=read_script_file(script_file) if script_file is not None else None,
            dry_run=dry_run,
            emoji=emoji,
        )


def read_script_file(path: Path) -> str:
    """Return the inline hook body stored in ``path``.

    Raises:
        typer.BadParameter: Raised when the file cannot be read or is not UTF-8.
    """

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text", param_hint="--script-file") from exc
    except OSError as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc.strerror or exc}", param_hint="--script-file") from exc


def parse_resource_hook(value: str) -> tuple[str, str]:
    """Split a ``NAME=PATH`` option value.

    Raises:
        typer.BadParameter: Raised when either side is empty or ``=`` is missing.
    """

    name, sep, path = value.partition("=")
    if not sep or not name or not path:
        raise typer.BadParameter(f"expected NAME=PATH, got {value!r}", param_hint="--resource-hook")
    return name, path


__all__ = [
    "CONFIG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "HOOK_OPTION",
    "InstallCLIOptions",
    "RESOURCE_HOOK_OPTION",
    "ROOT_OPTION",
    "SCRIPT_FILE_OPTION",
    "parse_resource_hook",
    "read_script_file",
]
