# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write hook scripts into the git hooks directory."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from hookinstall.constants import HOOK_FILE_MODE, SHEBANG
from hookinstall.core.logging import warn

from .errors import HookWriteError


class HookWriter:
    """Create hook files with owner-only ``rwx`` permissions.

    Every write lands in a temporary file beside the destination and is then
    moved into place with :func:`os.replace`, so a failed write never leaves a
    truncated hook behind and an existing symlink is replaced rather than
    followed.
    """

    def __init__(self, hooks_dir: Path, *, use_emoji: bool = True) -> None:
        self.hooks_dir = hooks_dir
        self.use_emoji = use_emoji

    def destination(self, name: str) -> Path:
        """Return the path a hook called ``name`` is written to."""

        return self.hooks_dir / name

    def write_inline(self, name: str, body: str) -> Path:
        """Write ``body`` prefixed with the ``#!/bin/sh`` shebang as hook ``name``.

        Args:
            name: Validated git hook name.
            body: Shell script body appended after the shebang line.

        Returns:
            Path: Destination hook file.

        Raises:
            HookWriteError: Raised when the hook file cannot be written.
        """

        content = f"{SHEBANG}\n{body}".encode("utf-8")
        return self._replace(name, content=content)

    def copy_from_source(self, name: str, source: Path) -> Path | None:
        """Copy ``source`` verbatim into the hooks directory as hook ``name``.

        Missing or non-regular sources are skipped with a warning.

        Args:
            name: Validated git hook name.
            source: Absolute path of the script to install.

        Returns:
            Path | None: Destination hook file, or ``None`` when ``source`` was skipped.

        Raises:
            HookWriteError: Raised when an existing source cannot be copied.
        """

        if not source.is_file():
            warn(f"Hook source for {name} not found at {source}; skipping", use_emoji=self.use_emoji)
            return None
        return self._replace(name, source=source)

    def _replace(self, name: str, *, content: bytes | None = None, source: Path | None = None) -> Path:
        destination = self.destination(name)
        try:
            handle, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.hooks_dir)
        except OSError as exc:
            raise HookWriteError(name, str(exc)) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(handle, "wb") as stream:
                if source is not None:
                    with source.open("rb") as src:
                        shutil.copyfileobj(src, stream)
                elif content is not None:
                    stream.write(content)
            os.chmod(tmp_path, HOOK_FILE_MODE)
            os.replace(tmp_path, destination)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise HookWriteError(name, str(exc)) from exc
        return destination


__all__ = ["HookWriter"]
