# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths and project boundaries."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


def normalize_absolute(path: _Pathish, *, base_dir: _Pathish | None = None) -> Path:
    """Return ``path`` as an absolute, lexically normalised path.

    Relative inputs are joined onto ``base_dir`` (``Path.cwd()`` when omitted).
    ``.`` and ``..`` segments are collapsed without consulting the filesystem,
    so symlinks are left untouched.

    Args:
        path: Filesystem path supplied by the caller.
        base_dir: Directory used to anchor relative paths.

    Returns:
        Path: Absolute normalised path.

    Raises:
        ValueError: If ``path`` is ``None``.
    """

    if path is None:
        raise ValueError("path must not be None")

    raw_path = Path(path)
    if not raw_path.is_absolute():
        base = Path.cwd() if base_dir is None else normalize_absolute(base_dir)
        raw_path = base / raw_path
    return Path(os.path.normpath(raw_path))


def resolve_within(candidate: _Pathish, root: _Pathish) -> Path:
    """Return ``candidate`` resolved against ``root`` as an absolute path.

    Args:
        candidate: Path as configured, relative to ``root`` or absolute.
        root: Project root used to anchor relative candidates.

    Returns:
        Path: Normalised absolute form of ``candidate``.
    """

    return normalize_absolute(candidate, base_dir=normalize_absolute(root))


def is_contained(candidate: _Pathish, root: _Pathish) -> bool:
    """Return whether ``candidate`` lies inside ``root``.

    The comparison is component-wise on the normalised absolute forms, so a
    sibling such as ``/work/project-old`` is not inside ``/work/project``.

    Args:
        candidate: Path to check, relative to ``root`` or absolute.
        root: Directory acting as the containment boundary.

    Returns:
        bool: ``True`` when ``candidate`` equals or descends from ``root``.
    """

    boundary = normalize_absolute(root)
    resolved = resolve_within(candidate, boundary)
    return resolved.is_relative_to(boundary)


def display_relative_path(path: _Pathish, root: _Pathish) -> str:
    """Return a display-friendly representation of ``path`` relative to ``root``.

    Args:
        path: Path to present to the user.
        root: Base directory used for relativisation.

    Returns:
        str: Relative POSIX path when ``path`` is inside ``root``, otherwise
        the normalised absolute path.
    """

    boundary = normalize_absolute(root)
    resolved = resolve_within(path, boundary)
    try:
        return resolved.relative_to(boundary).as_posix()
    except ValueError:
        return str(resolved)


__all__ = ["display_relative_path", "is_contained", "normalize_absolute", "resolve_within"]
