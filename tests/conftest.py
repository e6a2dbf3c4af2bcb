# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Return a project root containing an empty ``.git/hooks`` directory."""

    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def hooks_dir(git_repo: Path) -> Path:
    """Return the hooks directory of ``git_repo``."""

    return git_repo / ".git" / "hooks"
