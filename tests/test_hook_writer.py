# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for writing hook files."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from hookinstall.hooks import HookWriteError, HookWriter


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_write_inline_prepends_shebang(hooks_dir: Path) -> None:
    writer = HookWriter(hooks_dir, use_emoji=False)

    destination = writer.write_inline("pre-commit", "echo hello\n")

    assert destination == hooks_dir / "pre-commit"
    assert destination.read_bytes() == b"#!/bin/sh\necho hello\n"
    assert _mode(destination) == 0o700


def test_write_inline_truncates_existing_content(hooks_dir: Path) -> None:
    existing = hooks_dir / "pre-commit"
    existing.write_text("#!/bin/bash\n" + "echo old\n" * 50, encoding="utf-8")
    existing.chmod(0o777)

    HookWriter(hooks_dir, use_emoji=False).write_inline("pre-commit", "true")

    assert existing.read_text(encoding="utf-8") == "#!/bin/sh\ntrue"
    assert _mode(existing) == 0o700


def test_write_inline_ignores_umask(hooks_dir: Path) -> None:
    previous = os.umask(0o077)
    try:
        destination = HookWriter(hooks_dir, use_emoji=False).write_inline("commit-msg", "exit 0\n")
    finally:
        os.umask(previous)

    assert _mode(destination) == 0o700


def test_write_inline_replaces_symlink_without_touching_target(git_repo: Path, hooks_dir: Path) -> None:
    template = git_repo / "template.sh"
    template.write_text("#!/bin/sh\necho template\n", encoding="utf-8")
    (hooks_dir / "pre-push").symlink_to(template)

    destination = HookWriter(hooks_dir, use_emoji=False).write_inline("pre-push", "echo new\n")

    assert not destination.is_symlink()
    assert destination.read_text(encoding="utf-8") == "#!/bin/sh\necho new\n"
    assert template.read_text(encoding="utf-8") == "#!/bin/sh\necho template\n"


def test_copy_from_source_copies_bytes_verbatim(git_repo: Path, hooks_dir: Path) -> None:
    payload = b"#!/usr/bin/env python3\r\nprint('hi')\n\x00\xff no trailing newline"
    source = git_repo / "scripts" / "hook.py"
    source.parent.mkdir()
    source.write_bytes(payload)
    source.chmod(0o644)

    destination = HookWriter(hooks_dir, use_emoji=False).copy_from_source("pre-push", source)

    assert destination == hooks_dir / "pre-push"
    assert destination.read_bytes() == payload
    assert _mode(destination) == 0o700
    assert _mode(source) == 0o644


def test_copy_from_source_skips_missing_file(hooks_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    existing = hooks_dir / "pre-push"
    existing.write_text("keep me", encoding="utf-8")

    result = HookWriter(hooks_dir, use_emoji=False).copy_from_source("pre-push", hooks_dir / "missing.sh")

    assert result is None
    assert existing.read_text(encoding="utf-8") == "keep me"
    assert "not found" in capsys.readouterr().out


def test_copy_from_source_skips_directories(git_repo: Path, hooks_dir: Path) -> None:
    source = git_repo / "scripts"
    source.mkdir()

    assert HookWriter(hooks_dir, use_emoji=False).copy_from_source("pre-push", source) is None
    assert not (hooks_dir / "pre-push").exists()


def test_write_failure_raises_and_leaves_no_partial_file(
    hooks_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    existing = hooks_dir / "pre-commit"
    existing.write_text("original", encoding="utf-8")

    def _fail_replace(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("hookinstall.hooks.writer.os.replace", _fail_replace)

    with pytest.raises(HookWriteError) as excinfo:
        HookWriter(hooks_dir, use_emoji=False).write_inline("pre-commit", "echo new")

    assert excinfo.value.hook_name == "pre-commit"
    assert isinstance(excinfo.value.__cause__, OSError)
    assert existing.read_text(encoding="utf-8") == "original"
    assert sorted(path.name for path in hooks_dir.iterdir()) == ["pre-commit"]


def test_missing_hooks_directory_raises_write_error(tmp_path: Path) -> None:
    writer = HookWriter(tmp_path / "absent", use_emoji=False)

    with pytest.raises(HookWriteError):
        writer.write_inline("pre-commit", "true")
