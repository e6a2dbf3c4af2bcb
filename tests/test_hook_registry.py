# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the git hook name registry."""

from __future__ import annotations

import pytest

from hookinstall.hooks import GIT_HOOK_NAMES, GitHookType, available_hooks, is_valid_hook_name


@pytest.mark.parametrize("name", sorted(GIT_HOOK_NAMES))
def test_every_canonical_name_is_valid(name: str) -> None:
    assert is_valid_hook_name(name)


def test_registry_covers_common_client_hooks() -> None:
    for name in ("pre-commit", "prepare-commit-msg", "commit-msg", "post-commit", "pre-push", "post-merge"):
        assert name in GIT_HOOK_NAMES


def test_available_hooks_matches_enum_order() -> None:
    assert available_hooks() == tuple(member.value for member in GitHookType)
    assert set(available_hooks()) == GIT_HOOK_NAMES
    assert len(available_hooks()) == len(GIT_HOOK_NAMES)


@pytest.mark.parametrize(
    "name",
    [
        "",
        "Pre-Commit",
        "PRE-COMMIT",
        " pre-commit",
        "pre-commit ",
        "pre_commit",
        "pre-commit.sample",
        "my-pre-commit",
        "hooks/pre-commit",
        "../pre-commit",
        "not-a-hook",
    ],
)
def test_other_names_are_rejected(name: str) -> None:
    assert not is_valid_hook_name(name)


def test_non_string_is_rejected() -> None:
    assert not is_valid_hook_name(None)  # type: ignore[arg-type]
