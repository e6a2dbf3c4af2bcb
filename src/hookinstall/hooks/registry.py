# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of hook names recognised by git."""

from __future__ import annotations

from enum import Enum
from typing import Final


class GitHookType(str, Enum):
    """Enumerate the hooks documented in ``githooks(5)``."""

    APPLYPATCH_MSG = "applypatch-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    POST_APPLYPATCH = "post-applypatch"
    PRE_COMMIT = "pre-commit"
    PRE_MERGE_COMMIT = "pre-merge-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"
    COMMIT_MSG = "commit-msg"
    POST_COMMIT = "post-commit"
    PRE_REBASE = "pre-rebase"
    POST_CHECKOUT = "post-checkout"
    POST_MERGE = "post-merge"
    PRE_PUSH = "pre-push"
    PRE_RECEIVE = "pre-receive"
    UPDATE = "update"
    PROC_RECEIVE = "proc-receive"
    POST_RECEIVE = "post-receive"
    POST_UPDATE = "post-update"
    REFERENCE_TRANSACTION = "reference-transaction"
    PUSH_TO_CHECKOUT = "push-to-checkout"
    PRE_AUTO_GC = "pre-auto-gc"
    POST_REWRITE = "post-rewrite"
    SENDEMAIL_VALIDATE = "sendemail-validate"
    FSMONITOR_WATCHMAN = "fsmonitor-watchman"
    P4_CHANGELIST = "p4-changelist"
    P4_PREPARE_CHANGELIST = "p4-prepare-changelist"
    P4_POST_CHANGELIST = "p4-post-changelist"
    P4_PRE_SUBMIT = "p4-pre-submit"
    POST_INDEX_CHANGE = "post-index-change"


_ORDERED_HOOKS: Final[tuple[str, ...]] = tuple(member.value for member in GitHookType)
GIT_HOOK_NAMES: Final[frozenset[str]] = frozenset(_ORDERED_HOOKS)


def available_hooks() -> tuple[str, ...]:
    """Return every recognised git hook name in documentation order.

    Returns:
        tuple[str, ...]: Hook identifiers accepted by :func:`is_valid_hook_name`.
    """

    return _ORDERED_HOOKS


def is_valid_hook_name(name: str) -> bool:
    """Return whether ``name`` exactly matches a git hook name.

    Matching is case-sensitive and performs no trimming.

    Args:
        name: Hook name supplied by the caller.

    Returns:
        bool: ``True`` when the hook is recognised by git.
    """

    return isinstance(name, str) and name in GIT_HOOK_NAMES


__all__ = ["GIT_HOOK_NAMES", "GitHookType", "available_hooks", "is_valid_hook_name"]
