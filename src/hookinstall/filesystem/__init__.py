# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers shared across hookinstall."""

from __future__ import annotations

from .paths import display_relative_path, is_contained, normalize_absolute, resolve_within

__all__ = ["display_relative_path", "is_contained", "normalize_absolute", "resolve_within"]
