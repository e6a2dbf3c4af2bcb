# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading for hook installation."""

from __future__ import annotations

from .loaders import (
    ConfigSource,
    DefaultConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    default_sources,
    load_hook_config,
)
from .models import ConfigError, HookConfig

__all__ = [
    "ConfigError",
    "ConfigSource",
    "DefaultConfigSource",
    "HookConfig",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_hook_config",
]
