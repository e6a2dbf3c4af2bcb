# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject)."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from hookinstall.constants import PROJECT_CONFIG_NAME, PYPROJECT_NAME, PYPROJECT_SECTION_KEY

from .models import RESOURCE_HOOKS_ALIASES, RESOURCE_HOOKS_KEY, ConfigError, HookConfig

PYPROJECT_TOOL_KEY = "tool"
_TABLE_KEYS = ("hooks", RESOURCE_HOOKS_KEY)


@runtime_checkable
class ConfigSource(Protocol):
    """Provide a configuration fragment and a human-readable description."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration fragment supplied by this source."""
        ...

    def describe(self) -> str:
        """Return a description used in diagnostics."""
        ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return HookConfig().model_dump(by_alias=True)

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self.path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        return self._read()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            if self._required:
                raise ConfigError(f"Configuration file not found: {self.path}")
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self.path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self.path} must be a table")
        return dict(data)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.hookinstall]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {self.path} must be a table")
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def default_sources(root: Path, *, config_path: Path | None = None) -> list[ConfigSource]:
    """Return configuration sources for ``root`` ordered by increasing precedence.

    Args:
        root: Project root holding ``pyproject.toml`` and ``.hookinstall.toml``.
        config_path: Explicit configuration file replacing ``.hookinstall.toml``.

    Returns:
        list[ConfigSource]: Sources to merge, lowest precedence first.
    """

    project_file = TomlConfigSource(
        config_path if config_path is not None else root / PROJECT_CONFIG_NAME,
        required=config_path is not None,
    )
    return [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_NAME),
        project_file,
    ]


def load_hook_config(
    root: Path,
    *,
    config_path: Path | None = None,
    sources: Iterable[ConfigSource] | None = None,
) -> HookConfig:
    """Load the merged hook configuration for ``root``.

    Args:
        root: Project root.
        config_path: Optional explicit TOML file; it must exist when given.
        sources: Optional sources overriding the default discovery.

    Returns:
        HookConfig: Validated configuration.

    Raises:
        ConfigError: Raised when a source is malformed or fails validation.
    """

    active = list(sources) if sources is not None else default_sources(root, config_path=config_path)
    merged: dict[str, Any] = {}
    for source in active:
        fragment = _normalise_fragment(source.load(), origin=source.describe())
        merged = _merge_fragment(merged, fragment)
    try:
        return HookConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid hook configuration: {exc}") from exc


def _normalise_fragment(fragment: Mapping[str, Any], *, origin: str) -> dict[str, Any]:
    normalised: dict[str, Any] = {}
    for key, value in fragment.items():
        target = RESOURCE_HOOKS_KEY if key in RESOURCE_HOOKS_ALIASES else key
        if target == "hooks" and isinstance(value, Sequence) and not isinstance(value, str):
            value = {str(name): "" for name in value}
        if target in _TABLE_KEYS and not isinstance(value, Mapping):
            raise ConfigError(f"'{key}' in {origin} must be a table")
        normalised[target] = value
    return normalised


def _merge_fragment(base: Mapping[str, Any], fragment: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in fragment.items():
        current = result.get(key)
        if key in _TABLE_KEYS and isinstance(current, Mapping):
            result[key] = {**current, **value}
        else:
            result[key] = value
    return result


__all__ = [
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_hook_config",
]
