# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for hook installation."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from hookinstall.constants import DEFAULT_SCRIPT

RESOURCE_HOOKS_KEY: Final[str] = "resource-hooks"
RESOURCE_HOOKS_ALIASES: Final[tuple[str, ...]] = (RESOURCE_HOOKS_KEY, "resource_hooks", "resourceHooks")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class HookConfig(BaseModel):
    """Hooks requested for a project.

    ``hooks`` maps hook names to a marker whose value is not used for content;
    each listed hook receives ``script``. ``resource_hooks`` maps hook names to
    script paths relative to the project root.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hooks: dict[str, str] = Field(default_factory=dict)
    resource_hooks: dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(*RESOURCE_HOOKS_ALIASES),
        serialization_alias=RESOURCE_HOOKS_KEY,
    )
    script: str = DEFAULT_SCRIPT

    @field_validator("hooks", mode="before")
    @classmethod
    def _coerce_markers(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(name): "" if marker is None else str(marker) for name, marker in value.items()}
        return value

    @field_validator("resource_hooks", mode="before")
    @classmethod
    def _coerce_resource_paths(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                str(name): os.fspath(path) if isinstance(path, (str, os.PathLike)) else path
                for name, path in value.items()
            }
        return value

    def merged_with(
        self,
        *,
        hooks: Mapping[str, str] | None = None,
        resource_hooks: Mapping[str, str] | None = None,
        script: str | None = None,
    ) -> HookConfig:
        """Return a copy with ``hooks`` and ``resource_hooks`` layered on top.

        Existing entries keep their position; new names are appended.
        """

        return HookConfig(
            hooks={**self.hooks, **(hooks or {})},
            resource_hooks={**self.resource_hooks, **(resource_hooks or {})},
            script=self.script if script is None else script,
        )


__all__ = ["ConfigError", "HookConfig", "RESOURCE_HOOKS_ALIASES", "RESOURCE_HOOKS_KEY"]
