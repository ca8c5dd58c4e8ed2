"""Validated settings for the lattice kernel."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

SETTINGS_TABLE = "gridlattice"


class KernelSettings(BaseModel):
    """Tunable parameters shared by the coordinate algorithms."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    smooth_line_step: int = Field(default=8, ge=1)


_settings = KernelSettings()


def get_settings() -> KernelSettings:
    """Return the process-wide settings."""

    return _settings


def configure(**overrides: Any) -> KernelSettings:
    """Replace the process-wide settings, validating ``overrides``.

    Fields that are not overridden keep their current values.
    """

    global _settings
    payload = _settings.model_dump()
    payload.update(overrides)
    _settings = KernelSettings.model_validate(payload)
    logger.debug("kernel settings replaced: %s", _settings)
    return _settings


def reset_settings() -> KernelSettings:
    global _settings
    _settings = KernelSettings()
    return _settings


def load_settings(path: str | Path) -> KernelSettings:
    """Read settings from the ``[gridlattice]`` table of a TOML file.

    A missing table yields the defaults. The loaded settings are returned,
    not installed; pass them to :func:`configure` to apply them.
    """

    with Path(path).open("rb") as handle:
        document = tomllib.load(handle)
    table = document.get(SETTINGS_TABLE, {})
    if not isinstance(table, dict):
        raise TypeError(f"[{SETTINGS_TABLE}] must be a table")
    settings = KernelSettings.model_validate(table)
    logger.debug("loaded kernel settings from %s", path)
    return settings


__all__ = [
    "KernelSettings",
    "configure",
    "get_settings",
    "load_settings",
    "reset_settings",
]
