# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
User settings.

Settings are read from a YAML file and turned into ``ConversionOptions``
before a conversion runs; the conversion core never reads settings itself.

Example ``.recolor.yaml``::

    precision: 3
    use_opacity: false
    target_format: hex
    prompt_for_format: false

The editor-style camelCase keys (``useOpacity``, ``targetFormat``,
``promptForFormat``) are accepted too, optionally nested under a
``colorConverter`` section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from recolor.convert.numbers import clamp
from recolor.errors import SettingsError
from recolor.schema import (
    MAX_PRECISION,
    MIN_PRECISION,
    ConversionOptions,
    TargetFormat,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = ".recolor.yaml"

_SECTION = "colorConverter"

# snake_case name -> accepted spellings
_KEYS = {
    "precision": ("precision",),
    "use_opacity": ("use_opacity", "useOpacity"),
    "target_format": ("target_format", "targetFormat"),
    "prompt_for_format": ("prompt_for_format", "promptForFormat"),
}


@dataclass(frozen=True)
class Settings:
    """Persistent user preferences for conversions."""

    precision: int = 2
    use_opacity: bool = True
    target_format: TargetFormat = TargetFormat.OKLCH
    # Ask for the target format interactively instead of using target_format
    prompt_for_format: bool = False

    def to_options(
        self, target_format: Optional[TargetFormat] = None
    ) -> ConversionOptions:
        """Build conversion options, optionally overriding the format."""
        return ConversionOptions(
            target_format=target_format or self.target_format,
            precision=clamp_precision(self.precision),
            use_opacity=self.use_opacity,
        )


def clamp_precision(value: Any) -> int:
    """Coerce to int and clamp into the supported precision range."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise SettingsError(f"Precision must be an integer, got {value!r}") from None
    return int(clamp(n, MIN_PRECISION, MAX_PRECISION))


def settings_from_mapping(data: Optional[Mapping[str, Any]]) -> Settings:
    """
    Build ``Settings`` from a plain mapping.

    Missing keys take their defaults. Precision is clamped, not rejected.

    Raises:
        SettingsError: If a value has the wrong type or names an unknown
            target format.
    """
    if data is None:
        return Settings()
    if not isinstance(data, Mapping):
        raise SettingsError(f"Settings must be a mapping, got {type(data).__name__}")

    section = data.get(_SECTION)
    if isinstance(section, Mapping):
        data = section

    values = {}
    for name, spellings in _KEYS.items():
        for key in spellings:
            if key in data:
                values[name] = data[key]
                break

    defaults = Settings()
    try:
        target_format = TargetFormat.parse(values.get("target_format", defaults.target_format))
    except ValueError as exc:
        raise SettingsError(str(exc)) from None

    return Settings(
        precision=clamp_precision(values.get("precision", defaults.precision)),
        use_opacity=_as_bool("use_opacity", values.get("use_opacity", defaults.use_opacity)),
        target_format=target_format,
        prompt_for_format=_as_bool(
            "prompt_for_format",
            values.get("prompt_for_format", defaults.prompt_for_format),
        ),
    )


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file. If None, ``.recolor.yaml`` in the working
            directory is used when present, defaults otherwise.

    Raises:
        SettingsError: If an explicit ``path`` does not exist, or the file
            is not valid YAML or holds invalid values.
    """
    if path is None:
        candidate = Path(DEFAULT_SETTINGS_FILE)
        if not candidate.is_file():
            return Settings()
        path = candidate

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc

    settings = settings_from_mapping(data)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise SettingsError(f"{name} must be true or false, got {value!r}")
