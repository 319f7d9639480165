# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the dbustree configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ToolConfig:
    """Default presentation and connection settings.

    Attributes:
        indent: String repeated once per indentation level.
        color: Decorate output with terminal colors.
        signatures: Show raw signatures instead of decoded type names.
        system_bus: Connect to the system bus instead of the session bus.
        show_values: Fetch and print live property values.
    """

    indent: str = "  "
    color: bool = True
    signatures: bool = False
    system_bus: bool = False
    show_values: bool = True


def load_config(path: Path) -> ToolConfig:
    """Load and parse a dbustree configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A ToolConfig instance; keys absent from the file keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################

_STRING_KEYS: dict[str, str] = {
    "indent": "indent",
}

_BOOL_KEYS: dict[str, str] = {
    "color": "color",
    "signatures": "signatures",
    "system-bus": "system_bus",
    "show-values": "show_values",
}


def _parse_config(text: str, source_label: str = "<string>") -> ToolConfig:
    """Parse configuration YAML text into a ToolConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid, not a mapping, has unknown keys,
            or has values of the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ToolConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _STRING_KEYS and key not in _BOOL_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = ToolConfig()
    for key, attribute in _STRING_KEYS.items():
        if key in data:
            setattr(config, attribute, _require_type(data, key, str, source_label))
    for key, attribute in _BOOL_KEYS.items():
        if key in data:
            setattr(config, attribute, _require_type(data, key, bool, source_label))
    return config


def _require_type(mapping: dict[str, object], key: str, expected: type, source_label: str) -> object:
    """Return ``mapping[key]``, raising ConfigError if it is not of *expected* type."""
    value = mapping[key]
    if not isinstance(value, expected):
        raise ConfigError(f"{source_label}: '{key}' must be a {_TYPE_NAMES[expected]}")
    return value


_TYPE_NAMES: dict[type, str] = {
    str: "string",
    bool: "boolean",
}
