# SPDX-License-Identifier: GPL-3.0-or-later
"""
Run configuration.

Values come from defaults, an optional YAML file, then command-line options,
in that order. Example file::

    package: icons
    strict: true
    gofmt: /usr/local/go/bin/gofmt
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from .errors import ConfigError
from .formatter import DEFAULT_GOFMT

DEFAULT_PACKAGE = "assets"


@dataclass(frozen=True)
class Config:
    package: str = DEFAULT_PACKAGE
    strict: bool = False
    gofmt: str = DEFAULT_GOFMT

    def replace(self, **overrides: Any) -> "Config":
        """Return a copy with every override that is not None applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)


# Expected type of each key in a config file
_FIELD_TYPES = {
    "package": str,
    "strict": bool,
    "gofmt": str,
}


def parse_config(yaml_string: str) -> Config:
    """
    Parse YAML content into a Config.

    An empty document yields the defaults.

    Raises:
        ConfigError: on invalid YAML, unknown keys or wrongly typed values
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}") from e

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping, got {type(data).__name__}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        expected = _FIELD_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"unknown key: {key!r}")
        if not isinstance(value, expected):
            raise ConfigError(
                f"{key}: expected {expected.__name__}, got {type(value).__name__}"
            )
        values[key] = value

    return Config(**values)


def load_config(path: str) -> Config:
    """Read and parse a YAML config file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e

    try:
        return parse_config(content)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e
