"""stylemesh: Core Utilities
--------------------------

Shared helpers for configuration handling: YAML loading with framework error
mapping and deep dictionary merging for override chains.

Public API
----------
``load_yaml_file`` : Load a YAML mapping with error handling
``deep_merge_dicts`` : Recursive dictionary merge, override wins
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import StyleConfigError, StyleIOError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file whose top level is a mapping.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    dict[str, Any]
        Loaded YAML data; an empty file yields an empty dict.

    Raises
    ------
    StyleIOError
        - [100] File does not exist.
    StyleConfigError
        - [501] File cannot be parsed or is not a mapping.

    """
    if not path.exists():
        raise StyleIOError(f"[100] File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise StyleConfigError(f"[501] Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise StyleConfigError(f"[501] Expected a mapping at the top of {path}")
    return data


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override values taking precedence.

    Parameters
    ----------
    base : dict[str, Any]
        Base dictionary
    override : dict[str, Any]
        Override dictionary

    Returns
    -------
    dict[str, Any]
        Merged dictionary; neither input is modified.

    """
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
