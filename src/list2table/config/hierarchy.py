"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.list2table/config.yaml)
  3. Project config   (./list2table.yaml)
  4. Environment variables (LIST2TABLE_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from list2table.config.defaults import DEFAULT_SETTINGS_PATH, get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = DEFAULT_SETTINGS_PATH
_PROJECT_CONFIG_NAME = "list2table.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "LIST2TABLE_LEAVE_HEADER_EMPTY": "leave_header_empty",
    "LIST2TABLE_EMPTY_COLUMNS": "number_of_empty_columns",
    "LIST2TABLE_LOG_LEVEL": "log_level",
}

# Persisted settings use camelCase keys
_KEY_ALIASES: dict[str, str] = {
    "leaveHeaderEmpty": "leave_header_empty",
    "numberOfEmptyColumns": "number_of_empty_columns",
}

# Keys that should be parsed as specific types
_TYPE_MAP: dict[str, type] = {
    "number_of_empty_columns": int,
}

_BOOL_KEYS = {"leave_header_empty"}

# Boolean env var values
_TRUTHY = {"1", "true", "yes", "on"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        config.update(global_cfg)

    # Layer 3: Project config (search from cwd upward)
    project_path = _find_project_config()
    if project_path:
        project_cfg = load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    # Layer 4: Environment variables
    config.update(_load_env_vars())

    # Layer 5: Runtime arguments, only when explicitly set
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    return config


def load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists, with keys normalized to snake_case."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return None
        if isinstance(data, dict):
            return {_KEY_ALIASES.get(k, k): v for k, v in data.items()}
        logger.warning("Config file %s is not a mapping, ignoring", path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def _find_project_config() -> Path | None:
    """Search for list2table.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read LIST2TABLE_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    if key in _BOOL_KEYS:
        return value.strip().lower() in _TRUTHY

    target_type = _TYPE_MAP.get(key)
    if target_type:
        try:
            return target_type(value)
        except (ValueError, TypeError):
            logger.warning(
                "Cannot convert env var for '%s' to %s: %s", key, target_type.__name__, value
            )
            return value

    return value
