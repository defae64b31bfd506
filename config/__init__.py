"""Configuration module for case-convert.

Settings come from the bundled ``default.yaml``. A user file passed to
``load_config`` is layered on top of it, so it only needs the keys it
changes.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default.yaml'


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return data or {}


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries.

    Nested dictionaries are merged key by key; any other value in
    ``override`` replaces the one in ``base``. Neither input is modified.

    Args:
        base: Lower-priority configuration.
        override: Higher-priority configuration.

    Returns:
        New merged dictionary.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration, layering a user YAML file over the defaults.

    Args:
        config_path: Path to a user config file. Only default.yaml is read
            if not specified.

    Returns:
        Dictionary containing configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the config file is invalid YAML.
    """
    config = _read_yaml(DEFAULT_CONFIG_PATH)

    if config_path:
        config = merge_config(config, _read_yaml(Path(config_path)))

    return config


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated path to the value (e.g., 'converter.default_style').
        default: Default value if key is not found.

    Returns:
        The configuration value or default.
    """
    value = config

    for key in key_path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = ['load_config', 'merge_config', 'get_config_value', 'DEFAULT_CONFIG_PATH']
