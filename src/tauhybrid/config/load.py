"""Main configuration loading functions.

- load_config(): Load from a file path
- load_config_string(): Load from a YAML string
"""

import os
from typing import Any, Dict

import yaml

from .errors import ConfigParseError, ConfigPathError, ConfigTypeError

__all__ = ["load_config", "load_config_string"]


def _check_mapping(cfg: Any, source: str) -> Dict[str, Any]:
    """Checks that a parsed configuration is a dictionary.

    Parameters
    ----------
    cfg : Any
        Parsed configuration
    source : str
        Where the configuration comes from (for error messages)

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary (empty if the source was empty)
    """
    if cfg is None:
        return {}

    if not isinstance(cfg, dict):
        raise ConfigTypeError(
            f"The configuration in {source} must be a dictionary, "
            f"got {type(cfg).__name__}."
        )

    return cfg


def load_config_string(config_string: str) -> Dict[str, Any]:
    """Load a configuration from a YAML string.

    Parameters
    ----------
    config_string : str
        YAML configuration string

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary
    """
    try:
        cfg = yaml.safe_load(config_string)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Error parsing <string>: {exc}") from exc

    return _check_mapping(cfg, "<string>")


def load_config(cfg_path: str) -> Dict[str, Any]:
    """Load a configuration from a YAML file.

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary
    """
    cfg_path = os.path.abspath(cfg_path)
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ConfigPathError(f"Configuration file not found: {cfg_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Error parsing {cfg_path}: {exc}") from exc

    return _check_mapping(cfg, cfg_path)
