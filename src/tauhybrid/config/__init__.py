"""Configuration loading system.

Main Entry Points
-----------------
load_config : Load a configuration file
load_config_string : Load a configuration from a YAML string
default_config : Default configuration of the hybrid tau producer
"""

from .defaults import default_config
from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigPathError,
    ConfigTypeError,
    ConfigValidationError,
)
from .load import load_config, load_config_string

__all__ = [
    "load_config",
    "load_config_string",
    "default_config",
    "ConfigError",
    "ConfigParseError",
    "ConfigPathError",
    "ConfigTypeError",
    "ConfigValidationError",
]
