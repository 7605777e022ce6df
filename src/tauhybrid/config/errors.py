"""Typed exceptions for configuration loading and validation.

This module defines specific exception types for different kinds of
configuration errors, making it easier to handle and debug issues.
"""


class ConfigError(Exception):
    """Base exception for all configuration errors."""


class ConfigPathError(ConfigError):
    """Raised when a configuration file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when a configuration file or string is not valid YAML."""


class ConfigTypeError(ConfigError):
    """Raised when a configuration block does not have the expected type."""


class ConfigValidationError(ConfigError):
    """Raised when a configuration block misses a parameter or carries an
    unknown one.
    """
