"""Configuration module for crossargs.

This module provides YAML configuration parsing and validation for crossargs.yaml.
"""

from crossargs.config.parser import (
    ConfigError,
    CrossArgsConfig,
    FrameworksConfig,
    DEFAULT_CONFIG_NAME,
    parse_config,
    parse_config_data,
)

__all__ = [
    "ConfigError",
    "CrossArgsConfig",
    "FrameworksConfig",
    "DEFAULT_CONFIG_NAME",
    "parse_config",
    "parse_config_data",
]
