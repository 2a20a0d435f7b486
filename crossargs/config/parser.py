"""YAML configuration parser for crossargs.

This module provides parsing and validation for crossargs.yaml configuration files.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

import yaml

from crossargs.core.exceptions import ConfigurationError
from crossargs.flags.standard import DEFAULT_STANDARD, CppStandard

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "crossargs.yaml"
SUPPORTED_VERSION = 1


class ConfigError(ConfigurationError):
    """Configuration parsing or validation error."""

    pass


@dataclass
class FrameworksConfig:
    """Framework discovery configuration."""

    root: Optional[str] = None
    exclude: List[str] = field(default_factory=list)


@dataclass
class CrossArgsConfig:
    """Complete crossargs build configuration."""

    version: int = SUPPORTED_VERSION
    cpp_standard: CppStandard = DEFAULT_STANDARD
    platform_stdlib: bool = True
    includes: List[str] = field(default_factory=list)
    apple_args: List[str] = field(default_factory=list)
    android_args: List[str] = field(default_factory=list)
    frameworks: FrameworksConfig = field(default_factory=FrameworksConfig)


def parse_config(config_path: Path, required: bool = True) -> CrossArgsConfig:
    """
    Parse crossargs.yaml configuration file.

    Args:
        config_path: Path to crossargs.yaml
        required: If False, a missing file yields the default configuration

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid, or missing while required
    """
    if not config_path.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_path}")
        logger.debug(f"Config file not found (optional): {config_path}")
        return CrossArgsConfig()

    logger.debug(f"Loading configuration from {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return CrossArgsConfig()

    return parse_config_data(data)


def parse_config_data(data: dict) -> CrossArgsConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    version = data.get("version", SUPPORTED_VERSION)
    if version != SUPPORTED_VERSION:
        raise ConfigError(
            f"Unsupported version: {version} (expected {SUPPORTED_VERSION})"
        )

    try:
        cpp_standard = CppStandard.parse(data.get("cpp_standard", DEFAULT_STANDARD))
    except ConfigurationError as e:
        raise ConfigError(str(e))

    platform_stdlib = data.get("platform_stdlib", True)
    if not isinstance(platform_stdlib, bool):
        raise ConfigError("platform_stdlib must be true or false")

    return CrossArgsConfig(
        version=version,
        cpp_standard=cpp_standard,
        platform_stdlib=platform_stdlib,
        includes=_parse_string_list(data, "includes"),
        apple_args=_parse_string_list(data, "apple_args"),
        android_args=_parse_string_list(data, "android_args"),
        frameworks=_parse_frameworks(data.get("frameworks")),
    )


def _parse_string_list(data: dict, key: str) -> List[str]:
    """Parse an optional list of strings."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list")

    result = []
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise ConfigError(f"{key} entries must be strings, got: {item!r}")
        result.append(str(item))
    return result


def _parse_frameworks(data: Optional[dict]) -> FrameworksConfig:
    """Parse frameworks section."""
    if data is None:
        return FrameworksConfig()
    if not isinstance(data, dict):
        raise ConfigError("frameworks must be a mapping")

    root = data.get("root")
    if root is not None and not isinstance(root, str):
        raise ConfigError("frameworks.root must be a string")

    return FrameworksConfig(
        root=root,
        exclude=_parse_string_list(data, "exclude"),
    )
