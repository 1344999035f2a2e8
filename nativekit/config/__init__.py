"""Configuration module for NativeKit.

This module provides YAML configuration parsing and validation for nativekit.yaml.
"""

from nativekit.config.parser import (
    DEFAULT_CONFIG_FILE,
    ToolchainConfig,
    NativeKitConfig,
    ConfigError,
    parse_config,
    parse_config_data,
    build_toolchain,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ToolchainConfig",
    "NativeKitConfig",
    "ConfigError",
    "parse_config",
    "parse_config_data",
    "build_toolchain",
]
