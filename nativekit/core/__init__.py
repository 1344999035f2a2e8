"""
Core module for NativeKit.

This module provides platform detection and the shared exception hierarchy.
"""

from nativekit.core.exceptions import (
    NativeKitError,
    ToolchainError,
    ToolchainUnavailableError,
    ToolchainConfigurationError,
    ToolExecutionError,
    ConfigError,
)
from nativekit.core.platform import (
    PlatformInfo,
    OperatingSystem,
    detect_platform,
    current_operating_system,
    clear_platform_cache,
)

__all__ = [
    # Exceptions
    "NativeKitError",
    "ToolchainError",
    "ToolchainUnavailableError",
    "ToolchainConfigurationError",
    "ToolExecutionError",
    "ConfigError",
    # Platform
    "PlatformInfo",
    "OperatingSystem",
    "detect_platform",
    "current_operating_system",
    "clear_platform_cache",
]
