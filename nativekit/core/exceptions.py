"""
Centralized exception hierarchy for NativeKit.

This module defines all custom exceptions used across the codebase
so that callers can tell recoverable unavailability apart from
configuration errors.
"""

from typing import List, Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class NativeKitError(Exception):
    """Base exception for all NativeKit errors."""

    pass


# ============================================================================
# Toolchain-related Exceptions
# ============================================================================


class ToolchainError(NativeKitError):
    """Base exception for toolchain-related errors."""

    pass


class ToolchainUnavailableError(ToolchainError):
    """Raised when an adapter is requested from a toolchain that is not usable."""

    def __init__(self, toolchain_name: str, reasons: List[str]):
        self.toolchain_name = toolchain_name
        self.reasons = list(reasons)
        super().__init__(
            f"{toolchain_name} is not available: {', '.join(self.reasons)}"
        )


class ToolchainConfigurationError(ToolchainError):
    """Raised when a toolchain version cannot be interpreted."""

    def __init__(self, message: str, version: Optional[str] = None):
        self.version = version
        super().__init__(message)


class ToolExecutionError(ToolchainError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, tool_name: str, returncode: int, output: str = ""):
        self.tool_name = tool_name
        self.returncode = returncode
        self.output = output
        msg = f"{tool_name} failed with exit code {returncode}"
        if output:
            msg += f"\n{output}"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(NativeKitError):
    """Configuration parsing or validation error."""

    pass
