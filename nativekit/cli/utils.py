"""
Shared utilities for CLI commands.

Provides common functionality used across CLI commands: loading the
configuration file and building the toolchains a command operates on.
"""

import logging
from pathlib import Path
from typing import List, Optional

from nativekit.config.parser import (
    DEFAULT_CONFIG_FILE,
    NativeKitConfig,
    build_toolchain,
    parse_config,
)
from nativekit.core.exceptions import ConfigError
from nativekit.toolchain.gcc import GccToolChain
from nativekit.toolchain.tools import ToolRole

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def find_config_file(config_file: Optional[Path] = None) -> Optional[Path]:
    """
    Determine which configuration file to use.

    Args:
        config_file: Explicitly requested file (from --config)

    Returns:
        Path to configuration file, or None if no file applies

    Raises:
        ConfigError: If an explicitly requested file does not exist
    """
    if config_file is not None:
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_file}")
        return config_file

    default_config = Path.cwd() / DEFAULT_CONFIG_FILE
    if default_config.exists():
        return default_config

    return None


def load_config(config_file: Optional[Path] = None) -> Optional[NativeKitConfig]:
    """Load the configuration, or return None when there is none."""
    path = find_config_file(config_file)
    if path is None:
        logger.debug("No config file found, using default toolchain")
        return None
    return parse_config(path)


# ============================================================================
# Toolchain Construction
# ============================================================================


def resolve_toolchains(args) -> List[GccToolChain]:
    """
    Build the toolchains named on the command line.

    Names are looked up in the configuration. Without names, the configured
    default toolchain (or every configured toolchain) is used; without a
    configuration, a single default 'gcc' toolchain is used. Command-line
    overrides (--path, --cpp-compiler, ...) are applied to each toolchain.

    Args:
        args: Parsed arguments with config, names and override fields

    Returns:
        Configured toolchains, in the order requested

    Raises:
        ConfigError: If a name is not defined in the configuration
    """
    config = load_config(getattr(args, "config", None))
    names = list(getattr(args, "names", None) or [])

    if config is None:
        toolchains = [GccToolChain(name) for name in names] or [GccToolChain()]
    else:
        if not names:
            if config.default_toolchain:
                names = [config.default_toolchain]
            else:
                names = [tc.name for tc in config.toolchains]
        toolchains = [build_toolchain(config.get_toolchain(name)) for name in names]

    for toolchain in toolchains:
        apply_overrides(toolchain, args)

    return toolchains


def apply_overrides(toolchain: GccToolChain, args) -> None:
    """Apply executable and search path overrides from the command line."""
    for role in ToolRole:
        executable = getattr(args, role.config_key, None)
        if executable:
            toolchain.set_executable_name(role, executable)

    for directory in getattr(args, "path", None) or []:
        toolchain.add_path(Path(directory).absolute())


# ============================================================================
# Output Helpers
# ============================================================================


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe characters if Unicode symbols can't be encoded.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.replace("✓", "[OK]").replace("✗", "[ERROR]")
        print(safe_message, file=file)
