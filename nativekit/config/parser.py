"""YAML configuration parser for NativeKit.

This module provides parsing and validation for nativekit.yaml configuration
files, and builds configured toolchains from them.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from nativekit.core.exceptions import ConfigError
from nativekit.core.platform import OperatingSystem
from nativekit.toolchain.gcc import GccToolChain
from nativekit.toolchain.tools import ToolRole

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "nativekit.yaml"

SUPPORTED_TYPES = ["gcc"]


@dataclass
class ToolchainConfig:
    """Configuration for a single named toolchain."""

    name: str
    type: str = "gcc"
    executables: Dict[ToolRole, str] = field(default_factory=dict)
    path: List[Path] = field(default_factory=list)


@dataclass
class NativeKitConfig:
    """Complete NativeKit configuration."""

    version: int
    toolchains: List[ToolchainConfig] = field(default_factory=list)
    default_toolchain: Optional[str] = None

    def get_toolchain(self, name: str) -> ToolchainConfig:
        """
        Get a toolchain configuration by name.

        Raises:
            ConfigError: If no toolchain has that name
        """
        for toolchain in self.toolchains:
            if toolchain.name == name:
                return toolchain
        raise ConfigError(f"Toolchain not defined in configuration: {name}")


def parse_config(config_path: Path) -> NativeKitConfig:
    """
    Parse nativekit.yaml configuration file.

    Relative search path entries are resolved against the directory
    containing the configuration file.

    Args:
        config_path: Path to nativekit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    logger.debug(f"Loaded configuration from {config_path}")
    return parse_config_data(data, base_dir=config_path.parent.absolute())


def parse_config_data(data: dict, base_dir: Optional[Path] = None) -> NativeKitConfig:
    """
    Validate already-loaded configuration data.

    Args:
        data: Configuration mapping (as loaded from YAML)
        base_dir: Directory relative search path entries are resolved against

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    if "toolchains" not in data or not data["toolchains"]:
        raise ConfigError("At least one toolchain must be defined")

    if not isinstance(data["toolchains"], list):
        raise ConfigError("toolchains must be a list")

    toolchains = []
    toolchain_names = set()

    for tc_data in data["toolchains"]:
        tc = _parse_toolchain(tc_data, base_dir)

        if tc.name in toolchain_names:
            raise ConfigError(f"Duplicate toolchain name: {tc.name}")

        toolchain_names.add(tc.name)
        toolchains.append(tc)

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigError("defaults must be a dictionary")

    default_toolchain = defaults.get("toolchain")
    if default_toolchain is not None:
        default_toolchain = str(default_toolchain)
    if default_toolchain is not None and default_toolchain not in toolchain_names:
        raise ConfigError(
            f"defaults.toolchain references undefined toolchain: {default_toolchain}"
        )

    return NativeKitConfig(
        version=data["version"],
        toolchains=toolchains,
        default_toolchain=default_toolchain,
    )


def _parse_toolchain(data: dict, base_dir: Optional[Path]) -> ToolchainConfig:
    """Parse toolchain configuration."""
    if not isinstance(data, dict):
        raise ConfigError("Each toolchain must be a mapping")

    if "name" not in data:
        raise ConfigError("Toolchain missing required field: name")

    tc_type = data.get("type", "gcc")
    if tc_type not in SUPPORTED_TYPES:
        raise ConfigError(
            f"Invalid toolchain type: {tc_type} (expected one of {SUPPORTED_TYPES})"
        )

    executables = {}
    for role in ToolRole:
        if role.config_key not in data:
            continue
        value = data[role.config_key]
        if not isinstance(value, str) or not value:
            raise ConfigError(
                f"Toolchain {data['name']}: {role.config_key} must be a non-empty string"
            )
        executables[role] = value

    path_entries = data.get("path", [])
    if not isinstance(path_entries, list):
        raise ConfigError(f"Toolchain {data['name']}: path must be a list")

    path = []
    for entry in path_entries:
        directory = Path(str(entry)).expanduser()
        if not directory.is_absolute() and base_dir is not None:
            directory = base_dir / directory
        path.append(directory)

    return ToolchainConfig(
        name=str(data["name"]), type=tc_type, executables=executables, path=path
    )


def build_toolchain(
    config: ToolchainConfig, operating_system: Optional[OperatingSystem] = None
) -> GccToolChain:
    """
    Create a toolchain from its configuration.

    Args:
        config: Toolchain configuration
        operating_system: Platform rules (default: the current host)

    Returns:
        Toolchain with executable overrides and search path applied
    """
    toolchain = GccToolChain(config.name, operating_system=operating_system)
    for role, executable in config.executables.items():
        toolchain.set_executable_name(role, executable)
    for directory in config.path:
        toolchain.add_path(directory)
    return toolchain
