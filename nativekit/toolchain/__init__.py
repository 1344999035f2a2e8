"""
Toolchain module for NativeKit.

This module provides functionality for:
- Locating the executables of each tool role (registry)
- Determining the compiler version and derived capabilities
- Checking toolchain availability
- Creating tool adapters for compilers, assembler, linker and archiver
"""

from nativekit.toolchain.tools import ToolRole
from nativekit.toolchain.registry import ToolRegistry
from nativekit.toolchain.availability import ToolChainAvailability
from nativekit.toolchain.version import (
    VersionProbe,
    GccVersionDeterminer,
    derive_command_file_support,
)
from nativekit.toolchain.command_line import CommandLineTool, default_exec_factory
from nativekit.toolchain.adapters import (
    ToolAdapter,
    CommandFileToolAdapter,
    CppCompiler,
    CCompiler,
    Assembler,
    GppLinker,
    ArStaticLibraryArchiver,
)
from nativekit.toolchain.gcc import GccToolChain, ToolChainState

__all__ = [
    # Tool roles and discovery
    "ToolRole",
    "ToolRegistry",
    "ToolChainAvailability",
    # Versions
    "VersionProbe",
    "GccVersionDeterminer",
    "derive_command_file_support",
    # Execution
    "CommandLineTool",
    "default_exec_factory",
    "ToolAdapter",
    "CommandFileToolAdapter",
    "CppCompiler",
    "CCompiler",
    "Assembler",
    "GppLinker",
    "ArStaticLibraryArchiver",
    # Toolchains
    "GccToolChain",
    "ToolChainState",
]
