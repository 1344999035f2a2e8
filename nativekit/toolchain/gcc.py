"""
nativekit/toolchain/gcc.py

GNU G++ toolchain: tool discovery, version gating and adapter creation.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..core.exceptions import ToolchainUnavailableError
from ..core.platform import OperatingSystem, current_operating_system
from .adapters import (
    ArStaticLibraryArchiver,
    Assembler,
    CCompiler,
    CppCompiler,
    GppLinker,
    ToolAdapter,
)
from .availability import ToolChainAvailability
from .command_line import CommandLineTool, ExecFactory, default_exec_factory
from .registry import ToolRegistry
from .tools import ToolRole
from .version import GccVersionDeterminer, VersionProbe, derive_command_file_support


class ToolChainState(Enum):
    """Lifecycle of a toolchain instance."""

    UNCONFIGURED = "unconfigured"  # Just constructed
    CONFIGURING = "configuring"  # Executable names or search path changed
    CHECKED = "checked"  # Availability checked at least once
    ADAPTER_READY = "adapter_ready"  # An adapter has been created


class GccToolChain:
    """
    Toolchain backed by the GNU compiler collection.

    The toolchain version is determined from the C++ compiler on the first
    availability check that can locate it, and is kept from then on.
    Changing executable names or the search path later does not re-derive
    it; call force_recheck() to start over.

    Example:
        >>> toolchain = GccToolChain("gcc")
        >>> toolchain.add_path("/opt/gcc-13/bin")
        >>> availability = toolchain.check_availability()
        >>> if availability.is_available:
        ...     compiler = toolchain.create_cpp_compiler()
    """

    DEFAULT_NAME = "gcc"
    type_name = "GNU G++"

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        operating_system: Optional[OperatingSystem] = None,
        exec_factory: ExecFactory = default_exec_factory,
        version_probe: Optional[VersionProbe] = None,
    ):
        """
        Initialize toolchain with default executable names.

        Args:
            name: Name of this toolchain configuration
            operating_system: Platform rules (default: the current host)
            exec_factory: Runs external processes for created adapters
            version_probe: Determines the compiler version (default: g++ probe)
        """
        self.name = name
        self.operating_system = operating_system or current_operating_system()
        self.exec_factory = exec_factory
        self.version_probe = version_probe or GccVersionDeterminer()
        self.executables = ToolRegistry(self.operating_system)
        self._version: Optional[str] = None
        self._state = ToolChainState.UNCONFIGURED

    @property
    def display_name(self) -> str:
        return f"Tool chain '{self.name}' ({self.type_name})"

    def __str__(self) -> str:
        return self.display_name

    @property
    def state(self) -> ToolChainState:
        return self._state

    @property
    def version(self) -> Optional[str]:
        """Cached compiler version, or None if not determined yet."""
        return self._version

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def check_availability(self) -> ToolChainAvailability:
        """
        Check that every tool can be located and the version is known.

        Returns:
            Availability verdict with one reason per missing tool, plus one
            if the version could not be determined
        """
        availability = ToolChainAvailability()
        for role in ToolRole:
            availability.must_exist(
                role.display_name,
                self.executables.get_executable_name(role),
                self.executables.locate(role),
            )

        if self._version is None:
            self.determine_version()
        if self._version is None:
            availability.unavailable("Could not determine G++ version.")

        if self._state in (ToolChainState.UNCONFIGURED, ToolChainState.CONFIGURING):
            self._state = ToolChainState.CHECKED
        return availability

    def determine_version(self) -> Optional[str]:
        """
        Probe the C++ compiler for its version and cache the result.

        Once a version is cached it is returned as-is; only force_recheck()
        clears it.

        Returns:
            The version, or None if the compiler is missing or did not report one
        """
        if self._version is not None:
            return self._version
        executable = self.executables.locate(ToolRole.CPP_COMPILER)
        if executable is not None:
            self._version = self.version_probe.probe(executable)
        return self._version

    def force_recheck(self) -> None:
        """
        Forget the cached version and all resolved tool locations.

        The next availability check locates every tool and probes the
        version again.
        """
        self._version = None
        self.executables.clear_cache()
        self._state = ToolChainState.CONFIGURING

    # ------------------------------------------------------------------
    # Adapters
    # ------------------------------------------------------------------

    def create_adapter(self, role: ToolRole) -> ToolAdapter:
        """
        Create the adapter for a tool role.

        Args:
            role: Tool role to create an adapter for

        Returns:
            Adapter wrapping the located executable

        Raises:
            ToolchainUnavailableError: If any tool or the version is missing
            ToolchainConfigurationError: If the version has no integer major part
        """
        availability = self.check_availability()
        if not availability.is_available:
            raise ToolchainUnavailableError(self.display_name, availability.reasons)

        command_line_tool = self._command_line_tool(role)

        if role is ToolRole.CPP_COMPILER:
            adapter = CppCompiler(command_line_tool, self._can_use_command_file())
        elif role is ToolRole.C_COMPILER:
            adapter = CCompiler(command_line_tool, self._can_use_command_file())
        elif role is ToolRole.ASSEMBLER:
            adapter = Assembler(command_line_tool)
        elif role is ToolRole.LINKER:
            adapter = GppLinker(command_line_tool, self._can_use_command_file())
        elif role is ToolRole.STATIC_LIB_ARCHIVER:
            adapter = ArStaticLibraryArchiver(command_line_tool)
        else:
            raise ValueError(f"Unsupported tool role: {role}")

        self._state = ToolChainState.ADAPTER_READY
        return adapter

    def create_cpp_compiler(self) -> CppCompiler:
        return self.create_adapter(ToolRole.CPP_COMPILER)

    def create_c_compiler(self) -> CCompiler:
        return self.create_adapter(ToolRole.C_COMPILER)

    def create_assembler(self) -> Assembler:
        return self.create_adapter(ToolRole.ASSEMBLER)

    def create_linker(self) -> GppLinker:
        return self.create_adapter(ToolRole.LINKER)

    def create_static_library_archiver(self) -> ArStaticLibraryArchiver:
        return self.create_adapter(ToolRole.STATIC_LIB_ARCHIVER)

    def _command_line_tool(self, role: ToolRole) -> CommandLineTool:
        executable = self.executables.locate(role)
        if executable is None:
            # Only reachable if the tool vanished between check and creation
            raise ToolchainUnavailableError(
                self.display_name,
                [
                    f"Could not find {role.display_name} "
                    f"'{self.executables.get_executable_name(role)}'."
                ],
            )
        tool = CommandLineTool(role.display_name, executable, self.exec_factory)
        return tool.with_search_path(self.path)

    def _can_use_command_file(self) -> bool:
        return derive_command_file_support(self._version)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def path(self) -> List[Path]:
        """Search path entries, in lookup order."""
        return self.executables.get_search_path()

    def add_path(self, directory: Union[str, Path]) -> None:
        """Append a directory to the search path."""
        self.executables.add_search_path_entry(directory)
        self._configured()

    def get_executable_name(self, role: ToolRole) -> str:
        return self.executables.get_executable_name(role)

    def set_executable_name(self, role: ToolRole, name: str) -> None:
        self.executables.set_executable_name(role, name)
        self._configured()

    def _configured(self) -> None:
        if self._state is ToolChainState.UNCONFIGURED:
            self._state = ToolChainState.CONFIGURING

    @property
    def cpp_compiler(self) -> str:
        return self.get_executable_name(ToolRole.CPP_COMPILER)

    @cpp_compiler.setter
    def cpp_compiler(self, name: str) -> None:
        self.set_executable_name(ToolRole.CPP_COMPILER, name)

    @property
    def c_compiler(self) -> str:
        return self.get_executable_name(ToolRole.C_COMPILER)

    @c_compiler.setter
    def c_compiler(self, name: str) -> None:
        self.set_executable_name(ToolRole.C_COMPILER, name)

    @property
    def assembler(self) -> str:
        return self.get_executable_name(ToolRole.ASSEMBLER)

    @assembler.setter
    def assembler(self, name: str) -> None:
        self.set_executable_name(ToolRole.ASSEMBLER, name)

    @property
    def linker(self) -> str:
        return self.get_executable_name(ToolRole.LINKER)

    @linker.setter
    def linker(self, name: str) -> None:
        self.set_executable_name(ToolRole.LINKER, name)

    @property
    def static_lib_archiver(self) -> str:
        return self.get_executable_name(ToolRole.STATIC_LIB_ARCHIVER)

    @static_lib_archiver.setter
    def static_lib_archiver(self, name: str) -> None:
        self.set_executable_name(ToolRole.STATIC_LIB_ARCHIVER, name)
